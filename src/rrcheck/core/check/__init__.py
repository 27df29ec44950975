from .controller import RichResultsCheck
from .markers import TerminalMarker, match_terminal_marker
from .models import OutputName, RunArtifacts, RunResult, Verdict
from .run import run_check

__all__ = [
    "OutputName",
    "RichResultsCheck",
    "RunArtifacts",
    "RunResult",
    "TerminalMarker",
    "Verdict",
    "match_terminal_marker",
    "run_check",
]
