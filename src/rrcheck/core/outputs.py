"""Handing run outputs to the CI environment."""

from __future__ import annotations

import os
import uuid
from pathlib import Path


def github_output_path() -> Path | None:
    value = os.environ.get("GITHUB_OUTPUT")
    return Path(value) if value else None


def write_outputs(outputs: dict[str, str], target: Path | None = None) -> bool:
    """Append ``outputs`` to the GitHub Actions output file.

    Returns False when no output file is configured.
    """
    target = target or github_output_path()
    if target is None:
        return False

    lines: list[str] = []
    for name, value in outputs.items():
        if "\n" in value:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            lines.append(f"{name}<<{delimiter}\n{value}\n{delimiter}")
        else:
            lines.append(f"{name}={value}")

    with open(target, "a", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")
    return True
