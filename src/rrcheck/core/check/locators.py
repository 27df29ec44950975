"""Descriptors for the UI elements a run interacts with."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum


class LocatorKind(StrEnum):
    STRUCTURAL = "structural"
    TEXT = "text"


@dataclass(frozen=True)
class Locator:
    selector: str
    kind: LocatorKind = LocatorKind.STRUCTURAL

    @classmethod
    def css(cls, selector: str) -> Locator:
        return cls(selector)

    @classmethod
    def text(cls, container: str, text: str) -> Locator:
        """Locate a ``container`` element by the visible text inside it."""
        return cls(f'{container}:has-text("{text}")', LocatorKind.TEXT)

    @property
    def is_text(self) -> bool:
        return self.kind is LocatorKind.TEXT


@dataclass(frozen=True)
class UiTarget:
    """One logical control, with alternative locators tried in order."""

    name: str
    locators: tuple[Locator, ...]

    def __post_init__(self) -> None:
        if not self.locators:
            raise ValueError(f"UI target '{self.name}' needs at least one locator")

    @property
    def slug(self) -> str:
        return re.sub(r"\s+", "-", self.name.strip().lower())


@dataclass(frozen=True)
class InteractionStep:
    target: UiTarget
    wait_ms: int
    settle_ms: int

    @property
    def name(self) -> str:
        return self.target.name
