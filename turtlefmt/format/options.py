"""Formatter styles and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class FormatStyle(StrEnum):
    """Top-level formatting profile."""

    DEFAULT = "default"
    DIFF_OPTIMIZED = "diff_optimized"


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Immutable configuration snapshot for one format call."""

    indentation: int = 4
    sort_terms: bool = False
    diff_minimizing_layout: bool = False
    single_object_on_new_line: bool = False
    force: bool = False

    def __post_init__(self) -> None:
        if self.indentation < 0:
            raise ValueError(f"indentation must be >= 0, got {self.indentation}")

    @staticmethod
    def for_style(style: FormatStyle, indentation: int = 4) -> "FormatOptions":
        if style == FormatStyle.DIFF_OPTIMIZED:
            return FormatOptions(
                indentation=indentation,
                sort_terms=True,
                diff_minimizing_layout=True,
            )

        return FormatOptions(indentation=indentation)

    @property
    def includes_sorting(self) -> bool:
        return self.sort_terms
