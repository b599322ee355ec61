"""Comment placement and blank-line heuristics.

The functions here are pure: they only see rows and the current
``RootContext``, which keeps every spacing rule testable on its own.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum

from turtlefmt.ast import Comment

MAX_NEWLINES_BEFORE_COMMENT = 4


class RootContext(StrEnum):
    """What the document formatter emitted last."""

    START = "start"
    PREFIXES = "prefixes"
    TRIPLES = "triples"
    COMMENT = "comment"


def is_inline_comment(previous_row: int | None, comment_row: int) -> bool:
    """A comment on the row where the previous element ended trails that element.

    ``previous_row`` is ``None`` before the first element of the document.
    """
    return previous_row is not None and comment_row == previous_row


def newlines_before_block_comment(row_gap: int, context: RootContext) -> int:
    if context == RootContext.START:
        return 0
    minimum = 1 if context == RootContext.COMMENT else 2
    return max(minimum, min(row_gap, MAX_NEWLINES_BEFORE_COMMENT))


def newlines_before_directive(context: RootContext) -> int:
    """Newlines before ``@base`` or before a flushed group of ``@prefix`` lines."""
    match context:
        case RootContext.START:
            return 0
        case RootContext.TRIPLES:
            return 2
        case _:
            return 1


def newlines_before_triples(context: RootContext, start_row: int, previous_row: int) -> int:
    if context == RootContext.START:
        return 0
    # A statement right below a comment line stays attached to it.
    if context == RootContext.COMMENT and start_row <= previous_row + 1:
        return 1
    return 2


def render_comments(comments: Sequence[Comment], *, inline: bool) -> str:
    """Merge comments into one line comment, prefixed by a space when inline."""
    if not comments:
        return ""
    text = "#" + " ".join(comment.body for comment in comments)
    return f" {text}" if inline else text


@dataclass(slots=True)
class PendingComments:
    """Comments met inside a statement, waiting for the next join point."""

    _comments: list[Comment] = field(default_factory=list)

    def push(self, comment: Comment) -> None:
        self._comments.append(comment)

    def extend(self, comments: Iterable[Comment]) -> None:
        self._comments.extend(comments)

    def drain(self) -> list[Comment]:
        drained = self._comments
        self._comments = []
        return drained

    def __bool__(self) -> bool:
        return bool(self._comments)

    def __len__(self) -> int:
        return len(self._comments)
