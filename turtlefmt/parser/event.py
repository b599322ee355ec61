"""Parser events."""

from dataclasses import dataclass
from typing import Protocol

from turtlefmt.diagnostics import Diagnostic
from turtlefmt.syntax import TurtleSyntaxKind
from turtlefmt.text import TextSize


@dataclass(frozen=True, slots=True)
class StartEvent:
    kind: TurtleSyntaxKind
    forward_parent: int | None = None

    @staticmethod
    def tombstone() -> "StartEvent":
        return StartEvent(kind=TurtleSyntaxKind.TOMBSTONE, forward_parent=None)


@dataclass(frozen=True, slots=True)
class FinishEvent:
    pass


@dataclass(frozen=True, slots=True)
class TokenEvent:
    kind: TurtleSyntaxKind
    end: TextSize


type Event = StartEvent | FinishEvent | TokenEvent


class TreeSink(Protocol):
    def token(self, kind: TurtleSyntaxKind, end: TextSize) -> None: ...

    def start_node(self, kind: TurtleSyntaxKind) -> None: ...

    def finish_node(self) -> None: ...

    def errors(self, errors: list[Diagnostic]) -> None: ...


def process_events(
    sink: TreeSink,
    events: list[Event],
    errors: list[Diagnostic],
) -> None:
    sink.errors(errors)
    forward_parents: list[TurtleSyntaxKind] = []

    idx = 0
    while idx < len(events):
        event = events[idx]
        match event:
            case StartEvent(kind=TurtleSyntaxKind.TOMBSTONE):
                pass
            case StartEvent():
                forward_parents.append(event.kind)
                parent_idx = idx
                parent_offset = event.forward_parent

                while parent_offset is not None:
                    parent_idx += parent_offset
                    if parent_idx >= len(events):
                        raise RuntimeError("Invalid forward_parent offset in parser events")

                    parent_event = events[parent_idx]
                    if not isinstance(parent_event, StartEvent):
                        raise RuntimeError("forward_parent must point to StartEvent")

                    events[parent_idx] = StartEvent.tombstone()
                    if parent_event.kind != TurtleSyntaxKind.TOMBSTONE:
                        forward_parents.append(parent_event.kind)
                    parent_offset = parent_event.forward_parent

                while forward_parents:
                    sink.start_node(forward_parents.pop())
            case FinishEvent():
                sink.finish_node()
            case TokenEvent(kind=kind, end=end):
                sink.token(kind, end)

        idx += 1
