"""Markers for event-based parsing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from turtlefmt.parser.event import FinishEvent, StartEvent, TokenEvent
from turtlefmt.syntax import TurtleSyntaxKind
from turtlefmt.text import TextRange, TextSize

if TYPE_CHECKING:
    from turtlefmt.parser.parser import Parser


@dataclass(slots=True)
class Marker:
    pos: int
    start: TextSize

    def complete(self, parser: Parser, kind: TurtleSyntaxKind) -> CompletedMarker:
        event = parser.events[self.pos]
        if not isinstance(event, StartEvent):
            raise RuntimeError("Marker must point to a StartEvent")
        parser.events[self.pos] = StartEvent(kind=kind, forward_parent=event.forward_parent)

        finish_pos = len(parser.events)
        parser.events.append(FinishEvent())
        return CompletedMarker(start_pos=self.pos, finish_pos=finish_pos, offset=self.start)

    def abandon(self, parser: Parser) -> None:
        if self.pos == len(parser.events) - 1:
            event = parser.events[-1]
            if isinstance(event, StartEvent) and event.forward_parent is None:
                parser.events.pop()


@dataclass(frozen=True, slots=True)
class CompletedMarker:
    start_pos: int
    finish_pos: int
    offset: TextSize

    def kind(self, parser: Parser) -> TurtleSyntaxKind:
        event = parser.events[self.start_pos]
        if not isinstance(event, StartEvent):
            raise RuntimeError("CompletedMarker points to non-start event")
        return event.kind

    def change_kind(self, parser: Parser, new_kind: TurtleSyntaxKind) -> None:
        event = parser.events[self.start_pos]
        if not isinstance(event, StartEvent):
            raise RuntimeError("CompletedMarker points to non-start event")
        parser.events[self.start_pos] = StartEvent(kind=new_kind, forward_parent=event.forward_parent)

    def range(self, parser: Parser) -> TextRange:
        end = self.offset
        for event in reversed(parser.events[self.start_pos : self.finish_pos]):
            if isinstance(event, TokenEvent):
                end = event.end
                break
        return TextRange.new(self.offset, end)
