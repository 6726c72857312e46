"""Line sinks: where generated segments end up."""
from dataclasses import dataclass
from typing import List, Protocol, Tuple

import pygame

from fractals.state.geometry import Segment, Vec2

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class LineStyle:
    color: Color = (0, 0, 0)
    width: int = 1


class LineSink(Protocol):
    def draw_line(self, p1: Vec2, p2: Vec2, style: LineStyle) -> None:
        ...


class SegmentRecorder:
    """Keeps every drawn line in order; handy for export and tests."""

    def __init__(self) -> None:
        self.segments: List[Segment] = []
        self.styles: List[LineStyle] = []

    def draw_line(self, p1: Vec2, p2: Vec2, style: LineStyle) -> None:
        self.segments.append(Segment(p1, p2))
        self.styles.append(style)


class SurfaceSink:
    """Draw lines onto a pygame surface, shifted by an optional origin."""

    def __init__(self, surface: pygame.Surface, origin: Tuple[int, int] = (0, 0)) -> None:
        self.surface = surface
        self.origin = origin
        self.lines_drawn = 0

    def draw_line(self, p1: Vec2, p2: Vec2, style: LineStyle) -> None:
        ox, oy = self.origin
        pygame.draw.line(
            self.surface,
            style.color,
            (p1[0] + ox, p1[1] + oy),
            (p2[0] + ox, p2[1] + oy),
            style.width,
        )
        self.lines_drawn += 1
