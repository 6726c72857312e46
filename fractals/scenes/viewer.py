from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import pygame

from fractals.config import ViewerConfig
from fractals.debug import debug
from fractals.patterns.library import Algorithm, clamp_depth, render
from fractals.render.sinks import SurfaceSink
from fractals.state.geometry import Region


class FractalView:
    """
    Depth + algorithm selection for one fractal panel. Assigning a new value
    marks the view dirty so the next frame redraws it; assigning the current
    value does nothing.
    """

    def __init__(
        self,
        depth: int = 0,
        algorithm: Algorithm = Algorithm.SIERPINSKI_TRIANGLE,
        max_depth: int = 10,
    ) -> None:
        self.max_depth = max_depth
        self._depth = clamp_depth(depth, max_depth)
        self._algorithm = algorithm
        self.dirty = True

    @property
    def depth(self) -> int:
        return self._depth

    @depth.setter
    def depth(self, value: int) -> None:
        value = clamp_depth(value, self.max_depth)
        if value != self._depth:
            self._depth = value
            self.dirty = True

    @property
    def algorithm(self) -> Algorithm:
        return self._algorithm

    @algorithm.setter
    def algorithm(self, value: Algorithm) -> None:
        if value != self._algorithm:
            self._algorithm = value
            self.dirty = True

    def is_selected(self, algorithm: Algorithm) -> bool:
        return self._algorithm == algorithm

    def select(self, algorithm: Algorithm) -> None:
        """Radio-button semantics: exactly one algorithm is active."""
        self.algorithm = algorithm

    def step_depth(self, delta: int) -> None:
        self.depth = self._depth + delta


@dataclass
class AlgorithmButton:
    algorithm: Algorithm
    hotkey: int
    label: str
    rect: Optional[pygame.Rect] = None


class FractalViewerScene:
    """Button bar on top, fractal fitted into the rest of the window."""

    bar_height = 56
    bar_margin = 8
    footer_height = 28

    def __init__(self, cfg: ViewerConfig) -> None:
        self.cfg = cfg
        self.view = FractalView(cfg.depth, cfg.algorithm, cfg.max_depth)
        self.buttons: List[AlgorithmButton] = [
            AlgorithmButton(Algorithm.SIERPINSKI_TRIANGLE, pygame.K_1, "1: Sierpinski"),
            AlgorithmButton(Algorithm.KOCH_SNOWFLAKE, pygame.K_2, "2: Koch"),
            AlgorithmButton(Algorithm.HILBERT_CURVE, pygame.K_3, "3: Hilbert"),
        ]
        self.width = cfg.view_width
        self.height = cfg.view_height
        self.running = True
        self.font: Optional[pygame.font.Font] = None
        self.last_segment_count = 0
        self.layout_buttons()

    # --- layout ---

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.layout_buttons()
        self.view.dirty = True

    def layout_buttons(self) -> None:
        n = len(self.buttons)
        margin = self.bar_margin
        gap = 8
        box_width = (self.width - 2 * margin - gap * (n - 1)) / n
        x = margin
        for button in self.buttons:
            button.rect = pygame.Rect(int(x), margin, int(box_width), self.bar_height - 2 * margin)
            x += box_width + gap

    def fractal_region(self) -> Region:
        return Region(self.width, max(0, self.height - self.bar_height - self.footer_height))

    # --- input ---

    def handle_event(self, event) -> None:
        if event.type == pygame.KEYDOWN:
            self.handle_keydown(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self.handle_mouse_down(event.pos, event.button)
        elif event.type == pygame.VIDEORESIZE:
            self.resize(event.w, event.h)

    def handle_keydown(self, key: int) -> None:
        if key == pygame.K_ESCAPE:
            self.running = False
            return
        if key in (pygame.K_UP, pygame.K_PLUS, pygame.K_KP_PLUS, pygame.K_EQUALS):
            self.view.step_depth(1)
        elif key in (pygame.K_DOWN, pygame.K_MINUS, pygame.K_KP_MINUS):
            self.view.step_depth(-1)
        for button in self.buttons:
            if button.hotkey == key:
                self.view.select(button.algorithm)
                break

    def handle_mouse_down(self, pos: Tuple[int, int], button: int) -> None:
        if button != 1:
            return
        for btn in self.buttons:
            if btn.rect and btn.rect.collidepoint(pos):
                self.view.select(btn.algorithm)
                break

    # --- drawing ---

    def draw_fractal(self, surface: pygame.Surface) -> int:
        sink = SurfaceSink(surface, origin=(0, self.bar_height))
        count = render(
            self.fractal_region(),
            self.view.depth,
            self.view.algorithm,
            sink,
            margin=self.cfg.margin,
            styles=self.cfg.styles,
            max_depth=self.cfg.max_depth,
            logger=debug,
        )
        self.last_segment_count = count
        return count

    def draw_buttons(self, surface: pygame.Surface) -> None:
        if self.font is None:
            self.font = pygame.font.SysFont("consolas", 18)
        for button in self.buttons:
            if button.rect is None:
                continue
            if self.view.is_selected(button.algorithm):
                border_color = (40, 40, 40)
                fill_color = (210, 220, 240)
            else:
                border_color = (150, 150, 160)
                fill_color = (235, 235, 240)
            pygame.draw.rect(surface, fill_color, button.rect)
            pygame.draw.rect(surface, border_color, button.rect, 2)
            text_surf = self.font.render(button.label, True, (20, 20, 30))
            tw, th = text_surf.get_size()
            surface.blit(text_surf, (button.rect.centerx - tw // 2, button.rect.centery - th // 2))

        info = (
            f"{self.view.algorithm.label}   depth {self.view.depth}/{self.view.max_depth}"
            f"   segments {self.last_segment_count}   (Up/Down: depth, Esc: quit)"
        )
        info_surf = self.font.render(info, True, (90, 90, 100))
        footer_top = self.height - self.footer_height
        surface.blit(info_surf, (self.bar_margin, footer_top + (self.footer_height - info_surf.get_height()) // 2))

    def render(self, surface: pygame.Surface) -> bool:
        """Repaint only when the view changed; returns True if something was drawn."""
        if not self.view.dirty:
            return False
        surface.fill(self.cfg.background)
        self.draw_fractal(surface)
        self.draw_buttons(surface)
        self.view.dirty = False
        return True
