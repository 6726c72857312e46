"""
Engine: owns pygame start-up, the window and the event/render loop.
Headless export draws the same fractal onto an off-screen surface.
"""
from __future__ import annotations

from pathlib import Path

import pygame

from fractals.config import ViewerConfig
from fractals.debug import clear_debug_log, debug
from fractals.patterns.library import Algorithm, render
from fractals.render.sinks import SurfaceSink
from fractals.scenes.viewer import FractalViewerScene
from fractals.state.geometry import Region


class Engine:
    def __init__(self, cfg: ViewerConfig) -> None:
        clear_debug_log()
        pygame.init()
        self.cfg = cfg
        self.surface_flags = pygame.RESIZABLE
        self.display = pygame.display.set_mode((cfg.view_width, cfg.view_height), self.surface_flags)
        pygame.display.set_caption("Fractals")
        self.scene = FractalViewerScene(cfg)

    def run(self) -> None:
        clock = pygame.time.Clock()
        try:
            while self.scene.running:
                clock.tick(60)
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.scene.running = False
                        break
                    if event.type == pygame.VIDEORESIZE:
                        self.display = pygame.display.set_mode((event.w, event.h), self.surface_flags)
                    self.scene.handle_event(event)
                if self.scene.render(self.display):
                    debug(f"[engine] repaint {self.scene.view.algorithm.value} depth={self.scene.view.depth}")
                    pygame.display.flip()
        finally:
            pygame.quit()


def export_image(cfg: ViewerConfig, algorithm: Algorithm, depth: int, path: Path | str) -> int:
    """Draw one fractal off-screen at the configured size and save it; returns the lines drawn."""
    surface = pygame.Surface((cfg.view_width, cfg.view_height))
    surface.fill(cfg.background)
    sink = SurfaceSink(surface)
    render(
        Region(cfg.view_width, cfg.view_height),
        depth,
        algorithm,
        sink,
        margin=cfg.margin,
        styles=cfg.styles,
        max_depth=cfg.max_depth,
        logger=debug,
    )
    pygame.image.save(surface, str(path))
    debug(f"[engine] exported {algorithm.value} depth={depth} lines={sink.lines_drawn} to {path}")
    return sink.lines_drawn
