import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

import fractals.debug


@pytest.fixture(autouse=True)
def debug_log_in_tmp(tmp_path, monkeypatch):
    monkeypatch.setattr(fractals.debug, "DEBUG_LOG", tmp_path / "debug.log")
    return tmp_path / "debug.log"


@pytest.fixture
def pygame_ready():
    pygame.init()
    yield
    pygame.quit()
