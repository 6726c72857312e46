from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Tuple

import yaml

from fractals.patterns.layout import DEFAULT_MARGIN
from fractals.patterns.library import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_STYLES,
    Algorithm,
    parse_algorithm,
)
from fractals.render.sinks import LineStyle

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "styles.yaml"


@dataclass
class ViewerConfig:
    view_width: int = 900
    view_height: int = 800
    margin: float = DEFAULT_MARGIN
    depth: int = 0
    algorithm: Algorithm = Algorithm.SIERPINSKI_TRIANGLE
    max_depth: int = DEFAULT_MAX_DEPTH
    background: Tuple[int, int, int] = (255, 255, 255)
    styles: Dict[Algorithm, LineStyle] = field(default_factory=lambda: dict(DEFAULT_STYLES))

    def style_for(self, algorithm: Algorithm) -> LineStyle:
        return self.styles.get(algorithm, DEFAULT_STYLES[algorithm])


def _parse_color(raw, where: str) -> Tuple[int, int, int]:
    if not isinstance(raw, (list, tuple)) or len(raw) != 3:
        raise ValueError(f"{where}: color must be a list of three ints, got {raw!r}")
    color = tuple(_coerce(c, int, where) for c in raw)
    if any(c < 0 or c > 255 for c in color):
        raise ValueError(f"{where}: color components must be within 0..255, got {raw!r}")
    return color  # type: ignore[return-value]


def _coerce(raw, kind, where: str):
    """int()/float() a YAML value, reporting anything unusable as ValueError."""
    if isinstance(raw, bool):
        raise ValueError(f"{where}: expected a number, got {raw!r}")
    try:
        return kind(raw)
    except (TypeError, ValueError):
        raise ValueError(f"{where}: expected a number, got {raw!r}") from None


def _build_styles(data: dict) -> Dict[Algorithm, LineStyle]:
    styles = dict(DEFAULT_STYLES)
    for key, entry in data.items():
        algo = parse_algorithm(key)
        entry = entry or {}
        if not isinstance(entry, dict):
            raise ValueError(f"styles.{key}: expected a mapping with color/width, got {entry!r}")
        base = styles[algo]
        color = _parse_color(entry["color"], f"styles.{key}") if "color" in entry else base.color
        width = _coerce(entry.get("width", base.width), int, f"styles.{key}.width")
        styles[algo] = LineStyle(color=color, width=max(1, width))
    return styles


def load_config(path: Path | str | None = None, logger=None) -> ViewerConfig:
    """Load viewer settings from YAML, overlaying whatever keys the file sets."""
    cfg = ViewerConfig()
    if path is None:
        path = DEFAULT_CONFIG_PATH
        if not path.exists():
            return cfg
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Config file malformed: {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Config file malformed (expected a mapping): {path}")

    if "view_width" in data:
        cfg.view_width = _coerce(data["view_width"], int, "view_width")
    if "view_height" in data:
        cfg.view_height = _coerce(data["view_height"], int, "view_height")
    if cfg.view_width <= 0 or cfg.view_height <= 0:
        raise ValueError(f"view size must be positive, got {cfg.view_width}x{cfg.view_height}")
    if "margin" in data:
        cfg.margin = _coerce(data["margin"], float, "margin")
    if "max_depth" in data:
        cfg.max_depth = max(0, _coerce(data["max_depth"], int, "max_depth"))
    if "depth" in data:
        cfg.depth = max(0, min(_coerce(data["depth"], int, "depth"), cfg.max_depth))
    if "algorithm" in data:
        cfg.algorithm = parse_algorithm(data["algorithm"])
    if "background" in data:
        cfg.background = _parse_color(data["background"], "background")
    if data.get("styles"):
        if not isinstance(data["styles"], dict):
            raise ValueError(f"Config file malformed (styles must be a mapping): {path}")
        cfg.styles = _build_styles(data["styles"])

    if logger:
        logger(f"[config] loaded {path}: {cfg.algorithm.value} depth={cfg.depth} max_depth={cfg.max_depth}")
    return cfg
