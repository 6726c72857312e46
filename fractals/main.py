import argparse
from typing import List, Optional

from fractals import config
from fractals.debug import debug
from fractals.engine import Engine, export_image
from fractals.patterns.library import Algorithm, parse_algorithm


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fractals", description="Draw Sierpinski, Koch and Hilbert fractals.")
    parser.add_argument("--config", help="YAML file with viewer defaults and line styles")
    parser.add_argument(
        "--algorithm",
        choices=[algo.value for algo in Algorithm],
        help="fractal to show first (default from config)",
    )
    parser.add_argument("--depth", type=int, help="recursion depth (default from config)")
    parser.add_argument("--width", type=int, help="window / image width")
    parser.add_argument("--height", type=int, help="window / image height")
    parser.add_argument("--export", metavar="PATH", help="save a PNG instead of opening a window")
    return parser


def apply_overrides(cfg: config.ViewerConfig, args: argparse.Namespace) -> config.ViewerConfig:
    if args.algorithm:
        cfg.algorithm = parse_algorithm(args.algorithm)
    if args.depth is not None:
        cfg.depth = args.depth
    if args.width is not None:
        cfg.view_width = args.width
    if args.height is not None:
        cfg.view_height = args.height
    return cfg


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.depth is not None and args.depth < 0:
        parser.error("--depth must be >= 0")
    for name in ("width", "height"):
        value = getattr(args, name)
        if value is not None and value <= 0:
            parser.error(f"--{name} must be > 0")
    try:
        cfg = config.load_config(args.config, logger=debug)
    except (FileNotFoundError, ValueError) as e:
        parser.error(str(e))
    cfg = apply_overrides(cfg, args)

    if args.export:
        count = export_image(cfg, cfg.algorithm, cfg.depth, args.export)
        print(f"Wrote {count} segments to {args.export}")
        return

    engine = Engine(cfg)
    engine.run()


if __name__ == "__main__":
    main()
