from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from PIL import Image

from graphdrawer.colors import parse_hex_color
from graphdrawer.config import validate_graph_params
from graphdrawer.view import GraphView


LOGGER = logging.getLogger(__name__)


def _parse_series(text: str) -> list[float]:
    try:
        return [float(v) for v in text.split(",") if v.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid series `{text}`: {exc}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="graphdrawer")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render one or more series to a PNG file.")
    render.add_argument(
        "--series",
        type=_parse_series,
        action="append",
        required=True,
        help="Comma-separated positive values; repeat for multiple series.",
    )
    render.add_argument("--out", type=Path, required=True)
    render.add_argument("--width", type=int, default=640)
    render.add_argument("--height", type=int, default=360)
    render.add_argument("--margin", type=float, default=None)
    render.add_argument("--top-border", type=float, default=None)
    render.add_argument("--bottom-border", type=float, default=None)
    render.add_argument("--max-value", type=float, default=None, help="Log10 ceiling of the value axis.")
    render.add_argument("--gradient", nargs=2, metavar=("START", "END"), default=None, help="Hex colors, e.g. #FA4B2A #FC9D2A.")
    render.add_argument("--no-guides", action="store_true")
    render.add_argument("--no-markers", action="store_true")
    render.add_argument("--labels", action="store_true")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.width <= 0 or args.height <= 0:
        parser.error("width/height must be > 0")
    try:
        params = validate_graph_params(
            {
                "margin": args.margin,
                "top_border": args.top_border,
                "bottom_border": args.bottom_border,
                "max_value": args.max_value,
            }
        )
        gradient = None
        if args.gradient is not None:
            gradient = (parse_hex_color(args.gradient[0]), parse_hex_color(args.gradient[1]))
        view = GraphView(
            params,
            args.series,
            gradient=gradient,
            show_guides=not args.no_guides,
            show_markers=not args.no_markers,
            show_labels=args.labels,
        )
        canvas = view.render(args.width, args.height)
    except ValueError as exc:
        parser.error(str(exc))

    args.out.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(canvas).save(args.out)
    LOGGER.info("wrote %s (%dx%d, %d series)", args.out, args.width, args.height, len(args.series))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
