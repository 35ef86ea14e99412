import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from outline_connector import (
    ConnectorError,
    generate_tikz_document,
    read_scene,
    render_svg,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _write_output(path_value: str, text: str, label: str) -> None:
    output_path = Path(path_value)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    logger.info("Writing %s document to %s", label, output_path)
    output_path.write_text(text, encoding="utf-8")
    print(f"{label} document written to {output_path}")


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Compute boundary-to-boundary connector segments")
    parser.add_argument("path", help="Path to the JSON scene file")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=3,
        help="Decimal places in printed and rendered coordinates (default: 3)",
    )
    parser.add_argument(
        "--svg-output-path",
        help="Write a standalone SVG document with the connector to the given path",
    )
    parser.add_argument(
        "--width",
        type=float,
        default=500.0,
        help="SVG canvas width in pixels (default: 500)",
    )
    parser.add_argument(
        "--height",
        type=float,
        default=500.0,
        help="SVG canvas height in pixels (default: 500)",
    )
    parser.add_argument(
        "--tikz-output-path",
        help="Write a standalone TikZ document with the connector to the given path",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    logger.info("Reading scene from %s", args.path)
    try:
        scene = read_scene(args.path)
        connector = scene.build_connector()
        segments = connector.project(scene.projection)
    except ConnectorError as exc:
        logger.error("%s", exc)
        raise SystemExit(1)

    logger.info("Computed %d segment(s) for %d target(s)", len(segments), len(connector.anchors) - 1)
    p = args.precision
    print("Segments:")
    for (x1, y1), (x2, y2) in segments:
        print(f"  ({x1:.{p}f}, {y1:.{p}f}) -> ({x2:.{p}f}, {y2:.{p}f})")

    if args.svg_output_path:
        svg = render_svg(
            segments,
            scene.options,
            width=args.width,
            height=args.height,
            precision=p,
        )
        _write_output(args.svg_output_path, svg, "SVG")

    if args.tikz_output_path:
        tikz = generate_tikz_document(segments, scene.options, precision=p)
        _write_output(args.tikz_output_path, tikz, "TikZ")


if __name__ == "__main__":
    main(sys.argv[1:])
