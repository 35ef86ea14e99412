"""Renderers for connector segments: SVG path data, SVG documents and TikZ."""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional, Sequence, Tuple

import svgwrite

from .connector import ConnectorOptions, Segment

logger = logging.getLogger(__name__)

_HEX_COLOR_RE = re.compile(r"^#?([0-9a-fA-F]{6}|[0-9a-fA-F]{3})$")

standalone_tpl = r"""\documentclass[border=2pt]{standalone}
\usepackage{tikz}
%s
\begin{document}
%s
\end{document}
"""


def _format_number(value: float, precision: int) -> str:
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


# ---------------------------------------------------------------------------
# SVG
# ---------------------------------------------------------------------------

def segments_to_svg_path(segments: Sequence[Segment], precision: int = 3) -> str:
    """Return SVG path data with one ``M x y L x y`` run per segment."""

    parts: List[str] = []
    for (x1, y1), (x2, y2) in segments:
        parts.append(
            f"M{_format_number(x1, precision)} {_format_number(y1, precision)}"
            f"L{_format_number(x2, precision)} {_format_number(y2, precision)}"
        )
    return "".join(parts)


def svg_path_attributes(options: ConnectorOptions) -> Dict[str, object]:
    """Map connector options onto SVG presentation attributes (svgwrite keyword form)."""

    attrs: Dict[str, object] = {"fill": "none"}
    if options.stroke:
        attrs.update(
            stroke=options.color,
            stroke_width=options.weight,
            stroke_opacity=options.opacity,
            stroke_linecap=options.line_cap,
            stroke_linejoin=options.line_join,
        )
        if options.dash_array:
            attrs["stroke_dasharray"] = options.dash_array
        if options.dash_offset:
            attrs["stroke_dashoffset"] = options.dash_offset
    else:
        attrs["stroke"] = "none"
    if options.class_name:
        attrs["class_"] = options.class_name
    attrs.update(options.extra)
    return attrs


def render_svg(
    segments: Sequence[Segment],
    options: Optional[ConnectorOptions] = None,
    *,
    width: float = 500,
    height: float = 500,
    precision: int = 3,
) -> str:
    """Return a standalone SVG document drawing ``segments`` as one path."""

    options = options or ConnectorOptions()
    dwg = svgwrite.Drawing(size=(f"{width}px", f"{height}px"), debug=False)
    dwg.viewbox(0, 0, width, height)
    if segments:
        path = dwg.path(d=segments_to_svg_path(segments, precision))
        path.update(svg_path_attributes(options))
        dwg.add(path)
    logger.info("Rendered %d segment(s) to SVG", len(segments))
    return dwg.tostring()


# ---------------------------------------------------------------------------
# TikZ
# ---------------------------------------------------------------------------

def _tikz_color(color: str) -> Tuple[Optional[str], str]:
    """Return a ``\\definecolor`` line (or ``None``) and the colour name to use."""

    match = _HEX_COLOR_RE.match(color.strip())
    if not match:
        return None, color.strip()
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return r"\definecolor{connector}{HTML}{%s}" % digits.upper(), "connector"


def _tikz_dash_pattern(dash_array: str) -> Optional[str]:
    values = [v for v in re.split(r"[\s,]+", dash_array.strip()) if v]
    if not values:
        return None
    if len(values) % 2:
        values = values * 2
    tokens = []
    for idx, value in enumerate(values):
        tokens.append(("on " if idx % 2 == 0 else "off ") + f"{value}pt")
    return "dash pattern=" + " ".join(tokens)


def tikz_style(options: ConnectorOptions) -> Tuple[List[str], str]:
    """Return preamble lines and the ``connector`` style body for ``options``."""

    preamble: List[str] = []
    if not options.stroke:
        return preamble, "draw=none"
    define, color = _tikz_color(options.color)
    if define:
        preamble.append(define)
    tokens = [
        f"draw={color}",
        f"line width={_format_number(options.weight, 3)}pt",
        f"line cap={options.line_cap}",
        f"line join={options.line_join}",
    ]
    if options.opacity < 1.0:
        tokens.append(f"draw opacity={_format_number(options.opacity, 3)}")
    if options.dash_array:
        dash = _tikz_dash_pattern(options.dash_array)
        if dash:
            tokens.append(dash)
    return preamble, ", ".join(tokens)


def generate_tikz_code(
    segments: Sequence[Segment],
    options: Optional[ConnectorOptions] = None,
    *,
    precision: int = 3,
) -> str:
    """Return a ``tikzpicture`` drawing one line per segment.

    Coordinates stay in pixels; the picture's y unit is negative so the
    drawing keeps the screen orientation.
    """

    options = options or ConnectorOptions()
    _, style = tikz_style(options)
    lines = [
        r"\begin{tikzpicture}[x=1pt, y=-1pt, connector/.style={%s}]" % style,
    ]
    for (x1, y1), (x2, y2) in segments:
        lines.append(
            r"\draw[connector] (%s,%s) -- (%s,%s);"
            % (
                _format_number(x1, precision),
                _format_number(y1, precision),
                _format_number(x2, precision),
                _format_number(y2, precision),
            )
        )
    lines.append(r"\end{tikzpicture}")
    return "\n".join(lines)


def generate_tikz_document(
    segments: Sequence[Segment],
    options: Optional[ConnectorOptions] = None,
    *,
    precision: int = 3,
) -> str:
    """Render a standalone LaTeX document around :func:`generate_tikz_code`."""

    options = options or ConnectorOptions()
    preamble, _ = tikz_style(options)
    tikz_code = generate_tikz_code(segments, options, precision=precision)
    logger.info("Rendered %d segment(s) to TikZ", len(segments))
    return standalone_tpl % ("\n".join(preamble), tikz_code)


__all__ = [
    "segments_to_svg_path",
    "svg_path_attributes",
    "render_svg",
    "tikz_style",
    "generate_tikz_code",
    "generate_tikz_document",
]
