"""Build SVG elements with svgwrite.

Elements are created with ``debug=False``: svgwrite's validator rejects
``hsl()`` paints, and stroke colors are passed through verbatim.
"""

from __future__ import annotations

import copy

import svgwrite
from svgwrite.base import BaseElement
from svgwrite.container import SVG, Group
from svgwrite.path import Path

VIEWBOX = (-1.1, -1.1, 2.3, 2.3)
STROKE_WIDTH = "0.01"


def create_document(viewbox: tuple[float, float, float, float] = VIEWBOX) -> svgwrite.Drawing:
    """Empty drawing with a square viewBox centered on the origin."""
    dwg = svgwrite.Drawing(debug=False)
    # Drawing.viewbox() joins with commas; keep the space-separated form.
    dwg["viewBox"] = " ".join(str(v) for v in viewbox)
    return dwg


def copy_element(element: BaseElement) -> BaseElement:
    """Copy an element and its whole subtree; nothing mutable is shared."""
    if not isinstance(element, BaseElement):
        # title/desc/metadata only wrap an ElementTree node.
        return copy.deepcopy(element)
    clone = element.copy()
    clone.elements = [copy_element(child) for child in element.elements]
    if isinstance(element, Path):
        clone.commands = list(element.commands)
    if isinstance(element, SVG):
        positions = [i for i, child in enumerate(element.elements) if child is element.defs]
        clone.defs = clone.elements[positions[0]] if positions else copy_element(element.defs)
    if isinstance(element, svgwrite.Drawing):
        clone._stylesheets = list(element._stylesheets)
    return clone


def create_group() -> Group:
    return Group(debug=False)


def pie_slice(
    line_to: tuple[float, float],
    arc_to: tuple[float, float],
    radius: float,
    fill: str,
    stroke: str,
) -> Path:
    """Closed slice: origin -> line endpoint -> clockwise arc -> close."""
    path = Path(debug=False)
    path.push("M", 0, 0)
    path.push("L", line_to[0], line_to[1])
    path.push("A", radius, radius, 0, 0, 1, arc_to[0], arc_to[1])
    path.push("Z")

    path["fill"] = fill
    path["stroke"] = stroke
    path["stroke-width"] = STROKE_WIDTH
    return path
