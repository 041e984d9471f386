"""Avatar builder: identifier digest -> theme -> ring geometry -> SVG.

Usage:
    avatar = (
        SvgAvatarBuilder()
        .identifier("foo")
        .rings(Rings.THREE)
        .build()
    )
    avatar.save("foo.svg")

Identifiers are additive: every ``identifier``/``identifier_bytes`` call
appends to the hashed input, so ``identifier("foo").identifier("bar")``
hashes ``b"foobar"``.
"""

from __future__ import annotations

import copy
import hashlib
import logging

from svgwrite.path import Path

from svg_avatars.avatar import SvgAvatar
from svg_avatars.geometry import SECTOR_COUNT, sector
from svg_avatars.models.color import HslColor
from svg_avatars.rings import Rings
from svg_avatars.svg.serializer import create_document, create_group, pie_slice
from svg_avatars.theme import SvgTheme

logger = logging.getLogger(__name__)

DEFAULT_STROKE_COLOR = "black"


class BuilderFinalizedError(RuntimeError):
    """Raised when a builder is used after ``build()``."""


class SvgAvatarBuilder:
    """Configures and constructs a new ``SvgAvatar``.

    Configuration methods mutate the builder and return it for chaining.
    Use ``copy()`` to branch several identifiers off a common prefix.
    """

    def __init__(self) -> None:
        self._hasher = hashlib.sha256()
        self._rings = Rings.default()
        self._stroke_color = DEFAULT_STROKE_COLOR
        self._finalized = False

    def identifier(self, text: str) -> "SvgAvatarBuilder":
        """Append a text identifier segment (UTF-8 encoded)."""
        return self.identifier_bytes(text.encode("utf-8"))

    def identifier_bytes(self, data: bytes | bytearray | memoryview) -> "SvgAvatarBuilder":
        """Append a raw identifier segment."""
        self._check_open()
        self._hasher.update(data)
        return self

    def rings(self, rings: Rings) -> "SvgAvatarBuilder":
        self._check_open()
        self._rings = Rings.parse(rings)
        return self

    def stroke_color(self, color: str) -> "SvgAvatarBuilder":
        """Set the stroke paint of every path.

        The value is written verbatim; any SVG paint is accepted
        (``"blue"``, ``"rgb(36, 138, 71)"``, ``"hsla(53, 100%, 50%, 1)"``).
        """
        self._check_open()
        self._stroke_color = str(color)
        return self

    def copy(self) -> "SvgAvatarBuilder":
        """Independent builder with the same pending identifier and settings."""
        return copy.copy(self)

    def __copy__(self) -> "SvgAvatarBuilder":
        self._check_open()
        clone = type(self).__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone._hasher = self._hasher.copy()
        return clone

    def __deepcopy__(self, memo: dict) -> "SvgAvatarBuilder":
        # Every other field is immutable; only the hash state needs cloning.
        return self.__copy__()

    def build(self) -> SvgAvatar:
        """Finalize the identifier and render the avatar. The builder cannot be reused."""
        self._check_open()
        self._finalized = True

        digest = self._hasher.digest()
        theme = SvgTheme(digest, self._stroke_color)

        g = create_group()
        for ring_index, divider in enumerate(self._rings.dividers):
            for index in range(SECTOR_COUNT):
                g.add(self._create_path(ring_index, index, divider, theme))

        document = create_document()
        document.add(g)

        logger.debug(
            "Built avatar %s: %s rings, %d paths",
            digest[:4].hex(),
            self._rings,
            len(g.elements),
        )
        return SvgAvatar(document)

    @property
    def finalized(self) -> bool:
        return self._finalized

    def _check_open(self) -> None:
        if self._finalized:
            raise BuilderFinalizedError("SvgAvatarBuilder has already been built")

    @staticmethod
    def _create_path(ring_index: int, index: int, divider: float, theme: SvgTheme) -> Path:
        line_x, line_y, arc_x, arc_y = sector(index, divider)
        color = SvgAvatarBuilder._construct_color(ring_index, index, theme)
        return pie_slice(
            line_to=(line_x, line_y),
            arc_to=(arc_x, arc_y),
            radius=divider,
            fill=str(color),
            stroke=theme.stroke_color,
        )

    @staticmethod
    def _construct_color(ring_index: int, index: int, theme: SvgTheme) -> HslColor:
        return HslColor.from_seed(
            theme.ring(ring_index, index),
            global_theme=theme.normalized_global_theme,
            ring_theme=theme.normalized_ring_theme(ring_index),
        )

    def __repr__(self) -> str:
        state = "built" if self._finalized else "open"
        return f"SvgAvatarBuilder(rings={self._rings}, stroke_color={self._stroke_color!r}, {state})"
