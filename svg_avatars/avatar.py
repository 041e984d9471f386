"""Finished avatar, a thin wrapper around the generated SVG drawing."""

from __future__ import annotations

import io
import logging
import os
from typing import TextIO

import svgwrite

from svg_avatars.svg.serializer import copy_element

logger = logging.getLogger(__name__)


class SvgAvatar:
    """An avatar generated from an identifier. See ``SvgAvatarBuilder``."""

    def __init__(self, document: svgwrite.Drawing) -> None:
        self._document = document

    @property
    def document(self) -> svgwrite.Drawing:
        """The wrapped drawing.

        Mutating it bypasses the derivation; the result is no longer a pure
        function of the identifier.
        """
        return self._document

    def into_document(self) -> svgwrite.Drawing:
        return self._document

    def copy(self) -> "SvgAvatar":
        """Independent avatar; its drawing can be mutated without affecting this one."""
        return SvgAvatar(copy_element(self._document))

    def __copy__(self) -> "SvgAvatar":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "SvgAvatar":
        return self.copy()

    def to_string(self) -> str:
        """Serialized SVG markup, including the XML declaration."""
        buffer = io.StringIO()
        self.write(buffer)
        return buffer.getvalue()

    def write(self, fileobj: TextIO) -> None:
        self._document.write(fileobj)

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the SVG to ``path``. ``OSError`` from the filesystem propagates."""
        with open(path, "w", encoding="utf-8", newline="\n") as fh:
            self.write(fh)
        logger.debug("Saved avatar to %s", os.fspath(path))

    def __str__(self) -> str:
        return self.to_string()

    def __bytes__(self) -> bytes:
        return self.to_string().encode("utf-8")

    def __repr__(self) -> str:
        return f"SvgAvatar(viewBox={self._document.attribs.get('viewBox')!r})"
