"""Deterministic SVG avatars derived from identifiers."""

from svg_avatars.avatar import SvgAvatar
from svg_avatars.builder import BuilderFinalizedError, SvgAvatarBuilder
from svg_avatars.rings import Rings

__all__ = [
    "BuilderFinalizedError",
    "Rings",
    "SvgAvatar",
    "SvgAvatarBuilder",
]
