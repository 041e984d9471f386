"""Color theme derived from an identifier digest."""

from __future__ import annotations

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view
from numpy.typing import NDArray

DIGEST_SIZE = 32

# Ring hue biases come from overlapping 8-byte windows: offsets 0..24.
_WINDOW = 8
_BYTE_MAX = 255.0


def _xor_fold(data: NDArray[np.uint8], axis: int | None = None) -> NDArray[np.uint8]:
    return np.bitwise_xor.reduce(data, axis=axis)


class SvgTheme:
    """Hue biases and per-sector color seeds for one build.

    The digest bytes are used directly as the color-seed table:
    ``ring(r, s)`` is ``digest[r * 8 + s]``.
    """

    def __init__(self, digest: bytes, stroke_color: str) -> None:
        if len(digest) != DIGEST_SIZE:
            raise ValueError(f"Expected a {DIGEST_SIZE}-byte digest, got {len(digest)} bytes")

        seeds = np.frombuffer(digest, dtype=np.uint8)
        windows = sliding_window_view(seeds, _WINDOW)

        self._seeds = bytes(digest)
        self._normalized_global_theme = float(_xor_fold(seeds)) / _BYTE_MAX
        self._normalized_ring_themes = tuple(
            float(v) / _BYTE_MAX for v in _xor_fold(windows, axis=1)
        )
        self._stroke_color = stroke_color

    def ring(self, ring_index: int, index: int) -> int:
        """Raw color seed byte for sector ``index`` of ring ``ring_index``."""
        return self._seeds[ring_index * _WINDOW + index]

    @property
    def normalized_global_theme(self) -> float:
        return self._normalized_global_theme

    def normalized_ring_theme(self, ring_index: int) -> float:
        return self._normalized_ring_themes[ring_index]

    @property
    def normalized_ring_themes(self) -> tuple[float, ...]:
        return self._normalized_ring_themes

    @property
    def stroke_color(self) -> str:
        return self._stroke_color

    def __repr__(self) -> str:
        return (
            f"SvgTheme(global={self._normalized_global_theme:.3f}, "
            f"windows={len(self._normalized_ring_themes)}, stroke={self._stroke_color!r})"
        )
