"""Ring count policy: maps each ring count to its radius dividers."""

from __future__ import annotations

import enum

_DIVIDERS: dict[int, tuple[float, ...]] = {
    1: (1.0,),
    2: (1.0, 0.65),
    3: (1.0, 0.77, 0.50),
    4: (1.0, 0.77, 0.55, 0.3),
}


class Rings(enum.IntEnum):
    """Number of concentric rings drawn in an avatar. ``FOUR`` is the default."""

    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4

    @property
    def dividers(self) -> tuple[float, ...]:
        """Radius scale factors, outermost ring first."""
        return _DIVIDERS[self.value]

    @classmethod
    def default(cls) -> "Rings":
        return cls.FOUR

    @classmethod
    def parse(cls, value: "Rings | int | str") -> "Rings":
        """Accept a member, its count, or its name in any case ("three", "3")."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip()
            if text.isdigit():
                return cls(int(text))
            try:
                return cls[text.upper()]
            except KeyError:
                raise ValueError(f"Unknown ring count: {value!r}") from None
        return cls(value)

    def __str__(self) -> str:
        return self.name.capitalize()
