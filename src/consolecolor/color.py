"""Color model shared by every console strategy.

A color is a small bitmask: three hue bits (red, green, blue) and one
intensity bit.  The hue bits line up with the ANSI 8-color palette, so
``30 + color.hue`` is the matching SGR foreground code.
"""

from __future__ import annotations

import re
from enum import STRICT, IntFlag

_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")


class Color(IntFlag, boundary=STRICT):
    """Foreground color with an optional bright modifier."""

    BLACK = 0
    RED = 1
    GREEN = 2
    BLUE = 4
    YELLOW = RED | GREEN
    MAGENTA = RED | BLUE
    CYAN = GREEN | BLUE
    LIGHT_GRAY = RED | GREEN | BLUE
    BRIGHT = 8
    DARK_GRAY = BRIGHT | BLACK
    BRIGHT_RED = BRIGHT | RED
    BRIGHT_GREEN = BRIGHT | GREEN
    BRIGHT_BLUE = BRIGHT | BLUE
    BRIGHT_YELLOW = BRIGHT | YELLOW
    BRIGHT_MAGENTA = BRIGHT | MAGENTA
    BRIGHT_CYAN = BRIGHT | CYAN
    WHITE = BRIGHT | LIGHT_GRAY

    @property
    def hue(self) -> int:
        """Hue bits with the bright modifier masked off (0..7)."""
        return int(self) & ~int(Color.BRIGHT)

    @property
    def is_bright(self) -> bool:
        return bool(self & Color.BRIGHT)

    @classmethod
    def parse(cls, name: str) -> Color:
        """Look up a color by name.

        Accepts ``BRIGHT_RED``, ``bright-red`` and ``brightRed`` spellings.
        Raises ``ValueError`` for unknown names.
        """
        key = _CAMEL_BOUNDARY.sub(r"\1_\2", name.strip()).replace("-", "_").upper()
        try:
            return cls[key]
        except KeyError:
            msg = f"Unknown color: {name!r}"
            raise ValueError(msg) from None
