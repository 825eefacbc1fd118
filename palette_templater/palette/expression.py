"""Color reference expressions.

An expression names a scheme color and optionally transforms it::

    BACKGROUND
    COLOR3.darken(5).alpha(50)
    ACCENT.lighten(10).rgba

Segments after the base are applied left to right. A bare segment is an
output format token, ``name(argument)`` is a modifier call.

Resolution never raises: every outcome is a :class:`Resolution`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..color import Color

BASE_NAMES = {
    "BACKGROUND": "background",
    "FOREGROUND": "text",
    "ACCENT": "accent",
    "GOOD": "good",
    "WARNING": "warning",
    "ERROR": "error",
    "INFO": "info",
}

INDEX_PREFIX = "COLOR"
MODIFIERS = ("lighten", "darken", "alpha")


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving an expression: a color, or the reason there is none."""

    color: Color | None = None
    error: str | None = None

    @property
    def ok(self):
        return self.error is None

    @property
    def text(self):
        return self.color.to_string() if self.ok else None

    @classmethod
    def failure(cls, reason):
        return cls(error=reason)


def _resolve_base(scheme, name):
    if name in BASE_NAMES:
        return Resolution(scheme.role(BASE_NAMES[name]))

    if len(name) <= len(INDEX_PREFIX) or not name.startswith(INDEX_PREFIX):
        return Resolution.failure(f"unknown color name `{name}`")

    digits = name[len(INDEX_PREFIX) :]
    if not (digits.isascii() and digits.isdigit()):
        return Resolution.failure(f"`{digits}` is not a color index")

    index = int(digits)
    if index > 15:
        return Resolution.failure(f"color index {index} is out of range 0-15")
    return Resolution(scheme.scheme_colors[index])


def _apply_modifier(color, modifier, amount, light_theme):
    # "lighten" moves away from the background on both themes
    direction = -1.0 if light_theme else 1.0
    if modifier == "lighten":
        return color.adjust_luminance(amount * direction)
    if modifier == "darken":
        return color.adjust_luminance(-amount * direction)
    return color.adjust_alpha(amount / 100.0)


def resolve_expression(scheme, expression):
    """Resolve ``expression`` against a generated scheme.

    Args:
        scheme: A generated ColorScheme
        expression: Dot-separated reference, e.g. "COLOR1.lighten(5)"

    Returns:
        Resolution carrying the color, or the reason resolution failed
    """
    if not expression:
        return Resolution.failure("empty expression")

    base, *segments = expression.split(".")
    result = _resolve_base(scheme, base)
    if not result.ok:
        return result

    color = result.color
    for segment in segments:
        open_paren = segment.find("(")
        if open_paren == -1:
            if not Color.is_valid_format(segment):
                return Resolution.failure(f"unknown format `{segment}`")
            color = color.with_format(segment)
            continue

        modifier = segment[:open_paren]
        if not segment.endswith(")") or len(segment) < open_paren + 3:
            return Resolution.failure(f"malformed modifier `{segment}`")

        argument = segment[open_paren + 1 : -1]
        try:
            amount = float(argument)
        except ValueError:
            return Resolution.failure(f"`{argument}` is not a number")
        if "_" in argument or not math.isfinite(amount):
            return Resolution.failure(f"`{argument}` is not a finite decimal number")

        if modifier not in MODIFIERS:
            return Resolution.failure(f"unknown modifier `{modifier}`")
        color = _apply_modifier(color, modifier, amount, scheme.is_light())

    return Resolution(color)
