import colorsys
import math
from dataclasses import dataclass, field, replace

# Contrast every "contrasting" palette color is pushed to reach
MIN_CONTRAST = 4.5

# Largest possible distance between two RGB colors (black to white)
MAX_RGB_DISTANCE = math.sqrt(3 * 255**2)

FORMATS = ("hex", "hexa", "strip", "rgb", "rgba")


def rgb_to_hex(r, g, b):
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_color):
    hex_color = hex_color.lstrip("#")
    if len(hex_color) != 6:
        raise ValueError(f"Expected a #rrggbb color, got: {hex_color!r}")
    return tuple(int(hex_color[i : i + 2], 16) for i in (0, 2, 4))


def rgb_to_hsl(r, g, b):
    r, g, b = r / 255, g / 255, b / 255
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    return (h * 360, s * 100, l * 100)


def hsl_to_rgb(h, s, l):
    h, s, l = (h % 360) / 360, s / 100, l / 100
    r, g, b = colorsys.hls_to_rgb(h, l, s)
    return (round(r * 255), round(g * 255), round(b * 255))


def relative_luminance(r, g, b):
    """Calculate relative luminance per WCAG 2.0"""

    def channel(c):
        c = c / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    return 0.2126 * channel(r) + 0.7152 * channel(g) + 0.0722 * channel(b)


def contrast_ratio(lum1, lum2):
    """Calculate contrast ratio between two luminances"""
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def _clamp(value, low, high):
    return max(low, min(high, value))


@dataclass(frozen=True)
class Color:
    """An sRGB color with alpha.

    Colors are values: every ``adjust_*`` method returns a new Color and
    leaves the receiver untouched. ``proportion`` carries the prevalence of
    a dominant image color and ``fmt`` the token used by :meth:`to_string`;
    neither takes part in equality.
    """

    r: int = 0
    g: int = 0
    b: int = 0
    alpha: float = 1.0
    proportion: float = field(default=0.0, compare=False)
    fmt: str = field(default="hex", compare=False)

    def __post_init__(self):
        for name in ("r", "g", "b"):
            object.__setattr__(self, name, int(_clamp(getattr(self, name), 0, 255)))
        object.__setattr__(self, "alpha", float(_clamp(self.alpha, 0.0, 1.0)))

    @classmethod
    def from_hex(cls, hex_color, proportion=0.0):
        return cls(*hex_to_rgb(hex_color), proportion=proportion)

    @classmethod
    def from_hsl(cls, h, s, l, alpha=1.0, proportion=0.0):
        return cls(*hsl_to_rgb(h, s, l), alpha=alpha, proportion=proportion)

    @property
    def rgb(self):
        return (self.r, self.g, self.b)

    @property
    def hex(self):
        return rgb_to_hex(self.r, self.g, self.b)

    @property
    def hsl(self):
        return rgb_to_hsl(self.r, self.g, self.b)

    @property
    def luminance(self):
        return relative_luminance(self.r, self.g, self.b)

    def _with_hsl(self, h, s, l):
        r, g, b = hsl_to_rgb(h, _clamp(s, 0, 100), _clamp(l, 0, 100))
        return replace(self, r=r, g=g, b=b)

    # --- transformations -------------------------------------------------

    def adjust_luminance(self, delta):
        """Shift HSL lightness by ``delta`` percentage points."""
        h, s, l = self.hsl
        return self._with_hsl(h, s, l + delta)

    def adjust_alpha(self, alpha):
        return replace(self, alpha=alpha)

    def adjust_hue(self, degrees):
        """Set the hue, keeping saturation and lightness."""
        _, s, l = self.hsl
        return self._with_hsl(degrees, s, l)

    def adjust_minmax_luminance(self, target, minimum):
        """Clamp lightness to at least ``target`` (``minimum``) or at most it."""
        h, s, l = self.hsl
        if minimum and l < target:
            return self._with_hsl(h, s, target)
        if not minimum and l > target:
            return self._with_hsl(h, s, target)
        return self

    def adjust_min_contrast(self, ratio, other, lighten):
        """
        Push lightness toward white (``lighten``) or black until the contrast
        against ``other`` reaches ``ratio``. Gives up at the lightness bound.
        """
        h, s, l = self.hsl
        step = 1 if lighten else -1
        bound = 100 if lighten else 0
        current = self
        while current.calculate_contrast(other) < ratio and l != bound:
            l = _clamp(l + step, 0, 100)
            current = self._with_hsl(h, s, l)
        return current

    def adjust_contrast_color(self, other, lighten):
        return self.adjust_min_contrast(MIN_CONTRAST, other, lighten)

    def multiply(self, factor):
        """Scale the RGB channels, darkening toward black for factor < 1."""
        return replace(
            self,
            r=round(self.r * factor),
            g=round(self.g * factor),
            b=round(self.b * factor),
        )

    def with_format(self, token):
        if not Color.is_valid_format(token):
            raise ValueError(f"Unknown color format: {token!r}")
        return replace(self, fmt=token)

    # --- queries ---------------------------------------------------------

    def calculate_minimum_distance(self, colors):
        """Smallest RGB distance to any of ``colors``, normalised to 0..1.

        An empty collection counts as maximally distant.
        """
        distance = 1.0
        for color in colors:
            d = math.dist(self.rgb, color.rgb) / MAX_RGB_DISTANCE
            distance = min(distance, d)
        return distance

    def calculate_luminance_difference(self, target):
        return abs(self.luminance - target)

    def calculate_contrast(self, other):
        return contrast_ratio(self.luminance, other.luminance)

    @staticmethod
    def is_valid_format(token):
        return token in FORMATS

    # --- rendering -------------------------------------------------------

    def to_hex(self):
        return self.hex

    def to_string(self):
        alpha_byte = round(self.alpha * 255)
        if self.fmt == "hexa":
            return f"{self.hex}{alpha_byte:02x}"
        if self.fmt == "strip":
            return self.hex[1:]
        if self.fmt == "rgb":
            return f"rgb({self.r}, {self.g}, {self.b})"
        if self.fmt == "rgba":
            return f"rgba({self.r}, {self.g}, {self.b}, {self.alpha:g})"
        return self.hex

    def __str__(self):
        return self.to_string()
