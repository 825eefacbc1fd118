import logging

from ..color import Color
from .expression import resolve_expression

logger = logging.getLogger(__name__)

SCHEME_SIZE = 16

# Lightness clamps (HSL %, see Color.adjust_minmax_luminance)
LIGHT_BG_MIN_LIGHTNESS = 80
DARK_BG_MAX_LIGHTNESS = 10
DARK_TEXT_MIN_LIGHTNESS = 90
LIGHT_TEXT_MAX_LIGHTNESS = 10

# Canonical hues for the semantic roles
RED_HUE = 0.0
GREEN_HUE = 120.0
ORANGE_HUE = 30.0
BLUE_HUE = 240.0

# color0/color8 must stand out at least this much from the background
COLOR0_MIN_CONTRAST = 2.0

# color7 is color15 scaled toward black by this factor
DIM_FACTOR = 0.75

ROLES = ("background", "text", "accent", "good", "warning", "error", "info")


class ColorScheme:
    """A 16 color terminal scheme plus semantic roles, built from an image.

    Create it empty, call :meth:`generate` once, then treat it as read-only.
    Every pick during generation scores candidates by their distance to
    ``used_colors``, so the order of the steps in :meth:`generate` matters.
    """

    def __init__(self):
        self.light_theme = False
        self.dominant_colors = []
        self.used_colors = []

        self.background = Color()
        self.text = Color()
        self.accent = Color()
        self.good = Color()
        self.warning = Color()
        self.error = Color()
        self.info = Color()

        self.scheme_colors = [Color() for _ in range(SCHEME_SIZE)]

    def generate(self, image):
        """Populate every role and slot from ``image``."""
        light = image.is_light()
        self.light_theme = light
        self.dominant_colors = list(image.get_dominant_colors())
        logger.debug(
            "Generating %s scheme from %d candidates",
            "light" if light else "dark",
            len(self.dominant_colors),
        )

        self.background = self._commit("background", self.find_background_color(light))
        self.text = self._commit("text", self.find_text_color(not light))

        self._generate_special_colors()

        color0 = self.find_background_color(light)
        color0 = color0.adjust_min_contrast(COLOR0_MIN_CONTRAST, self.background, not light)
        self._commit("color0", color0)
        self.scheme_colors[0] = color0

        for index in range(1, 7):
            self.scheme_colors[index] = self._commit(
                f"color{index}", self.find_contrasting_color(not light)
            )

        color15 = self.find_text_color(not light)
        color7 = color15.multiply(DIM_FACTOR)
        self._commit("color7", color7)
        self._commit("color15", color15)

        self.scheme_colors[7] = color7
        self.scheme_colors[8] = color0
        for index in range(9, 15):
            self.scheme_colors[index] = self.scheme_colors[index - 8]
        self.scheme_colors[15] = color15

    def _commit(self, name, color):
        self.used_colors.append(color)
        logger.debug("Picked %s: %s", name, color.to_hex())
        return color

    def _generate_special_colors(self):
        light = self.light_theme

        self.accent = self._commit("accent", self.find_contrasting_color(not light))
        self.error = self._commit("error", self._find_hued_color(RED_HUE))
        self.good = self._commit("good", self._find_hued_color(GREEN_HUE))
        self.warning = self._commit("warning", self._find_hued_color(ORANGE_HUE))
        self.info = self._commit("info", self._find_hued_color(BLUE_HUE))

    def _find_hued_color(self, hue):
        lighten = not self.light_theme
        color = self.find_contrasting_color(lighten).adjust_hue(hue)
        # Rotating the hue can cost contrast, so clamp again
        return color.adjust_contrast_color(self.background, lighten)

    # --- candidate scans -------------------------------------------------

    def find_background_color(self, find_light):
        color = Color()
        max_score = 0.0
        opposite_background = 0.0 if find_light else 1.0
        target = LIGHT_BG_MIN_LIGHTNESS if find_light else DARK_BG_MAX_LIGHTNESS
        for dominant_color in self.dominant_colors:
            current = dominant_color.adjust_minmax_luminance(target, find_light)

            min_dist = current.calculate_minimum_distance(self.used_colors)
            dif = current.calculate_luminance_difference(opposite_background)

            score = current.proportion * dif**2 * min_dist
            if score > max_score:
                max_score = score
                color = current
        return color

    def find_text_color(self, find_light):
        color = Color()
        max_score = 0.0
        target = DARK_TEXT_MIN_LIGHTNESS if find_light else LIGHT_TEXT_MAX_LIGHTNESS
        for dominant_color in self.dominant_colors:
            current = dominant_color.adjust_minmax_luminance(target, find_light)

            min_dist = current.calculate_minimum_distance(self.used_colors)
            contrast = current.calculate_contrast(self.background)

            score = current.proportion * contrast * min_dist
            if score > max_score:
                max_score = score
                color = current
        return color

    def find_contrasting_color(self, find_light):
        color = Color()
        max_score = 0.0
        for dominant_color in self.dominant_colors:
            current = dominant_color.adjust_contrast_color(self.background, find_light)

            contrast = current.calculate_contrast(self.background)
            min_dist = current.calculate_minimum_distance(self.used_colors)

            score = contrast * min_dist
            if score > max_score:
                max_score = score
                color = current
        return color

    # --- read side -------------------------------------------------------

    def is_light(self):
        return self.light_theme

    def role(self, name):
        if name not in ROLES:
            raise KeyError(name)
        return getattr(self, name)

    def resolve(self, expression):
        """Resolve a color expression; see :mod:`.expression`."""
        return resolve_expression(self, expression)
