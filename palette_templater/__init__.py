from .color import Color
from .image import ImageError, WallpaperImage
from .palette import ColorScheme
from .template import TemplateError, render, render_file

__all__ = [
    "Color",
    "ColorScheme",
    "ImageError",
    "TemplateError",
    "WallpaperImage",
    "render",
    "render_file",
]
