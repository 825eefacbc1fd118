import logging

import numpy as np
from PIL import Image, UnidentifiedImageError
from sklearn.cluster import KMeans

from .color import Color

logger = logging.getLogger(__name__)

# Average-color luminance at or above which an image gets a light theme
LIGHT_THRESHOLD = 0.5


class ImageError(RuntimeError):
    """Raised when an image cannot be read or sampled."""


def _load_pixels(image_path, size):
    try:
        with Image.open(image_path) as img:
            img = img.convert("RGB")
            img.thumbnail((size, size))
            return np.array(img).reshape(-1, 3)
    except (OSError, UnidentifiedImageError) as e:
        raise ImageError(f"Failed to open image: {image_path}") from e


def extract_colors(pixels, n_colors=16):
    """Extract dominant colors using k-means clustering

    Args:
        pixels: (N, 3) array of RGB pixels
        n_colors: Upper bound on the number of clusters

    Returns:
        list of Color, each carrying its share of the pixels as ``proportion``
    """
    # Remove extreme pixels
    mask = (pixels.sum(axis=1) > 30) & (pixels.sum(axis=1) < 735)
    filtered_pixels = pixels[mask]

    if len(filtered_pixels) == 0:
        filtered_pixels = pixels

    distinct = len(np.unique(filtered_pixels, axis=0))
    n_clusters = max(1, min(n_colors, distinct))

    kmeans = KMeans(n_clusters=n_clusters, random_state=42, n_init=10)
    labels = kmeans.fit_predict(filtered_pixels)
    counts = np.bincount(labels, minlength=n_clusters)

    colors = []
    for center, count in zip(kmeans.cluster_centers_, counts):
        r, g, b = (int(round(c)) for c in center)
        colors.append(Color(r, g, b, proportion=float(count) / len(labels)))

    logger.debug("Extracted %d dominant colors from %d pixels", len(colors), len(labels))
    return colors


def find_average_color(pixels):
    """Get overall average color of the pixels"""
    avg = pixels.mean(axis=0)
    return Color(int(avg[0]), int(avg[1]), int(avg[2]))


class WallpaperImage:
    """Dominant colors of an image plus its light/dark classification."""

    def __init__(self, dominant_colors, light):
        self._dominant_colors = list(dominant_colors)
        self._light = bool(light)

    @classmethod
    def from_path(cls, image_path, n_colors=16, force_theme=None):
        """Sample an image file.

        Args:
            image_path: Path to the source image
            n_colors: Number of dominant colors to extract
            force_theme: "dark", "light", or None (auto-detect from image)
        """
        pixels = _load_pixels(image_path, 300)
        if len(pixels) == 0:
            raise ImageError(f"Image has no pixels: {image_path}")

        colors = extract_colors(pixels, n_colors=n_colors)

        if force_theme is not None:
            light = force_theme == "light"
        else:
            light = find_average_color(pixels).luminance >= LIGHT_THRESHOLD

        logger.debug("%s: %s theme", image_path, "light" if light else "dark")
        return cls(colors, light)

    def is_light(self):
        return self._light

    def get_dominant_colors(self):
        return list(self._dominant_colors)
