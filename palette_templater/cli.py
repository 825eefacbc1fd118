import argparse
import logging
import os
import sys

from .export import format_summary, format_xresources
from .image import ImageError, WallpaperImage
from .palette import ColorScheme
from .template import TemplateError, render_file


def build_parser():
    parser = argparse.ArgumentParser(
        description="Generate a terminal color scheme from an image and apply it to templates"
    )
    parser.add_argument(
        "image_path",
        help="Path to the source image",
    )
    parser.add_argument(
        "--template", "-t",
        metavar="FILE",
        default=None,
        help="Template file with $$COLOR$$ placeholders to render",
    )
    parser.add_argument(
        "--output", "-o",
        metavar="FILE",
        default=None,
        help="Where to write the rendered template (default: stdout)",
    )
    parser.add_argument(
        "--theme",
        choices=["dark", "light"],
        default=None,
        help="Force a dark or light scheme (default: detect from the image)",
    )
    parser.add_argument(
        "--colors",
        type=int,
        default=16,
        help="Number of dominant colors to extract from the image (default: 16)",
    )
    parser.add_argument(
        "--xresources",
        action="store_true",
        help="Print the scheme in X resources format",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print the roles and slots with their contrast against the background",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every palette pick",
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.output and not args.template:
        parser.error("--output requires --template")
    if args.colors < 1:
        parser.error("--colors must be at least 1")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return _run(args)
    except (ImageError, TemplateError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


def _run(args):
    """Generate the scheme and write every requested output."""
    image = WallpaperImage.from_path(
        args.image_path, n_colors=args.colors, force_theme=args.theme
    )
    scheme = ColorScheme()
    scheme.generate(image)

    if args.summary:
        print(format_summary(scheme))

    if args.xresources:
        print(format_xresources(scheme), end="")

    if args.template:
        rendered = render_file(args.template, scheme)
        if args.output:
            output_dir = os.path.dirname(args.output)
            if output_dir:
                os.makedirs(output_dir, exist_ok=True)
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(rendered)
            print(f"Rendered {args.template} -> {args.output}", file=sys.stderr)
        else:
            sys.stdout.write(rendered)

    return 0


if __name__ == "__main__":
    sys.exit(main())
