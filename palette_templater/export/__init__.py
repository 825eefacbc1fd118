from .xresources import format_summary, format_xresources

__all__ = ["format_summary", "format_xresources"]
