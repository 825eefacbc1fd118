from .renderer import TemplateError, render, render_file

__all__ = ["TemplateError", "render", "render_file"]
