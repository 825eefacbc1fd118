from .expression import Resolution, resolve_expression
from .scheme import ColorScheme

__all__ = ["ColorScheme", "Resolution", "resolve_expression"]
