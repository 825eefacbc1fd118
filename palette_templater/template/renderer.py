"""Substitute ``$$EXPRESSION$$`` placeholders in text templates.

Templates are processed one line at a time. ``$$`` always toggles between
copying text and collecting an expression; there is no escape sequence, and a
placeholder cannot span lines.
"""

import logging

logger = logging.getLogger(__name__)

DELIMITER = "$$"


class TemplateError(RuntimeError):
    """A template could not be read or rendered."""


def _render_line(source, scheme, line, line_number):
    parts = []
    segment = []
    placeholder = False
    i = 0
    while i < len(line):
        if line.startswith(DELIMITER, i):
            text = "".join(segment)
            if placeholder:
                result = scheme.resolve(text)
                if not result.ok:
                    raise TemplateError(
                        f"Failed to parse color: `{text}` in file: `{source}` "
                        f"at line: {line_number} ({result.error})"
                    )
                parts.append(result.text)
            else:
                parts.append(text)
            placeholder = not placeholder
            segment = []
            i += len(DELIMITER)
        else:
            segment.append(line[i])
            i += 1

    if placeholder:
        raise TemplateError(
            f"Placeholder missing closing '{DELIMITER}' in file: `{source}` "
            f"at line: {line_number}"
        )

    parts.append("".join(segment))
    return "".join(parts)


def _split_lines(text):
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def render(text, scheme, source="<string>"):
    """Render template ``text`` against a generated scheme.

    Args:
        text: Template contents
        scheme: A generated ColorScheme
        source: Name used in error messages

    Returns:
        The rendered text, every line newline-terminated

    Raises:
        TemplateError: On the first expression that fails to resolve or
            placeholder left open; nothing is returned in that case
    """
    rendered = []
    for line_number, line in enumerate(_split_lines(text), start=1):
        rendered.append(_render_line(source, scheme, line, line_number) + "\n")
    logger.debug("Rendered %d lines from %s", len(rendered), source)
    return "".join(rendered)


def render_file(template_path, scheme):
    """Read a UTF-8 template file and render it."""
    try:
        with open(template_path, encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateError(f"Failed to open file: {template_path}") from e
    return render(text, scheme, source=str(template_path))
