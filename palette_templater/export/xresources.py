XRESOURCES_HEADERS = [
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
]

ROLE_LABELS = [
    ("background", "background"),
    ("foreground", "text"),
    ("accent", "accent"),
    ("good", "good"),
    ("warning", "warning"),
    ("error", "error"),
    ("info", "info"),
]


def format_xresources(scheme):
    """Render a generated scheme as an X resources file.

    Each header block lists the normal color and its bright counterpart
    (``color<i>`` and ``color<i+8>``).
    """
    lines = [
        "! special",
        f"*.foreground:\t{scheme.text.to_string()}",
        f"*.background:\t{scheme.background.to_string()}",
        f"*.cursorColor:\t{scheme.text.to_string()}",
    ]

    for i, header in enumerate(XRESOURCES_HEADERS):
        lines.append("")
        lines.append(f"! {header}")
        lines.append(f"*.color{i}:\t{scheme.scheme_colors[i].to_string()}")
        lines.append(f"*.color{i + 8}:\t{scheme.scheme_colors[i + 8].to_string()}")

    return "\n".join(lines) + "\n"


def format_summary(scheme):
    """Human readable listing of roles and slots with their contrast"""
    bg = scheme.background

    report = []
    report.append("=" * 60)
    report.append(f"COLOR SCHEME ({'LIGHT' if scheme.is_light() else 'DARK'} THEME)")
    report.append("=" * 60)

    report.append("\nROLES:")
    for label, attr in ROLE_LABELS:
        c = scheme.role(attr)
        report.append(f"  {label:12} {c.to_hex()}  (contrast: {c.calculate_contrast(bg):.1f}:1)")

    report.append("\nTERMINAL (0-15):")
    for i, c in enumerate(scheme.scheme_colors):
        name = XRESOURCES_HEADERS[i % 8] + ("_bright" if i >= 8 else "")
        report.append(
            f"  color{i:<2} {name:15} {c.to_hex()}  (contrast: {c.calculate_contrast(bg):.1f}:1)"
        )

    return "\n".join(report)
