"""
HTML escaping for project fields.

Rendering code interpolates titles, summaries and notes straight into
markup, so every value goes through escape_html first.
"""

_HTML_ESCAPES = str.maketrans({
    '&': '&amp;',
    '<': '&lt;',
    '>': '&gt;',
    '"': '&quot;',
    "'": '&#39;',
})


def escape_html(text: str | None) -> str:
    """Escape &, <, >, " and ' in a single pass. None and '' give ''.

    Not idempotent: escaping already-escaped text escapes its ampersands
    again.
    """
    if not text:
        return ""
    return str(text).translate(_HTML_ESCAPES)
