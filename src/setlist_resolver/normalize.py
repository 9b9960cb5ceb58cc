"""Clean-up for free-text setlist fields.

Comment authors often decorate titles with a single enclosing bracket pair,
e.g. ``[Official]`` or ``【Live】``.  :func:`format_text` trims the field and
removes one such outer pair.
"""

# (opening, closing) pairs, checked in order; only the first match is stripped.
_BRACKET_PAIRS = (
    ("[", "]"),
    ("【", "】"),
)


def format_text(text: str) -> str:
    """Trim *text* and strip one enclosing bracket pair, if present.

    Brackets are only removed when they wrap the entire trimmed string, and
    only once::

        >>> format_text("  [Intro] ")
        'Intro'
        >>> format_text("[[Intro]]")
        '[Intro]'
        >>> format_text("[Intro] Medley")
        '[Intro] Medley'
    """
    text = text.strip()
    for opening, closing in _BRACKET_PAIRS:
        if text.startswith(opening) and text.endswith(closing):
            text = text[len(opening):-len(closing)]
            break
    return text.strip()
