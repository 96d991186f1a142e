import re

# Matches any HTML tag, including tags whose attributes span several lines
_TAG_RE = re.compile(r"<.*?>", re.DOTALL)


def get_text_from_html(text: str = "") -> str:
    """Strip every HTML tag from *text* and trim surrounding whitespace."""
    return _TAG_RE.sub("", text).strip()


def trim_till_last_sentence(text: str, length: int = 0) -> str:
    """Shorten *text* to at most *length* characters at a readable boundary.

    HTML tags are removed first.  The cut prefers the last full stop inside
    the limit, then the last space, and only falls back to a hard cut at
    *length* characters when neither exists::

        >>> trim_till_last_sentence("Tirth Bodawala.", 14)
        'Tirth Bodawala'
        >>> trim_till_last_sentence("Tirth Bodawala", 5)
        'Tirth'

    A falsy *length* disables truncation and only strips the markup.
    """
    text = get_text_from_html(text)

    if not length or not text:
        return text

    # Pad so a boundary right after the last allowed character is still found
    text += " "
    window = text[: length + 1]

    separator = "."
    if window.rfind(separator) == -1:
        separator = " "
        if window.rfind(separator) == -1:
            return text[:length]

    return window[: min(len(window) - 1, window.rfind(separator))].strip()
