"""Text processing utilities."""
import re

_INLINE_SPACE = re.compile(r"[ \t\f\v]+")
_BLANK_LINES = re.compile(r"\n\s*\n+")


def clean_text(text: str) -> str:
    """
    Normalize extracted text while keeping paragraph breaks.

    Args:
        text: Text to clean

    Returns:
        Cleaned text
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _INLINE_SPACE.sub(" ", text)
    lines = [line.strip() for line in text.split("\n")]
    return _BLANK_LINES.sub("\n\n", "\n".join(lines)).strip()


def truncate_text(text: str, max_chars: int) -> str:
    """Cut text to at most max_chars characters."""
    if max_chars <= 0:
        return ""
    return text[:max_chars]
