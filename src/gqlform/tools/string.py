import re

from caseconverter import snakecase


def normalize_whitespace(text: str) -> str:
    """Normalize whitespace in text by collapsing multiple spaces/newlines."""
    return re.sub(r"\s+", " ", text).strip()


def humanize(identifier: str) -> str:
    """Turn an identifier into a field label, e.g. "firstName" -> "First Name"."""
    words = snakecase(identifier).split("_")
    return normalize_whitespace(" ".join(word.capitalize() for word in words))
