# dynasty/utils/misc_utils.py
import re

_WHITESPACE_RE = re.compile(r"\s+")


def collapse_whitespace(value: str) -> str:
    """Trims a string and collapses internal whitespace runs to single spaces."""
    return _WHITESPACE_RE.sub(" ", value.strip())


def title_case_words(value: str) -> str:
    """Capitalizes the first letter of every space-delimited token.

    Unlike str.title() the rest of each token is left alone, so "UMass" and
    "McNeese" keep their casing.
    """
    return " ".join(token[:1].upper() + token[1:] for token in value.split(" "))


def generate_canonical_id(*args: str) -> str:
    """Generates a consistent lookup key from one or more strings."""
    return " ".join(collapse_whitespace(str(arg)).lower() for arg in args if arg)
