import re

_WHITESPACE = re.compile(r"\s+")
_NUMBERS = re.compile(r"\b\d+\b")
_STRINGS = re.compile(r"'[^']*'")
_PLACEHOLDERS = re.compile(r"\$\d+")


def normalize_query(sql: str) -> str:
    """Reduce a statement to the pattern shared by every execution of it.

    Literal values and positional placeholders are replaced with fixed
    wildcards so that ``WHERE id = $1`` and ``WHERE id = $12`` (or ``= 7`` and
    ``= 42``) group together. The numeric pass runs first and already rewrites
    the digits of every ``$n``, so the placeholder pass only catches what it
    leaves behind. Digits inside identifiers such as ``t1`` are kept.
    """
    normalized = _WHITESPACE.sub(" ", sql).strip()
    normalized = _NUMBERS.sub("?", normalized)
    normalized = _STRINGS.sub("'?'", normalized)
    return _PLACEHOLDERS.sub("$?", normalized)
