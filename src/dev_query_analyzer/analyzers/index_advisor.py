import re
from typing import Final

_WHITESPACE = re.compile(r"\s+")
_STRINGS = re.compile(r"'[^']*'")
_FROM = re.compile(r"\bFROM\s+((?:\w+\.)?(\w+))", re.IGNORECASE)
_WHERE = re.compile(r"\bWHERE\s+(.+?)(?=\b(?:ORDER|GROUP|LIMIT)\b|$)", re.IGNORECASE)
_CONDITION = re.compile(
    r"\b(\w+)\s*(?:NOT\s+)?(?:>=|<=|!=|=|>|<|\bIN\b|\bLIKE\b|\bIS\b)",
    re.IGNORECASE,
)

NON_COLUMN_WORDS: Final = frozenset({"and", "or", "not", "null", "true", "false"})


def suggest_index(sql: str) -> str | None:
    """Suggest a ``CREATE INDEX`` statement covering a query's WHERE columns.

    Heuristic only: the suggestion is never checked against a schema and may
    duplicate an existing index. Returns None when no table or no usable WHERE
    condition can be found.
    """
    text = _WHITESPACE.sub(" ", sql).strip()

    from_match = _FROM.search(text)
    if from_match is None:
        return None
    qualified_table = from_match.group(1).lower()
    table = from_match.group(2).lower()

    where_match = _WHERE.search(text, from_match.end())
    if where_match is None:
        return None
    where_clause = _STRINGS.sub("?", where_match.group(1))

    columns = _extract_columns(where_clause)
    if not columns:
        return None

    index_name = f"idx_{table}_{'_'.join(columns)}"
    return f"CREATE INDEX {index_name} ON {qualified_table} ({', '.join(columns)});"


def _extract_columns(where_clause: str) -> list[str]:
    columns: dict[str, None] = {}
    for match in _CONDITION.finditer(where_clause):
        token = match.group(1).lower()
        if token in NON_COLUMN_WORDS or token[0].isdigit():
            continue
        columns.setdefault(token, None)
    return list(columns)
