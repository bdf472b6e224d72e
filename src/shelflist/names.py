"""Normalization of responsibility statements and sort words."""
from __future__ import annotations

import re
from typing import Iterable, List

YEARBOOK_CODE = "GOI"
NAME_SEPARATOR = re.compile(r"\s*(?:\band\b|;)\s*", re.IGNORECASE)


def split_names(raw: str | None) -> List[str]:
    """Split a responsibility statement on ``and`` / ``;`` into name tokens."""
    if not raw:
        return []
    return [token.strip() for token in NAME_SEPARATOR.split(raw) if token.strip()]


def normalize_name(name: str) -> str:
    """Reorder ``"Last, First"`` into ``"First Last"``.

    Tokens with no comma or with more than one comma are returned trimmed but
    otherwise untouched.
    """
    parts = [part.strip() for part in name.split(",")]
    if len(parts) == 2:
        return f"{parts[1]} {parts[0]}".strip()
    return name.strip()


def format_responsibility(raw: str | None) -> str:
    return ", ".join(normalize_name(token) for token in split_names(raw))


def sort_word_with_et_al(
    base: str, raw_responsibility: str | None, item_types: Iterable[str], suffix: str = " и др."
) -> str:
    """Append the et-al suffix for multi-name statements outside yearbooks."""
    if not raw_responsibility:
        return base
    if len(split_names(raw_responsibility)) > 1 and YEARBOOK_CODE not in set(item_types):
        return f"{base}{suffix}"
    return base
