"""Field extraction from raw catalogue export blocks.

Values are captured up to the first closing brace. Nested braces are not
supported; the catalogue export writes flat values only.
"""
from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Iterable, List

logger = logging.getLogger(__name__)

ENTRY_SPLIT_PATTERN = re.compile(r"(?=^@)", re.MULTILINE)


def split_entries(text: str) -> List[str]:
    """Split an export blob into entry blocks, one per line starting with ``@``."""
    if not text:
        return []
    blocks = [block.strip() for block in ENTRY_SPLIT_PATTERN.split(text)]
    entries = [block for block in blocks if block.startswith("@")]
    skipped = sum(1 for block in blocks if block and not block.startswith("@"))
    if skipped:
        logger.debug("Ignored %s text block(s) outside catalogue records", skipped)
    return entries


@lru_cache(maxsize=None)
def _field_pattern(name: str) -> re.Pattern[str]:
    return re.compile(rf"(?<!\w){re.escape(name)}\s*=\s*\{{([^}}]*)\}}", re.IGNORECASE)


def extract_all(entry: str, name: str) -> List[str]:
    """Return every value assigned to ``name`` in order of appearance."""
    return [match.group(1).strip() for match in _field_pattern(name).finditer(entry or "")]


def extract_first(entry: str, name: str) -> str:
    values = extract_all(entry, name)
    return values[0] if values else ""


def extract_first_of(entry: str, *names: str) -> str:
    """Return the first non-empty value among alias field names."""
    for name in names:
        value = extract_first(entry, name)
        if value:
            return value
    return ""


def unique(values: Iterable[str]) -> List[str]:
    """Deduplicate while keeping first-seen order."""
    return list(dict.fromkeys(values))


def extract_joined_unique(entry: str, name: str, sep: str = "; ") -> str:
    return sep.join(unique(extract_all(entry, name)))


def extract_item_types(entry: str) -> List[str]:
    """Uppercased item-type codes with their original order and multiplicity."""
    return [value.upper() for value in extract_all(entry, "item_type")]


def unique_item_types(entry: str) -> List[str]:
    return unique(extract_item_types(entry))
