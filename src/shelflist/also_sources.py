"""Positional merge of "see also" sources with their descriptions."""
from __future__ import annotations

from typing import Iterable, List, Sequence

from .fields import extract_all


def flatten_descriptions(values: Iterable[str]) -> List[str]:
    """Split every captured description on ``;`` into one fragment pool."""
    fragments: List[str] = []
    for value in values:
        fragments.extend(part.strip() for part in value.split(";") if part.strip())
    return fragments


def merge_pairs(sources: Sequence[str], fragments: Sequence[str]) -> List[str]:
    """Pair sources with description fragments by position.

    Every source but the last takes one fragment; the last source absorbs all
    remaining fragments joined with ``;``. Sources past the end of the pool get
    no description.
    """
    pairs: List[str] = []
    cursor = 0
    last = len(sources) - 1
    for index, source in enumerate(sources):
        description = ""
        if cursor < len(fragments):
            if index == last:
                description = ";".join(fragments[cursor:])
                cursor = len(fragments)
            else:
                description = fragments[cursor]
                cursor += 1
        pairs.append(f"{source}{_separator(description)}{description}".strip())
    return pairs


def _separator(description: str) -> str:
    if not description or description.startswith((",", "(")):
        return ""
    return ", "


def join_pairs(pairs: Sequence[str], terminator: str = "; ") -> str:
    if not pairs:
        return ""
    return ";".join(pairs) + terminator


def merge_also_sources(entry: str, terminator: str = "; ") -> str:
    sources = [source.strip() for source in extract_all(entry, "also_source")]
    fragments = flatten_descriptions(extract_all(entry, "also_description"))
    return join_pairs(merge_pairs(sources, fragments), terminator)
