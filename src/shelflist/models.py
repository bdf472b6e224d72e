"""Data models for the shelf-list pipeline."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

LEADING_YEAR = re.compile(r"\s*([0-9]+)")


@dataclass(frozen=True)
class CatalogueEntry:
    """One raw record block split from the catalogue export."""

    raw_text: str
    position: int
    item_types: Tuple[str, ...] = ()
    year: str = ""

    @property
    def primary_type(self) -> str:
        return self.item_types[0] if self.item_types else ""

    @property
    def unique_item_types(self) -> Tuple[str, ...]:
        return tuple(dict.fromkeys(self.item_types))

    @property
    def sort_year(self) -> int:
        """Leading integer of the year field; ``0`` when it does not parse."""
        match = LEADING_YEAR.match(self.year)
        return int(match.group(1)) if match else 0

    @property
    def is_yearbook_only(self) -> bool:
        return self.item_types == ("GOI",)


@dataclass(frozen=True)
class Segment:
    """A run of citation text with its styling hints."""

    text: str
    italic: bool = False
    bold: bool = False


@dataclass(frozen=True)
class CitationRecord:
    """Formatter output for a single entry."""

    main_lines: Tuple[str, ...] = ()
    styled_segments: Tuple[Segment, ...] = ()
    item_type_line: str = ""
    notes: Tuple[str, ...] = ()
    other_sources: str = ""

    @property
    def styled_text(self) -> str:
        return "".join(segment.text for segment in self.styled_segments)

    def citation_text(self) -> str:
        """The ISBD line as plain text, whichever form the layout produced."""
        if self.styled_segments:
            return self.styled_text.strip()
        return self.main_lines[-1].strip() if self.main_lines else ""


@dataclass(frozen=True)
class Classification:
    bucket: str
    layout: str
    rule: str


@dataclass
class FormattedEntry:
    entry: CatalogueEntry
    classification: Classification
    citation: CitationRecord


@dataclass
class ShelfList:
    """Sorted, bucketed and formatted entries ready for document assembly."""

    buckets: Dict[str, List[FormattedEntry]] = field(default_factory=dict)
    metadata: Dict[str, str] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return sum(len(items) for items in self.buckets.values())

    def count(self, bucket: str) -> int:
        return len(self.buckets.get(bucket, []))

    def entries(self, bucket: Optional[str] = None) -> List[FormattedEntry]:
        if bucket is not None:
            return list(self.buckets.get(bucket, []))
        return [item for items in self.buckets.values() for item in items]
