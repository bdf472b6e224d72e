"""Material-type classification and shelf ordering."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Tuple

from .models import CatalogueEntry, Classification

logger = logging.getLogger(__name__)

BOOK_CODES = frozenset({"KNG", "GOI", "CDD"})
ARTICLE_CODES = frozenset({"JOU", "KRA", "ARTICLE", "DRU", "NSP"})
YEARBOOK_CODE = "GOI"
CD_ROM_CODE = "CDD"

BUCKETS: Tuple[str, ...] = ("books", "articles", "other")


@dataclass(frozen=True)
class MaterialRule:
    key: str
    bucket: str
    layout: str
    matches: Callable[[CatalogueEntry], bool]


def _is_yearbook_only(entry: CatalogueEntry) -> bool:
    return entry.is_yearbook_only


def _is_monograph(entry: CatalogueEntry) -> bool:
    return entry.primary_type in BOOK_CODES - {YEARBOOK_CODE}


def _is_yearbook_contribution(entry: CatalogueEntry) -> bool:
    return YEARBOOK_CODE in entry.item_types and len(entry.item_types) > 1


def _is_article(entry: CatalogueEntry) -> bool:
    return entry.primary_type in ARTICLE_CODES


# Evaluated top to bottom, first match wins. The order is what keeps the
# buckets exclusive: a single GOI tag is a yearbook, GOI next to other tags is
# a contribution printed with the article layout.
RULES: Tuple[MaterialRule, ...] = (
    MaterialRule("yearbook", "books", "yearbook", _is_yearbook_only),
    MaterialRule("book", "books", "book", _is_monograph),
    MaterialRule("yearbook-contribution", "articles", "article", _is_yearbook_contribution),
    MaterialRule("article", "articles", "article", _is_article),
)

FALLBACK = Classification(bucket="other", layout="generic", rule="other")


def classify(entry: CatalogueEntry) -> Classification:
    """Return the bucket, layout and deciding rule for an entry."""
    for rule in RULES:
        if rule.matches(entry):
            return Classification(bucket=rule.bucket, layout=rule.layout, rule=rule.key)
    return FALLBACK


def is_book(entry: CatalogueEntry) -> bool:
    return classify(entry).bucket == "books"


def sort_key(entry: CatalogueEntry) -> Tuple[int, int]:
    return (0 if is_book(entry) else 1, entry.sort_year)


def sort_entries(entries: Iterable[CatalogueEntry]) -> List[CatalogueEntry]:
    """Books before everything else, then ascending year; stable for ties."""
    return sorted(entries, key=sort_key)


def partition(entries: Iterable[CatalogueEntry]) -> Dict[str, List[Tuple[CatalogueEntry, Classification]]]:
    """Group entries into buckets, keeping the incoming order inside each one."""
    grouped: Dict[str, List[Tuple[CatalogueEntry, Classification]]] = {bucket: [] for bucket in BUCKETS}
    for entry in entries:
        classification = classify(entry)
        logger.debug(
            "Entry %s classified as %s by rule %s",
            entry.position,
            classification.bucket,
            classification.rule,
        )
        grouped[classification.bucket].append((entry, classification))
    return grouped


def label_for_bucket(bucket: str | None) -> str:
    if not bucket or bucket not in BUCKETS:
        return "Other"
    return bucket.title()
