"""ISBD-style citation formatting for catalogue entries."""
from __future__ import annotations

import re
from typing import List, Sequence, Tuple

from .also_sources import merge_also_sources
from .config import ShelfListConfig
from .fields import extract_all, extract_first, extract_first_of, extract_joined_unique, unique
from .material_types import CD_ROM_CODE, YEARBOOK_CODE
from .models import CatalogueEntry, CitationRecord, Segment
from .names import format_responsibility, sort_word_with_et_al

ISBD_SEPARATOR = ". – "
PAGE_COUNT_MARKER = re.compile(r"с\.", re.IGNORECASE)


def join_present(*parts: Tuple[str, str]) -> str:
    """Join ``(separator, value)`` pairs, skipping empty values.

    The separator of a part is only emitted when something precedes it.
    """
    text = ""
    for separator, value in parts:
        if not value:
            continue
        text += (separator if text else "") + value
    return text


def isbd_line(
    title: str,
    subtitle: str = "",
    responsibility: str = "",
    edition: str = "",
    extra: str = "",
    publication: str = "",
    physical: str = "",
    series: str = "",
    isbn: str = "",
) -> str:
    """Assemble the punctuated description, omitting absent components."""
    line = title
    if subtitle:
        line += f" : {subtitle}"
    if responsibility:
        line += f" / {responsibility}"
    for block in (edition, extra, publication, physical):
        if block:
            line += f"{ISBD_SEPARATOR}{block}"
    if series:
        line += f"{ISBD_SEPARATOR}({series})"
    if isbn:
        line += f"{ISBD_SEPARATOR}ISBN {isbn}"
    return line


def publication_block(place: str, publisher: str, year: str) -> str:
    return join_present(("", place), (" : ", publisher), (", ", year))


def physical_block(extent: str, dimensions: str) -> str:
    return join_present(("", extent), (" ; ", dimensions))


class CitationFormatter:
    """Format entries into citation records, one layout per material type.

    The layout key selects ``format_<layout>``; unknown layouts fall back to
    the generic one.
    """

    SUPPORTED_LAYOUTS = {"book", "article", "yearbook", "generic"}

    def __init__(self, config: ShelfListConfig | None = None):
        self.config = config or ShelfListConfig()

    def format(self, entry: CatalogueEntry, layout: str = "generic") -> CitationRecord:
        layout_key = layout.lower().strip()
        if layout_key not in self.SUPPORTED_LAYOUTS:
            layout_key = "generic"
        formatter = getattr(self, f"format_{layout_key}")
        return formatter(entry)

    def format_book(self, entry: CatalogueEntry) -> CitationRecord:
        raw = entry.raw_text
        raw_responsibility = extract_first_of(raw, "responsibility", "author")
        responsibility = "" if entry.is_yearbook_only else format_responsibility(raw_responsibility)

        sort_word = ""
        if not entry.is_yearbook_only:
            sort_word = sort_word_with_et_al(
                extract_first_of(raw, "sort_word", "author"),
                raw_responsibility,
                entry.item_types,
                suffix=self.config.labels.et_al,
            )

        line = isbd_line(
            title=self._title(entry),
            subtitle=extract_first_of(raw, "subtitle", "substitle"),
            responsibility=responsibility,
            edition=extract_joined_unique(raw, "edition"),
            extra=extract_first(raw, "book_info"),
            publication=publication_block(
                extract_first_of(raw, "address", "place"),
                extract_first(raw, "publisher"),
                extract_first(raw, "year"),
            ),
            physical=physical_block(
                extract_first_of(raw, "page_count", "extent"),
                extract_first_of(raw, "illustrations", "dimensions"),
            ),
            series=extract_first(raw, "series"),
            isbn=extract_first(raw, "isbn"),
        )
        lines = _non_blank([self._signature_line(raw), sort_word, f"  {line}"])
        return self._record(entry, main_lines=lines)

    def format_article(self, entry: CatalogueEntry) -> CitationRecord:
        raw = entry.raw_text
        separator = self.config.version.article_separator
        raw_responsibility = extract_first_of(raw, "responsibility", "author")
        has_yearbook_tag = YEARBOOK_CODE in entry.item_types

        lines: List[str] = []
        if len(entry.item_types) == 2 and has_yearbook_tag:
            lines.append(self._signature_line(raw))
        if not has_yearbook_tag:
            lines.append(
                sort_word_with_et_al(
                    extract_first(raw, "sort_word"),
                    raw_responsibility,
                    entry.item_types,
                    suffix=self.config.labels.et_al,
                )
            )

        prefix = f"  {self._title(entry)}"
        column = extract_first(raw, "column")
        if column:
            prefix += f". ({column})"
        responsibility = format_responsibility(raw_responsibility)
        if responsibility and not entry.is_yearbook_only:
            prefix += f" / {responsibility}"

        source = extract_first(raw, "source")
        suffix = ""
        city = extract_first(raw, "journal_city")
        if city:
            suffix += f" ({city})"
        issue = extract_first(raw, "issue")
        if issue:
            suffix += f"{separator}бр. {issue}"
        year = extract_first(raw, "year")
        if year:
            suffix += f"{separator}({year})"
        pages = extract_first(raw, "art_pages")
        if pages:
            suffix += f"{separator}{pages}"

        if source:
            segments = [
                Segment(f"{prefix}{ISBD_SEPARATOR}В: "),
                Segment(source, italic=True),
            ]
            if suffix:
                segments.append(Segment(suffix))
        else:
            segments = [Segment(prefix + suffix)]
        return self._record(entry, main_lines=_non_blank(lines), styled_segments=segments)

    def format_yearbook(self, entry: CatalogueEntry) -> CitationRecord:
        raw = entry.raw_text
        edition = extract_first(raw, "edition")
        edition_extent = edition if edition and PAGE_COUNT_MARKER.search(edition) else ""
        edition_publication = edition if edition and not edition_extent else ""

        publication = edition_publication or publication_block(
            extract_first_of(raw, "address", "place"),
            extract_first(raw, "publisher"),
            extract_first(raw, "year"),
        )
        line = isbd_line(
            title=extract_first(raw, "title"),
            subtitle=extract_first_of(raw, "subtitle", "substitle"),
            responsibility=extract_first(raw, "responsibility"),
            publication=publication,
            physical=edition_extent or extract_first_of(raw, "page_count", "extent"),
        )
        lines = [extract_first(raw, "main_sig"), line]
        persons = unique(extract_all(raw, "about_person"))
        if persons:
            lines.append(self.config.labels.persons_discussed + ", ".join(persons))
        return self._record(entry, main_lines=_non_blank(lines))

    def format_generic(self, entry: CatalogueEntry) -> CitationRecord:
        raw = entry.raw_text
        heading = ""
        if YEARBOOK_CODE not in entry.item_types:
            heading = format_responsibility(extract_first_of(raw, "responsibility", "author"))
        line = f"  {self._title(entry)}"
        year = extract_first(raw, "year")
        if year:
            line += f" ({year})"
        return self._record(entry, main_lines=_non_blank([heading, line]))

    def notes(self, entry: CatalogueEntry) -> Tuple[str, ...]:
        prefix = re.compile(rf"^{re.escape(self.config.labels.notes_prefix)}\s*", re.IGNORECASE)
        cleaned = (prefix.sub("", note).strip() for note in extract_all(entry.raw_text, "abstract"))
        return tuple(note for note in cleaned if note)

    def item_type_line(self, entry: CatalogueEntry) -> str:
        codes = entry.unique_item_types
        if not codes:
            return ""
        return self.config.labels.item_types + ", ".join(codes)

    def _record(
        self,
        entry: CatalogueEntry,
        main_lines: Sequence[str],
        styled_segments: Sequence[Segment] = (),
    ) -> CitationRecord:
        return CitationRecord(
            main_lines=tuple(main_lines),
            styled_segments=tuple(styled_segments),
            item_type_line=self.item_type_line(entry),
            notes=self.notes(entry),
            other_sources=merge_also_sources(
                entry.raw_text, terminator=self.config.version.also_source_terminator
            ),
        )

    def _signature_line(self, raw: str) -> str:
        main_sig = extract_first(raw, "main_sig")
        dep_sig = extract_first(raw, "dep_sig")
        if not (main_sig or dep_sig):
            return ""
        return f"{main_sig}{self.config.signature_gap}{dep_sig}"

    @staticmethod
    def _title(entry: CatalogueEntry) -> str:
        title = extract_first(entry.raw_text, "title")
        if CD_ROM_CODE in entry.item_types:
            title += " [CD-ROM]"
        return title


def _non_blank(lines: Sequence[str]) -> List[str]:
    return [line for line in lines if line.strip()]
