"""Output configuration: label sets and format versions."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Labels:
    """Localized fixed strings printed around the formatted citations."""

    summary: str
    books: str
    articles: str
    other: str
    see_also: str
    et_al: str
    persons_discussed: str
    item_types: str
    notes_prefix: str = "Съдържа и:"

    def summary_line(self, total: int, books: int, articles: int, other: int) -> str:
        return self.summary.format(total=total, books=books, articles=articles, other=other)

    def bucket_header(self, bucket: str) -> str:
        return {"books": self.books, "articles": self.articles, "other": self.other}[bucket]


LABELS: Dict[str, Labels] = {
    "bg": Labels(
        summary="Общо записи: {total} (Книги: {books}, Статии: {articles}, Други: {other})",
        books="КНИГИ",
        articles="СТАТИИ",
        other="ДРУГИ",
        see_also="Вж. и: ",
        et_al=" и др.",
        persons_discussed="Имена на лица, за които става дума: ",
        item_types="Item types: ",
    ),
    "en": Labels(
        summary="Total records: {total} (Books: {books}, Articles: {articles}, Other: {other})",
        books="BOOKS",
        articles="ARTICLES",
        other="OTHER",
        see_also="See also: ",
        et_al=" и др.",
        persons_discussed="Persons discussed: ",
        item_types="Item types: ",
    ),
}


@dataclass(frozen=True)
class FormatVersion:
    """Punctuation differences between the current and the historical output."""

    key: str
    also_source_terminator: str
    article_separator: str


FORMAT_VERSIONS: Dict[str, FormatVersion] = {
    "current": FormatVersion("current", also_source_terminator="; ", article_separator=", "),
    "legacy": FormatVersion("legacy", also_source_terminator=";", article_separator=" , "),
}

DEFAULT_LANGUAGE = "bg"
DEFAULT_FORMAT_VERSION = "current"


@dataclass(frozen=True)
class ShelfListConfig:
    """Settings shared by the formatter, the assembler and the DOCX writer.

    Unknown languages and format versions fall back to the defaults rather
    than failing, mirroring how unsupported citation styles are handled.
    """

    language: str = DEFAULT_LANGUAGE
    format_version: str = DEFAULT_FORMAT_VERSION
    font_size: int = 24
    signature_gap: str = " " * 7

    @property
    def labels(self) -> Labels:
        key = (self.language or "").lower().strip()
        return LABELS.get(key, LABELS[DEFAULT_LANGUAGE])

    @property
    def version(self) -> FormatVersion:
        key = (self.format_version or "").lower().strip()
        return FORMAT_VERSIONS.get(key, FORMAT_VERSIONS[DEFAULT_FORMAT_VERSION])
