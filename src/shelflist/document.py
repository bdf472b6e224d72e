"""Paragraph/run layout of a formatted shelf list."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

from .config import ShelfListConfig
from .material_types import BUCKETS
from .models import CitationRecord, ShelfList


@dataclass(frozen=True)
class Run:
    text: str
    bold: bool = False
    italic: bool = False


@dataclass
class ShelfListDocument:
    """Ordered paragraphs, each an ordered list of styled runs."""

    paragraphs: List[List[Run]] = field(default_factory=list)

    def add_paragraph(self, runs: Iterable[Run]) -> None:
        self.paragraphs.append(list(runs))

    def add_text(self, text: str, bold: bool = False, italic: bool = False) -> None:
        self.add_paragraph([Run(text, bold=bold, italic=italic)])

    def add_blank(self) -> None:
        self.add_paragraph([])

    def paragraph_texts(self) -> List[str]:
        return ["".join(run.text for run in runs) for runs in self.paragraphs]

    def plain_text(self) -> str:
        return "\n".join(self.paragraph_texts())


class DocumentAssembler:
    """Lay out a shelf list bucket by bucket in its sorted order."""

    def __init__(self, config: ShelfListConfig | None = None):
        self.config = config or ShelfListConfig()

    def assemble(self, shelf_list: ShelfList) -> ShelfListDocument:
        labels = self.config.labels
        document = ShelfListDocument()
        document.add_text(
            labels.summary_line(
                total=shelf_list.total,
                books=shelf_list.count("books"),
                articles=shelf_list.count("articles"),
                other=shelf_list.count("other"),
            ),
            bold=True,
        )
        document.add_blank()

        for bucket in BUCKETS:
            items = shelf_list.entries(bucket)
            if not items:
                continue
            document.add_text(labels.bucket_header(bucket), bold=True)
            for item in items:
                self.append_citation(document, item.citation)
        return document

    def append_citation(self, document: ShelfListDocument, citation: CitationRecord) -> None:
        for line in citation.main_lines:
            if line.strip():
                document.add_text(line)
        if citation.styled_segments:
            document.add_paragraph(_runs(citation.styled_segments))
        if citation.item_type_line:
            document.add_text(citation.item_type_line)
        for note in citation.notes:
            document.add_text(f"\t{note}", italic=True)
        if citation.other_sources.strip():
            document.add_text(f"\t{self.config.labels.see_also}{citation.other_sources}")
        document.add_blank()


def _runs(segments: Sequence) -> List[Run]:
    return [Run(segment.text, bold=segment.bold, italic=segment.italic) for segment in segments]
