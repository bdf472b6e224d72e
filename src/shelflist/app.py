"""High-level orchestrator turning catalogue exports into shelf lists."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from .config import ShelfListConfig
from .document import DocumentAssembler, ShelfListDocument
from .docx_writer import build_docx
from .fields import extract_first, extract_item_types, split_entries
from .formatter import CitationFormatter
from .material_types import partition, sort_entries
from .models import CatalogueEntry, FormattedEntry, ShelfList
from .report import render_summary

logger = logging.getLogger(__name__)


class ShelfListApp:
    """Coordinates splitting, classification, formatting and DOCX export."""

    def __init__(self, config: ShelfListConfig | None = None):
        self.config = config or ShelfListConfig()
        self.formatter = CitationFormatter(self.config)
        self.assembler = DocumentAssembler(self.config)

    @staticmethod
    def parse_text(text: str) -> List[CatalogueEntry]:
        entries = []
        for position, block in enumerate(split_entries(text)):
            entries.append(
                CatalogueEntry(
                    raw_text=block,
                    position=position,
                    item_types=tuple(extract_item_types(block)),
                    year=extract_first(block, "year"),
                )
            )
        return entries

    def process_text(self, text: str) -> ShelfList:
        entries = self.parse_text(text)
        grouped = partition(sort_entries(entries))

        # Each citation only depends on its own entry; bucket order is fixed
        # by ``grouped`` and preserved here.
        shelf_list = ShelfList()
        for bucket, members in grouped.items():
            shelf_list.buckets[bucket] = [
                FormattedEntry(
                    entry=entry,
                    classification=classification,
                    citation=self.formatter.format(entry, classification.layout),
                )
                for entry, classification in members
            ]
        shelf_list.metadata = {
            "language": self.config.language,
            "format_version": self.config.version.key,
        }
        logger.info(
            "Formatted %s records (books=%s, articles=%s, other=%s)",
            shelf_list.total,
            shelf_list.count("books"),
            shelf_list.count("articles"),
            shelf_list.count("other"),
        )
        return shelf_list

    def process_file(self, file_path: str | Path) -> ShelfList:
        """Read a catalogue export (UTF-8) and process it."""
        path = Path(file_path)
        logger.debug("Reading catalogue export %s", path)
        return self.process_text(path.read_text(encoding="utf-8-sig"))

    def build_document(self, shelf_list: ShelfList) -> ShelfListDocument:
        return self.assembler.assemble(shelf_list)

    def build_docx(self, shelf_list: ShelfList) -> bytes:
        return build_docx(self.build_document(shelf_list), font_size=self.config.font_size)

    def summary_report(self, text: str) -> str:
        return render_summary(self.process_text(text))
