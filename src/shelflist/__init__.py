"""Shelf-list builder for library catalogue exports."""

from .app import ShelfListApp
from .config import ShelfListConfig
from .document import DocumentAssembler, Run, ShelfListDocument
from .formatter import CitationFormatter
from .models import CatalogueEntry, CitationRecord, Classification, Segment, ShelfList

__all__ = [
    "ShelfListApp",
    "ShelfListConfig",
    "DocumentAssembler",
    "Run",
    "ShelfListDocument",
    "CitationFormatter",
    "CatalogueEntry",
    "CitationRecord",
    "Classification",
    "Segment",
    "ShelfList",
]
