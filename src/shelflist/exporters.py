"""Exporters for formatted shelf lists."""
from __future__ import annotations

import json
from typing import Any, Dict, List

from .document import ShelfListDocument
from .models import FormattedEntry, ShelfList


def _serialize_entry(item: FormattedEntry) -> Dict[str, Any]:
    citation = item.citation
    return {
        "position": item.entry.position,
        "item_types": list(item.entry.item_types),
        "year": item.entry.year,
        "bucket": item.classification.bucket,
        "layout": item.classification.layout,
        "rule": item.classification.rule,
        "main_lines": list(citation.main_lines),
        "styled_segments": [
            {"text": segment.text, "italic": segment.italic, "bold": segment.bold}
            for segment in citation.styled_segments
        ],
        "item_type_line": citation.item_type_line,
        "notes": list(citation.notes),
        "other_sources": citation.other_sources,
    }


def to_json(shelf_list: ShelfList) -> str:
    payload: Dict[str, Any] = {
        "total": shelf_list.total,
        "metadata": shelf_list.metadata,
        "buckets": {},
    }
    for bucket, items in shelf_list.buckets.items():
        serialized: List[Dict[str, Any]] = [_serialize_entry(item) for item in items]
        payload["buckets"][bucket] = serialized
    return json.dumps(payload, indent=2, ensure_ascii=False)


def to_text(document: ShelfListDocument) -> str:
    return document.plain_text() + "\n"
