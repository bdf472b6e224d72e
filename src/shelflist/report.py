"""Plain-text summary of a processed shelf list."""
from __future__ import annotations

from collections import Counter

from .material_types import BUCKETS, label_for_bucket
from .models import ShelfList


def render_summary(shelf_list: ShelfList) -> str:
    """Return a human-readable summary of bucket sizes and classification rules."""

    lines = ["Shelf List Summary", f"Total records: {shelf_list.total}"]
    for bucket in BUCKETS:
        lines.append(f"{label_for_bucket(bucket)}: {shelf_list.count(bucket)}")

    if not shelf_list.total:
        lines.append("No catalogue records detected.")
        return "\n".join(lines)

    rules = Counter(item.classification.rule for item in shelf_list.entries())
    lines.append("Classification rules:")
    for rule, count in sorted(rules.items()):
        lines.append(f"  {rule}: {count}")

    untyped = [item for item in shelf_list.entries() if not item.entry.item_types]
    if untyped:
        lines.append(f"Records without item type: {len(untyped)}")
    return "\n".join(lines)
