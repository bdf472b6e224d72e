from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, List

import pandas as pd
import streamlit as st

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from shelflist.app import ShelfListApp  # noqa: E402
from shelflist.config import ShelfListConfig  # noqa: E402
from shelflist.docx_writer import DOCX_MEDIA_TYPE  # noqa: E402
from shelflist.material_types import label_for_bucket  # noqa: E402
from shelflist.models import ShelfList  # noqa: E402


LANGUAGE_OPTIONS = {
    "Български": "bg",
    "English": "en",
}

VERSION_OPTIONS = {
    "Current": "current",
    "Legacy": "legacy",
}


def _build_rows(shelf_list: ShelfList) -> List[Dict[str, object]]:
    rows = []
    for item in shelf_list.entries():
        citation = item.citation
        rows.append(
            {
                "Bucket": label_for_bucket(item.classification.bucket),
                "Rule": item.classification.rule,
                "Year": item.entry.year,
                "Item types": ", ".join(item.entry.unique_item_types),
                "Citation": citation.citation_text(),
                "Notes": " | ".join(citation.notes),
                "See also": citation.other_sources,
            }
        )
    return rows


def main() -> None:
    st.set_page_config(page_title="Shelf List", layout="wide")
    st.title("Shelf List")
    st.caption("Paste or upload a catalogue export to preview the sorted shelf list and download it as DOCX.")

    language_label = st.selectbox("Labels", list(LANGUAGE_OPTIONS.keys()), index=0)
    version_label = st.selectbox("Output format", list(VERSION_OPTIONS.keys()), index=0)
    uploaded = st.file_uploader("Catalogue export", type=["bib", "bibtex", "txt"])
    pasted = st.text_area("Or paste records", placeholder="@book{...", height=220)

    if st.button("Build shelf list"):
        if uploaded is not None:
            text = uploaded.getvalue().decode("utf-8-sig", errors="replace")
        else:
            text = pasted
        if not text.strip():
            st.warning("Upload an export or paste records first.")
            return

        builder = ShelfListApp(
            ShelfListConfig(
                language=LANGUAGE_OPTIONS[language_label],
                format_version=VERSION_OPTIONS[version_label],
            )
        )
        shelf_list = builder.process_text(text)
        if not shelf_list.total:
            st.info("No records detected. Each record must start on a line beginning with '@'.")
            return

        st.write(builder.build_document(shelf_list).paragraph_texts()[0])
        st.dataframe(pd.DataFrame(_build_rows(shelf_list)), use_container_width=True, hide_index=True)
        st.download_button(
            "Download shelf list (DOCX)",
            data=builder.build_docx(shelf_list),
            file_name="shelf-list.docx",
            mime=DOCX_MEDIA_TYPE,
        )


if __name__ == "__main__":
    main()
