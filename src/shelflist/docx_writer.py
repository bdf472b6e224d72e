"""Minimal WordprocessingML writer and reader for shelf-list documents."""
from __future__ import annotations

import zipfile
from io import BytesIO
from pathlib import Path
from typing import List, Sequence
from xml.etree import ElementTree
from xml.sax.saxutils import escape

from .document import Run, ShelfListDocument

WORD_NAMESPACE = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
ZIP_TIMESTAMP = (1980, 1, 1, 0, 0, 0)

CONTENT_TYPES = """<?xml version=\"1.0\" encoding=\"UTF-8\"?>
<Types xmlns=\"http://schemas.openxmlformats.org/package/2006/content-types\">
    <Default Extension=\"rels\" ContentType=\"application/vnd.openxmlformats-package.relationships+xml\"/>
    <Default Extension=\"xml\" ContentType=\"application/xml\"/>
    <Override PartName=\"/word/document.xml\" ContentType=\"application/vnd.openxmlformats-officedocument.wordprocessingml.document.main+xml\"/>
</Types>"""

PACKAGE_RELS = """<?xml version=\"1.0\" encoding=\"UTF-8\"?>
<Relationships xmlns=\"http://schemas.openxmlformats.org/package/2006/relationships\">
    <Relationship Id=\"rId1\" Type=\"http://schemas.openxmlformats.org/officeDocument/2006/relationships/officeDocument\" Target=\"word/document.xml\"/>
</Relationships>"""

DOCUMENT_RELS = """<?xml version=\"1.0\" encoding=\"UTF-8\"?>
<Relationships xmlns=\"http://schemas.openxmlformats.org/package/2006/relationships\"></Relationships>"""

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def build_docx(document: ShelfListDocument, font_size: int = 24) -> bytes:
    """Serialize the document's paragraphs and styled runs into DOCX bytes.

    ``font_size`` is in half-points, so 24 prints as 12pt.
    """
    parts = [
        "<?xml version=\"1.0\" encoding=\"UTF-8\" standalone=\"yes\"?>",
        f"<w:document xmlns:w=\"{WORD_NAMESPACE}\">",
        "<w:body>",
    ]
    for runs in document.paragraphs:
        parts.append(_paragraph_xml(runs, font_size))
    parts.append("</w:body></w:document>")
    document_xml = "".join(parts)

    buffer = BytesIO()
    with zipfile.ZipFile(buffer, mode="w", compression=zipfile.ZIP_DEFLATED) as archive:
        for name, payload in (
            ("[Content_Types].xml", CONTENT_TYPES),
            ("_rels/.rels", PACKAGE_RELS),
            ("word/_rels/document.xml.rels", DOCUMENT_RELS),
            ("word/document.xml", document_xml),
        ):
            # fixed timestamp keeps identical input byte-identical
            info = zipfile.ZipInfo(name, date_time=ZIP_TIMESTAMP)
            info.compress_type = zipfile.ZIP_DEFLATED
            archive.writestr(info, payload)
    return buffer.getvalue()


def _paragraph_xml(runs: Sequence[Run], font_size: int) -> str:
    if not runs:
        return "<w:p/>"
    return "<w:p>" + "".join(_run_xml(run, font_size) for run in runs) + "</w:p>"


def _run_xml(run: Run, font_size: int) -> str:
    properties = ""
    if run.bold:
        properties += "<w:b/>"
    if run.italic:
        properties += "<w:i/>"
    properties += f"<w:sz w:val=\"{font_size}\"/>"

    content = []
    for index, piece in enumerate(run.text.split("\t")):
        if index:
            content.append("<w:tab/>")
        if piece:
            content.append(f"<w:t xml:space=\"preserve\">{escape(piece)}</w:t>")
    return f"<w:r><w:rPr>{properties}</w:rPr>{''.join(content)}</w:r>"


def load_docx_paragraphs(source: str | Path | bytes) -> List[str]:
    """Read paragraph texts back from a DOCX file or its bytes; tabs become ``\\t``."""
    handle = BytesIO(source) if isinstance(source, bytes) else Path(source)
    with zipfile.ZipFile(handle) as archive:
        xml = archive.read("word/document.xml")
    tree = ElementTree.fromstring(xml)
    namespace = {"w": WORD_NAMESPACE}
    text_tag = f"{{{WORD_NAMESPACE}}}t"
    tab_tag = f"{{{WORD_NAMESPACE}}}tab"

    paragraphs = []
    for para in tree.findall(".//w:p", namespace):
        pieces = []
        for node in para.iter():
            if node.tag == text_tag and node.text:
                pieces.append(node.text)
            elif node.tag == tab_tag:
                pieces.append("\t")
        paragraphs.append("".join(pieces))
    return paragraphs


def load_docx_text(source: str | Path | bytes) -> str:
    return "\n".join(load_docx_paragraphs(source))
