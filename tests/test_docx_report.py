import zipfile
from io import BytesIO

from shelflist.app import ShelfListApp
from shelflist.document import Run, ShelfListDocument
from shelflist.docx_writer import build_docx, load_docx_paragraphs, load_docx_text


def test_docx_round_trip_keeps_tabs_and_spacing():
    document = ShelfListDocument()
    document.add_text("Header", bold=True)
    document.add_blank()
    document.add_paragraph([Run("  Title. – В: "), Run("Journal", italic=True), Run(", (1950)")])
    document.add_text("\tNote & <more>", italic=True)

    data = build_docx(document)

    assert load_docx_paragraphs(data) == [
        "Header",
        "",
        "  Title. – В: Journal, (1950)",
        "\tNote & <more>",
    ]


def test_docx_runs_carry_styling():
    document = ShelfListDocument()
    document.add_paragraph([Run("plain"), Run("bold", bold=True), Run("italic", italic=True)])

    with zipfile.ZipFile(BytesIO(build_docx(document, font_size=20))) as archive:
        xml = archive.read("word/document.xml").decode("utf-8")

    assert "<w:b/>" in xml
    assert "<w:i/>" in xml
    assert "<w:sz w:val=\"20\"/>" in xml
    assert xml.count("<w:r>") == 3


def test_shelf_list_docx_file(sample_export, tmp_path):
    app = ShelfListApp()
    data = app.build_docx(app.process_text(sample_export))
    path = tmp_path / "shelf.docx"
    path.write_bytes(data)

    text = load_docx_text(path)

    assert "Общо записи: 4 (Книги: 2, Статии: 1, Други: 1)" in text
    assert "КНИГИ" in text
    assert "\tВж. и: Сп. Минало, 2000, бр. 3;с. 12-14; " in text
