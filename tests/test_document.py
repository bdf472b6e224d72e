from shelflist.app import ShelfListApp
from shelflist.config import ShelfListConfig
from shelflist.document import Run


def test_document_layout_follows_bucket_order(sample_export):
    app = ShelfListApp()
    document = app.build_document(app.process_text(sample_export))
    texts = document.paragraph_texts()

    assert texts[0] == "Общо записи: 4 (Книги: 2, Статии: 1, Други: 1)"
    assert texts[1] == ""
    assert texts.index("КНИГИ") < texts.index("СТАТИИ") < texts.index("ДРУГИ")
    # the undated yearbook sorts ahead of the 1999 book
    assert texts.index("III 77") < texts.index("II 1234       A-12")
    assert document.paragraphs[0] == [Run(texts[0], bold=True)]


def test_entry_block_contents(sample_export):
    app = ShelfListApp()
    texts = app.build_document(app.process_text(sample_export)).paragraph_texts()

    start = texts.index("II 1234       A-12")
    assert texts[start + 1] == "Иванов и др."
    assert texts[start + 2].startswith("  История на България : очерк / Петър Иванов, Мария Петрова")
    assert texts[start + 3] == "Item types: KNG"
    assert texts[start + 4] == "\tБиблиография"
    assert texts[start + 5] == "\tВж. и: Сп. Минало, 2000, бр. 3;с. 12-14; "
    assert texts[start + 6] == ""


def test_styled_article_paragraph(sample_export):
    app = ShelfListApp()
    document = app.build_document(app.process_text(sample_export))

    styled = [runs for runs in document.paragraphs if any(run.italic and run.text == "Археология" for run in runs)]
    assert len(styled) == 1
    assert [run.italic for run in styled[0]] == [False, True, False]


def test_notes_are_italic_and_indented():
    app = ShelfListApp()
    document = app.build_document(
        app.process_text("@misc{1,\n item_type = {MAP},\n title = {Map},\n abstract = {Scale 1:5000}}")
    )
    assert [Run("\tScale 1:5000", italic=True)] in document.paragraphs


def test_english_labels_and_empty_buckets_are_skipped():
    app = ShelfListApp(ShelfListConfig(language="en"))
    texts = app.build_document(app.process_text("@misc{1,\n item_type = {MAP},\n title = {Map}}")).paragraph_texts()

    assert texts[0] == "Total records: 1 (Books: 0, Articles: 0, Other: 1)"
    assert "OTHER" in texts
    assert "BOOKS" not in texts
    assert "ARTICLES" not in texts


def test_empty_input_still_produces_summary():
    app = ShelfListApp()
    texts = app.build_document(app.process_text("")).paragraph_texts()
    assert texts == ["Общо записи: 0 (Книги: 0, Статии: 0, Други: 0)", ""]
