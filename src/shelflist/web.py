"""FastAPI + Tailwind interface for the shelf-list builder.

Run with:
    uvicorn shelflist.web:app --reload
"""
from __future__ import annotations

import tempfile
from html import escape
from pathlib import Path
from secrets import token_hex
from typing import Dict

from fastapi import BackgroundTasks, FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import FileResponse, HTMLResponse

from .app import ShelfListApp
from .config import LABELS, ShelfListConfig
from .docx_writer import DOCX_MEDIA_TYPE
from .document import ShelfListDocument
from .report import render_summary

app = FastAPI(title="Shelf List", description="Convert catalogue exports into shelf lists")

generated_exports: Dict[str, Path] = {}


def _build_app(language: str) -> ShelfListApp:
    return ShelfListApp(ShelfListConfig(language=language))


def _layout(content: str) -> str:
    """Wrap provided content in a Tailwind-powered HTML page."""

    return f"""
    <!doctype html>
    <html lang=\"en\" class=\"h-full bg-gray-50\">
    <head>
        <meta charset=\"utf-8\" />
        <title>Shelf List</title>
        <link href=\"https://cdn.jsdelivr.net/npm/tailwindcss@3.4.4/dist/tailwind.min.css\" rel=\"stylesheet\" />
    </head>
    <body class=\"min-h-full py-10\">
        <div class=\"max-w-5xl mx-auto px-4\">
            <div class=\"bg-white shadow rounded-lg p-6\">
                <h1 class=\"text-3xl font-semibold text-gray-900\">Shelf List</h1>
                <p class=\"text-gray-600 mt-2\">Upload a catalogue export or paste its text to get a sorted, ISBD-formatted shelf list as DOCX.</p>
                {content}
            </div>
        </div>
    </body>
    </html>
    """


def _language_select(language: str) -> str:
    options = []
    for key in sorted(LABELS):
        selected = "selected" if key == language else ""
        options.append(f"<option value=\"{key}\" {selected}>{key}</option>")
    return (
        "<label class=\"text-sm text-gray-700 mr-2\">Labels</label>"
        f"<select name=\"language\" class=\"border border-gray-300 rounded-md text-sm\">{''.join(options)}</select>"
    )


def _render_preview(document: ShelfListDocument) -> str:
    paragraphs = []
    for runs in document.paragraphs:
        html_runs = []
        for run in runs:
            text = escape(run.text).replace("\t", "&emsp;")
            if run.bold:
                text = f"<strong>{text}</strong>"
            if run.italic:
                text = f"<em>{text}</em>"
            html_runs.append(text)
        paragraphs.append(f"<p class=\"min-h-[1em]\">{''.join(html_runs)}</p>")
    return "".join(paragraphs)


def _form_page(
    summary: str | None = None,
    preview: str | None = None,
    download_token: str | None = None,
    language: str = "bg",
) -> str:
    """Render the landing page with optional summary, preview and download link."""

    file_form = f"""
    <form action=\"/convert-file\" method=\"post\" enctype=\"multipart/form-data\" class=\"bg-gray-50 border border-gray-200 rounded-lg p-4 mt-6\">
        <h2 class=\"text-xl font-semibold text-gray-800\">Upload export</h2>
        <label class=\"block text-sm font-medium text-gray-700 mb-2\" for=\"file\">Catalogue export (.bib, .bibtex, .txt)</label>
        <input type=\"file\" name=\"file\" required class=\"block w-full text-sm text-gray-800\" />
        <div class=\"mt-3\">{_language_select(language)}</div>
        <button type=\"submit\" class=\"mt-4 inline-flex items-center px-4 py-2 bg-indigo-600 text-white rounded-md shadow hover:bg-indigo-700\">Convert file</button>
    </form>
    """

    text_form = f"""
    <form action=\"/convert-text\" method=\"post\" class=\"bg-gray-50 border border-gray-200 rounded-lg p-4 mt-6\">
        <h2 class=\"text-xl font-semibold text-gray-800\">Paste export text</h2>
        <label class=\"block text-sm font-medium text-gray-700 mb-2\" for=\"text\">Catalogue records</label>
        <textarea name=\"text\" required placeholder=\"@book{{...\" class=\"w-full h-44 border border-gray-300 rounded-md p-3 text-sm\"></textarea>
        <div class=\"mt-3\">{_language_select(language)}</div>
        <button type=\"submit\" class=\"mt-4 inline-flex items-center px-4 py-2 bg-indigo-600 text-white rounded-md shadow hover:bg-indigo-700\">Convert text</button>
    </form>
    """

    summary_block = ""
    if summary:
        summary_block = f"""
        <div class=\"mt-8\">
            <h2 class=\"text-xl font-semibold text-gray-800\">Summary</h2>
            <pre class=\"mt-3 bg-gray-900 text-green-100 p-4 rounded-lg whitespace-pre-wrap text-sm\">{escape(summary)}</pre>
        </div>
        """

    download_block = ""
    if download_token:
        download_block = f"""
        <div class=\"mt-4\">
            <a class=\"inline-flex items-center px-4 py-2 bg-emerald-600 text-white rounded-md shadow hover:bg-emerald-700\" href=\"/download/{download_token}\">Download shelf list DOCX</a>
        </div>
        """

    preview_block = ""
    if preview:
        preview_block = f"""
        <div class=\"mt-8 border-t border-gray-200 pt-4 text-sm text-gray-900\">{preview}</div>
        """

    return _layout(file_form + text_form + summary_block + download_block + preview_block)


def _convert(text: str, language: str) -> HTMLResponse:
    builder = _build_app(language)
    shelf_list = builder.process_text(text)
    document = builder.build_document(shelf_list)

    with tempfile.NamedTemporaryFile(delete=False, suffix=".docx") as export_tmp:
        export_tmp.write(builder.build_docx(shelf_list))
        token = token_hex(8)
        generated_exports[token] = Path(export_tmp.name)

    return HTMLResponse(
        _form_page(
            render_summary(shelf_list),
            preview=_render_preview(document),
            download_token=token,
            language=language,
        )
    )


@app.get("/", response_class=HTMLResponse)
async def home() -> HTMLResponse:
    """Serve the upload/text submission form."""

    return HTMLResponse(_form_page())


@app.post("/convert-text", response_class=HTMLResponse)
async def convert_text(text: str = Form(...), language: str = Form("bg")) -> HTMLResponse:
    """Convert pasted catalogue records."""

    return _convert(text, language)


@app.post("/convert-file", response_class=HTMLResponse)
async def convert_file(file: UploadFile = File(...), language: str = Form("bg")) -> HTMLResponse:
    """Convert an uploaded catalogue export."""

    payload = await file.read()
    if not payload.strip():
        raise HTTPException(status_code=400, detail="Uploaded export is empty")
    return _convert(payload.decode("utf-8-sig", errors="replace"), language)


@app.get("/download/{token}")
async def download_shelf_list(token: str, tasks: BackgroundTasks) -> FileResponse:
    """Serve a generated shelf-list DOCX."""

    path = generated_exports.pop(token, None)
    if not path or not path.exists():
        raise HTTPException(status_code=404, detail="Export not found or expired")

    tasks.add_task(path.unlink, missing_ok=True)
    return FileResponse(path, media_type=DOCX_MEDIA_TYPE, filename="shelf-list.docx")


def main() -> None:
    """Run the FastAPI app using uvicorn."""

    import uvicorn

    uvicorn.run("shelflist.web:app", host="0.0.0.0", port=8000, reload=False)


__all__ = ["app", "main"]
