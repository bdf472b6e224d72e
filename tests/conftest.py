import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT / "src") not in sys.path:
    sys.path.insert(0, str(ROOT / "src"))

import pytest

from shelflist.app import ShelfListApp


BOOK_RECORD = """@book{1,
  main_sig = {II 1234},
  dep_sig = {A-12},
  sort_word = {Иванов},
  responsibility = {Иванов, Петър and Петрова, Мария},
  title = {История на България},
  subtitle = {очерк},
  edition = {Второ издание},
  address = {София},
  publisher = {Просвета},
  year = {1999},
  page_count = {320 с.},
  dimensions = {24 см},
  series = {Библиотека История},
  isbn = {954-01-0001-1},
  item_type = {KNG},
  abstract = {Съдържа и: Библиография},
  also_source = {Сп. Минало},
  also_description = {2000, бр. 3; с. 12-14},
}
"""

ARTICLE_RECORD = """@article{2,
  sort_word = {Георгиев},
  responsibility = {Георгиев, Иван},
  title = {Нови находки},
  source = {Археология},
  journal_city = {София},
  issue = {4},
  year = {1950},
  art_pages = {с. 5-9},
  item_type = {JOU},
}
"""

YEARBOOK_RECORD = """@misc{3,
  main_sig = {III 77},
  title = {Годишник на Софийския университет},
  responsibility = {Софийски университет},
  edition = {София : Унив. изд., 1985},
  about_person = {Иван Вазов},
  about_person = {Иван Вазов},
  about_person = {Христо Ботев},
  item_type = {GOI},
}
"""

OTHER_RECORD = """@misc{4,
  responsibility = {Doe, John},
  title = {Map of the city},
  year = {2001},
  item_type = {MAP},
}
"""


@pytest.fixture()
def sample_export() -> str:
    """A small export with one record of each layout."""

    return BOOK_RECORD + ARTICLE_RECORD + YEARBOOK_RECORD + OTHER_RECORD


@pytest.fixture()
def sample_export_path(tmp_path: Path, sample_export: str) -> Path:
    path = tmp_path / "catalogue.bibtex"
    path.write_text(sample_export, encoding="utf-8")
    return path


@pytest.fixture()
def entry_factory():
    """Build a single CatalogueEntry from raw record text."""

    def _build(text: str):
        return ShelfListApp.parse_text(text)[0]

    return _build
