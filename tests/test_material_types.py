import pytest

from shelflist.material_types import RULES, classify, partition, sort_entries
from shelflist.models import CatalogueEntry


def _entry(position, item_types, year=""):
    return CatalogueEntry(raw_text=f"@misc{{{position}}}", position=position, item_types=tuple(item_types), year=year)


@pytest.mark.parametrize(
    "item_types, bucket, layout, rule",
    [
        (["GOI"], "books", "yearbook", "yearbook"),
        (["KNG"], "books", "book", "book"),
        (["CDD", "JOU"], "books", "book", "book"),
        (["KNG", "GOI"], "books", "book", "book"),
        (["GOI", "JOU"], "articles", "article", "yearbook-contribution"),
        (["JOU", "GOI"], "articles", "article", "yearbook-contribution"),
        (["GOI", "GOI"], "articles", "article", "yearbook-contribution"),
        (["NSP"], "articles", "article", "article"),
        (["MAP"], "other", "generic", "other"),
        ([], "other", "generic", "other"),
    ],
)
def test_rule_table_first_match_wins(item_types, bucket, layout, rule):
    classification = classify(_entry(0, item_types))
    assert (classification.bucket, classification.layout, classification.rule) == (bucket, layout, rule)


@pytest.mark.parametrize("item_types", [["GOI"], ["GOI", "GOI"], ["GOI", "KNG"], ["GOI", "MAP"]])
def test_goi_primary_is_always_a_yearbook_or_contribution(item_types):
    assert classify(_entry(0, item_types)).rule in {"yearbook", "yearbook-contribution"}


def test_rule_table_order():
    assert [rule.key for rule in RULES] == ["yearbook", "book", "yearbook-contribution", "article"]


def test_book_sorts_before_article_regardless_of_year():
    article = _entry(0, ["JOU"], "1950")
    book = _entry(1, ["KNG"], "1999")
    assert sort_entries([article, book]) == [book, article]


def test_sort_by_year_with_unparseable_years_first():
    newer = _entry(0, ["KNG"], "2005")
    undated = _entry(1, ["KNG"], "s.a.")
    older = _entry(2, ["KNG"], "1987 [c1986]")
    assert [e.position for e in sort_entries([newer, undated, older])] == [1, 2, 0]


def test_sort_is_stable_for_equal_keys():
    first = _entry(0, ["KNG"], "2000")
    second = _entry(1, ["CDD"], "2000")
    third = _entry(2, ["KNG"], "2000")
    assert sort_entries([first, second, third]) == [first, second, third]


def test_partition_is_exclusive_and_total():
    entries = [_entry(0, ["GOI"]), _entry(1, ["GOI", "JOU"]), _entry(2, ["KNG"]), _entry(3, ["XYZ"])]
    grouped = partition(entries)
    assert [e.position for e, _ in grouped["books"]] == [0, 2]
    assert [e.position for e, _ in grouped["articles"]] == [1]
    assert [e.position for e, _ in grouped["other"]] == [3]
    assert sum(len(items) for items in grouped.values()) == len(entries)
