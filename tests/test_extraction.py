from shelflist.fields import (
    extract_all,
    extract_first,
    extract_first_of,
    extract_item_types,
    extract_joined_unique,
    split_entries,
    unique_item_types,
)


def test_split_entries_on_record_start_lines():
    text = "preamble noise\n@book{1,\n title = {A}}\n\n@article{2,\n title = {B}}\n"
    blocks = split_entries(text)
    assert len(blocks) == 2
    assert blocks[0].startswith("@book")
    assert blocks[1].startswith("@article")


def test_split_entries_handles_empty_input():
    assert split_entries("") == []
    assert split_entries("   \n") == []


def test_extract_all_is_case_insensitive_and_ordered():
    entry = "@book{1,\n ITEM_TYPE = {kng},\n item_type = {Goi},\n Abstract = {First},\n abstract = {Second}}"
    assert extract_all(entry, "item_type") == ["kng", "Goi"]
    assert extract_all(entry, "abstract") == ["First", "Second"]


def test_extract_first_matches_first_of_all():
    entry = "@book{1,\n year = { 1999 },\n year = {2001}}"
    assert extract_first(entry, "year") == extract_all(entry, "year")[0] == "1999"
    assert extract_first(entry, "publisher") == ""


def test_field_name_does_not_match_inside_longer_names():
    entry = "@book{1,\n subtitle = {Sub},\n title = {Main},\n also_source = {Other},\n source = {Journal}}"
    assert extract_first(entry, "title") == "Main"
    assert extract_all(entry, "source") == ["Journal"]


def test_value_stops_at_first_closing_brace():
    entry = "@book{1,\n title = {Outer {inner} tail}}"
    assert extract_first(entry, "title") == "Outer {inner"


def test_extract_first_of_uses_aliases():
    entry = "@book{1,\n substitle = {Typo field},\n place = {Sofia}}"
    assert extract_first_of(entry, "subtitle", "substitle") == "Typo field"
    assert extract_first_of(entry, "address", "place") == "Sofia"
    assert extract_first_of(entry, "page_count", "extent") == ""


def test_extract_joined_unique_deduplicates_in_order():
    entry = "@book{1,\n edition = {2nd},\n edition = {rev.},\n edition = {2nd}}"
    assert extract_joined_unique(entry, "edition") == "2nd; rev."
    assert extract_joined_unique(entry, "edition", sep=" | ") == "2nd | rev."


def test_item_type_views():
    entry = "@book{1,\n item_type = {jou},\n item_type = {GOI},\n item_type = {Jou}}"
    assert extract_item_types(entry) == ["JOU", "GOI", "JOU"]
    assert unique_item_types(entry) == ["JOU", "GOI"]


def test_unclosed_value_yields_no_match():
    entry = "@book{1,\n title = {Never closed\n"
    assert extract_all(entry, "title") == []
