# -*- coding: utf-8 -*-
import pytest

from duallang.pipeline.pages import BilingualMerger, PageSplitter, merge_pages, split_pages


def test_split_on_both_markers():
    assert split_pages("Page one<page>Page two<hpage>Page three") == ["Page one", "Page two", "Page three"]


def test_split_strips_pages_and_drops_empty_pieces():
    assert split_pages("  first <page>   <page>\nsecond\n<hpage>") == ["first", "second"]


def test_split_without_markers_keeps_text_untouched():
    assert split_pages("  padded text ") == ["  padded text "]


@pytest.mark.parametrize("text", ["", None])
def test_split_empty_input(text):
    assert split_pages(text) == []


def test_split_only_markers_gives_no_pages():
    assert split_pages("<page> <hpage>") == []


def test_custom_markers():
    splitter = PageSplitter(markers=("||",))
    assert splitter.split("a || b") == ["a", "b"]


def test_splitter_requires_a_marker():
    with pytest.raises(ValueError):
        PageSplitter(markers=())


def test_merge_single_page():
    assert merge_pages("Hello", "Привет") == "Hello<br>Привет"


def test_merge_with_empty_secondary_returns_primary():
    assert merge_pages("Hello", "") == "Hello"


def test_merge_with_empty_primary_returns_primary():
    assert merge_pages("", "Привет") == ""
    assert merge_pages(None, "Привет") == ""


def test_merge_pairs_pages_by_position():
    merged = merge_pages("One<page>Two<hpage>Three", "Один<page>Два")
    assert merged == "One<br>Один<page>Two<br>Два<page>Three"


def test_merge_longer_secondary_keeps_extra_pages():
    merged = merge_pages("One", "Один<page>Два")
    assert merged == "One<br>Один<page>Два"


def test_merge_never_leads_with_delimiter():
    assert not merge_pages("A<page>B", "C<page>D").startswith("<page>")


@pytest.mark.parametrize(
    "primary, secondary",
    [
        ("A", "B"),
        ("A<page>B<page>C", "X"),
        ("A", "X<hpage>Y"),
        ("A<page>B", "X<hpage>Y<page>Z<page>W"),
        ("  A  <page>  B  ", "X"),
    ],
)
def test_merge_keeps_page_count_of_longer_text(primary, secondary):
    expected = max(len(split_pages(primary)), len(split_pages(secondary)))
    assert len(split_pages(merge_pages(primary, secondary))) == expected


def test_merge_keeps_empty_page_slot_when_both_sides_empty():
    merger = BilingualMerger()
    assert merger.merge_pages(["A", ""], ["B"]) == ["A<br>B", ""]


def test_merger_custom_markers():
    merger = BilingualMerger(delimiter="<hpage>", inline_break="\n")
    assert merger.merge("A<page>B", "X<page>Y") == "A\nX<hpage>B\nY"
