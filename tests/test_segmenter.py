"""Tests for cmdhelp.maml.segmenter."""

import pytest

from cmdhelp.maml.segmenter import (
    NARRATIVE,
    STRUCTURAL,
    classify_block,
    segment,
    segment_text,
    split_paragraphs,
)


def test_narrative_blocks_are_folded_and_trimmed():
    assert segment_text("Para one.\n\nPara two line1\nline2.") == [
        "Para one.",
        "Para two line1 line2.",
    ]


def test_single_narrative_block_is_stable():
    once = segment_text("A plain sentence that\nwraps once.")
    assert once == ["A plain sentence that wraps once."]
    assert segment_text(once[0]) == once


def test_fenced_block_is_kept_verbatim():
    block = "```\nGet-Widget\n    -Id 1\n```"
    segments = segment(f"Intro.\n\n{block}")

    assert [s.kind for s in segments] == [NARRATIVE, STRUCTURAL]
    assert segments[1].text == block
    assert segments[1].pattern == "fenced_code"


@pytest.mark.parametrize("block, pattern", [
    ("    indented\n    code", "indented_code"),
    ("~~~\ncode\n~~~", "fenced_code"),
    ("> quoted\n> text", "block_quote"),
    ("| a | b |\n|---|---|", "table"),
    ("- one\n- two", "unordered_list"),
    ("* one\n* two", "unordered_list"),
    ("1. first\n2. second", "ordered_list"),
    ("10. tenth", "ordered_list"),
])
def test_structural_patterns(block, pattern):
    assert classify_block(block) == pattern
    assert segment_text(block) == [block]


@pytest.mark.parametrize("block", [
    "-not a list",
    "   three spaces",
    "plain\n    indented second line",
    "Version 1.2 released",
])
def test_non_structural_first_lines(block):
    assert classify_block(block) is None


def test_only_first_line_is_classified():
    assert segment_text("Text first\n- then a list item") == ["Text first - then a list item"]


def test_empty_blocks_are_dropped():
    assert segment_text("\n\nfoo\n\n\n\n   \n\nbar\n\n") == ["foo", "bar"]


def test_crlf_input():
    assert segment_text("a\r\nb\r\n\r\nc") == ["a b", "c"]


@pytest.mark.parametrize("text", [None, "", "\n\n"])
def test_empty_input(text):
    assert segment(text) == ()


def test_split_paragraphs_trims_without_structure_detection():
    assert split_paragraphs("First.\n\n  - Second  \n") == ["First.", "- Second"]
    assert split_paragraphs(None) == []
