"""Tests for cmdhelp.metadata."""

from datetime import datetime

import pytest

from cmdhelp.metadata import (
    SCHEMA_VERSION,
    command_help_base_metadata,
    merge_metadata,
    module_page_metadata,
    parse_metadata_pairs,
)


def test_base_metadata(full_help):
    metadata = command_help_base_metadata(full_help, now=datetime(2026, 10, 17))

    assert metadata == {
        "title": "Set-Widget",
        "Module Name": "Widgets",
        "Locale": "en-US",
        "PlatyPS schema version": SCHEMA_VERSION,
        "HelpUri": "https://example.com/Set-Widget",
        "ms.date": "10/17/2026",
        "external help file": "Widgets-help.xml",
    }


def test_user_keys_win():
    merged = merge_metadata({"title": "Custom", "author": "docs"}, {"title": "Base", "Locale": "en-US"})
    assert merged == {"title": "Custom", "author": "docs", "Locale": "en-US"}


def test_merge_without_user_metadata():
    assert merge_metadata(None, {"a": 1}) == {"a": 1}


def test_module_page_placeholders():
    metadata = module_page_metadata("Widgets", help_version="1.0.0.0")

    assert metadata["Module Name"] == "Widgets"
    assert metadata["Help Version"] == "1.0.0.0"
    assert metadata["Download Help Link"] == "{{ Update Download Link }}"


def test_parse_metadata_pairs():
    assert parse_metadata_pairs(["author = docs", "url=https://x/?a=b"]) == {
        "author": "docs",
        "url": "https://x/?a=b",
    }


@pytest.mark.parametrize("pair", ["novalue", "=value"])
def test_parse_metadata_pairs_rejects_bad_items(pair):
    with pytest.raises(ValueError):
        parse_metadata_pairs([pair])
