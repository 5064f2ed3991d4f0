# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the implementor descriptor model."""

from __future__ import annotations

import pytest

from doc_implementors.catalog import CatalogIntegrityError, ImplementorDescriptor


def test_from_mapping_keeps_fields_verbatim() -> None:
    descriptor = ImplementorDescriptor.from_mapping(
        {
            "text": "impl&lt;'a&gt; Iterator for <a href=\"x\">BitmapIter</a>&lt;'a&gt;",
            "synthetic": True,
            "types": ["arrow2::bitmap::utils::iterator::BitmapIter"],
        },
        context="test",
    )

    assert descriptor.display_text == "impl&lt;'a&gt; Iterator for <a href=\"x\">BitmapIter</a>&lt;'a&gt;"
    assert descriptor.is_synthetic is True
    assert descriptor.type_identifier_path == ("arrow2::bitmap::utils::iterator::BitmapIter",)
    assert descriptor.to_dict() == {
        "text": "impl&lt;'a&gt; Iterator for <a href=\"x\">BitmapIter</a>&lt;'a&gt;",
        "synthetic": True,
        "types": ["arrow2::bitmap::utils::iterator::BitmapIter"],
    }


def test_derived_names_for_joined_and_segmented_paths() -> None:
    joined = ImplementorDescriptor("impl Iterator for Reader", False, ("arrow2::io::avro::read::Reader",))
    segmented = ImplementorDescriptor("impl Iterator for Foo", False, ("mylib", "Foo"))

    assert joined.type_name == "Reader"
    assert joined.crate_name == "arrow2"
    assert segmented.qualified_name == "mylib::Foo"
    assert segmented.type_name == "Foo"
    assert segmented.crate_name == "mylib"


def test_plain_text_strips_markup_and_decodes_entities() -> None:
    descriptor = ImplementorDescriptor(
        display_text='impl&lt;T:&nbsp;<a class="trait" href="t.html">BitChunk</a>&gt; Iterator for Chunks&lt;T&gt;',
        is_synthetic=False,
        type_identifier_path=("mylib::Chunks",),
    )

    assert descriptor.plain_text == "impl<T:\xa0BitChunk> Iterator for Chunks<T>"


def test_empty_type_path_is_rejected() -> None:
    with pytest.raises(CatalogIntegrityError):
        ImplementorDescriptor("impl Iterator for Foo", False, ())

    with pytest.raises(CatalogIntegrityError, match="non-empty"):
        ImplementorDescriptor.from_mapping({"text": "t", "synthetic": False, "types": []}, context="doc")


def test_empty_type_identifier_is_rejected() -> None:
    with pytest.raises(CatalogIntegrityError, match="empty type identifier"):
        ImplementorDescriptor("impl Iterator for Foo", False, ("mylib", ""))

    with pytest.raises(CatalogIntegrityError, match=r"'types\[0\]' to be a non-empty string"):
        ImplementorDescriptor.from_mapping({"text": "t", "synthetic": False, "types": [""]}, context="doc")


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ({"synthetic": False, "types": ["a"]}, "'text' to be a string"),
        ({"text": "t", "synthetic": "no", "types": ["a"]}, "'synthetic' to be a boolean"),
        ({"text": "t", "synthetic": False, "types": "a::B"}, "'types' to be an array of strings"),
        ({"text": "t", "synthetic": False, "types": ["a", 3]}, r"'types\[1\]' to be a string"),
    ],
)
def test_from_mapping_reports_mistyped_fields(payload: dict[str, object], message: str) -> None:
    with pytest.raises(CatalogIntegrityError, match=message):
        ImplementorDescriptor.from_mapping(payload, context="doc")  # type: ignore[arg-type]
