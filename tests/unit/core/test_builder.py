from __future__ import annotations

"""
Unit tests for the Declarative Tree Builder.
"""

import pytest

from folder_tree.core.builder import build_tree, sample_tree, to_dict
from folder_tree.core.rendering import render_tree
from folder_tree.domain.components import Container, Leaf
from folder_tree.domain.errors import TreeSpecError


def test_build_tree_from_nested_data():
    root = build_tree({
        "site": [
            "index.html",
            {"assets": ["logo.svg", {"css": []}]},
        ]
    })

    assert isinstance(root, Container)
    assert render_tree(root) == [
        "site",
        "    index.html",
        "    assets",
        "        logo.svg",
        "        css",
    ]


def test_build_tree_plain_string_is_leaf():
    node = build_tree("alone.txt")

    assert isinstance(node, Leaf)
    assert node.name == "alone.txt"


def test_to_dict_is_inverse_of_build_tree():
    spec = {"root": ["a.txt", {"sub": ["b.txt"]}, {"empty": []}]}

    assert to_dict(build_tree(spec)) == spec


@pytest.mark.parametrize("bad_spec", [
    42,
    None,
    {"a": [], "b": []},
    {"folder": "not-a-list"},
    {"folder": [3.14]},
    {1: []},
])
def test_build_tree_rejects_invalid_shapes(bad_spec):
    with pytest.raises(TreeSpecError):
        build_tree(bad_spec)


def test_tree_spec_error_reports_location():
    with pytest.raises(TreeSpecError) as exc_info:
        build_tree({"root": ["ok.txt", {"sub": [None]}]})

    assert "<root>/root[1]/sub[0]" in str(exc_info.value)


def test_sample_tree_default_shape():
    assert render_tree(sample_tree()) == [
        "main_folder",
        "    document.txt",
        "    report.xlsx",
        "    images",
    ]


def test_sample_tree_with_photo():
    lines = render_tree(sample_tree(with_photo=True))

    assert lines[-2:] == ["    images", "        photo.png"]
    assert lines.index("    document.txt") < lines.index("    images")
