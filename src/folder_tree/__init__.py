from __future__ import annotations

"""
folder_tree: a part-whole file-system tree where files and folders share
one interface.
"""

from folder_tree.core.builder import build_tree, sample_tree, to_dict
from folder_tree.core.rendering import print_tree, render_ascii, render_tree
from folder_tree.domain.components import Component, Container, File, Folder, Leaf
from folder_tree.domain.errors import (
    ChildNotFoundError,
    CompositeError,
    CycleError,
    TreeSpecError,
)

__version__ = "1.0.0"

__all__ = [
    "Component",
    "Leaf",
    "Container",
    "File",
    "Folder",
    "CompositeError",
    "CycleError",
    "ChildNotFoundError",
    "TreeSpecError",
    "build_tree",
    "sample_tree",
    "to_dict",
    "render_tree",
    "render_ascii",
    "print_tree",
]
