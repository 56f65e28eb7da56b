from __future__ import annotations

"""
Declarative Tree Builder.

Builds composite trees from nested plain data and converts them back.
A string describes a file; a single-key dictionary maps a folder name to
the list of its children.
"""

import logging
from typing import Any, Dict, List, Union

from folder_tree.domain.components import Component, Container, Leaf
from folder_tree.domain.errors import TreeSpecError

logger = logging.getLogger(__name__)

TreeSpec = Union[str, Dict[str, List["TreeSpec"]]]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(spec: Any) -> Component:
    """
    Build a component tree from nested plain data.

    Args:
        spec: A file name, or {folder_name: [child_spec, ...]}.

    Returns:
        Component: The root node.

    Raises:
        TreeSpecError: If any level has an unsupported shape.
    """
    return _build(spec, path="<root>")


def to_dict(component: Component) -> TreeSpec:
    """Convert a component tree back into the plain-data form used by build_tree."""
    if isinstance(component, Container):
        return {component.name: [to_dict(child) for child in component.children]}
    return component.name


def sample_tree(with_photo: bool = False) -> Container:
    """
    Build the reference folder example.

    main_folder holds document.txt, report.xlsx and the images folder.
    With with_photo, photo.png is added to images after the root is assembled.
    """
    root = Container("main_folder")
    images = Container("images")

    root.add(Leaf("document.txt"))
    root.add(Leaf("report.xlsx"))
    root.add(images)

    if with_photo:
        images.add(Leaf("photo.png"))

    return root


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _build(spec: Any, path: str) -> Component:
    if isinstance(spec, str):
        return Leaf(spec)

    if isinstance(spec, dict):
        if len(spec) != 1:
            raise TreeSpecError(
                f"Folder spec at {path} must have exactly one key, found {len(spec)}."
            )
        name, children = next(iter(spec.items()))
        if not isinstance(name, str):
            raise TreeSpecError(f"Folder name at {path} must be str, received {type(name).__name__}.")
        if not isinstance(children, (list, tuple)):
            raise TreeSpecError(
                f"Children of '{name}' at {path} must be a list, received {type(children).__name__}."
            )

        folder = Container(name)
        for i, child_spec in enumerate(children):
            folder.add(_build(child_spec, path=f"{path}/{name}[{i}]"))
        logger.debug(f"Built folder '{name}' with {len(folder)} children.")
        return folder

    raise TreeSpecError(f"Unsupported node spec at {path}: {type(spec).__name__}.")
