from __future__ import annotations

"""
Tree Renderer.

Converts a composite tree into lines of text. The plain style mirrors
Component.show_details (fixed indent per depth level); the ascii style
draws standard connectors (├──, └──) for directory-listing output.
"""

import logging
import sys
from typing import List, Optional, TextIO

from folder_tree.domain.components import Component, Container
from folder_tree.domain.constants import (
    BRANCH,
    DEFAULT_STYLE,
    INDENT_UNIT,
    LAST_BRANCH,
    PIPE_PREFIX,
    SPACE_PREFIX,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(root: Component, indent: str = INDENT_UNIT) -> List[str]:
    """
    Render the tree in pre-order with a fixed indent per depth level.

    Args:
        root: Node rendered at depth 0.
        indent: Prefix repeated once per depth level.

    Returns:
        List[str]: One line per node.
    """
    return list(root.iter_lines(0, indent))


def render_ascii(root: Component) -> List[str]:
    """
    Render the tree with box-drawing connectors.

    The root is printed bare; every descendant gets a connector and the
    continuation prefix of its ancestors.

    Args:
        root: Node rendered at the top.

    Returns:
        List[str]: One line per node, in the same order as render_tree.
    """
    lines: List[str] = [root.name]
    if isinstance(root, Container):
        _render_children(root, lines, prefix="")
    return lines


def print_tree(
        root: Component,
        stream: Optional[TextIO] = None,
        indent: str = INDENT_UNIT,
        style: str = DEFAULT_STYLE,
) -> int:
    """
    Print the rendered tree and report how many lines were written.

    Args:
        root: Node rendered at the top.
        stream: Destination stream. Defaults to the current sys.stdout.
        indent: Per-level prefix for the plain style.
        style: Either 'plain' or 'ascii'.

    Returns:
        int: Number of lines written.
    """
    if style == "ascii":
        lines = render_ascii(root)
    elif style == "plain":
        lines = render_tree(root, indent)
    else:
        raise ValueError(f"Unknown render style '{style}'.")

    out = stream if stream is not None else sys.stdout
    for line in lines:
        print(line, file=out)

    logger.debug(f"Rendered '{root.name}' as {style}: {len(lines)} lines.")
    return len(lines)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _render_children(folder: Container, lines: List[str], prefix: str) -> None:
    """Append connector lines for each child of folder, recursing into branches."""
    children = folder.children
    total = len(children)

    for i, child in enumerate(children):
        is_last = (i == total - 1)
        connector = LAST_BRANCH if is_last else BRANCH
        lines.append(f"{prefix}{connector}{child.name}")

        if isinstance(child, Container):
            new_prefix = prefix + (SPACE_PREFIX if is_last else PIPE_PREFIX)
            _render_children(child, lines, new_prefix)
