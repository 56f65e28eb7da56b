from __future__ import annotations

"""
Composite Tree Components.

Defines the shared Component contract and its two structural variants:
Leaf (a file) and Container (a folder). Both are addressed through the
same interface, so client code renders or walks a whole hierarchy without
distinguishing terminals from branches.
"""

import logging
import sys
from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Set, TextIO, Tuple

from folder_tree.domain.constants import INDENT_UNIT
from folder_tree.domain.errors import ChildNotFoundError, CycleError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# SHARED CONTRACT
# -----------------------------------------------------------------------------

class Component(ABC):
    """
    Common capability of every node in the tree.

    Attributes:
        name: Identity of the node. Fixed at construction.
    """

    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        if not isinstance(name, str):
            raise TypeError(
                f"Component name must be str, received {type(name).__name__}."
            )
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def get_name(self) -> str:
        """Return the stored name."""
        return self._name

    @abstractmethod
    def is_leaf(self) -> bool:
        """Return True for terminal nodes."""

    @abstractmethod
    def walk(self, depth: int = 0) -> Iterator[Tuple[int, Component]]:
        """
        Yield (depth, node) pairs in pre-order, starting with this node.

        Args:
            depth: Depth assigned to this node.
        """

    def iter_lines(self, depth: int = 0, indent: str = INDENT_UNIT) -> Iterator[str]:
        """
        Yield the text lines of this subtree without line terminators.

        Args:
            depth: Depth assigned to this node (root = 0).
            indent: Prefix repeated once per depth level.

        Returns:
            Iterator[str]: One line per node, parents before children.
        """
        for level, node in self.walk(depth):
            yield f"{indent * level}{node.name}"

    def show_details(self, depth: int = 0, stream: Optional[TextIO] = None) -> None:
        """
        Print this node and every descendant, one line each.

        Args:
            depth: Depth assigned to this node (root = 0).
            stream: Destination stream. Defaults to the current sys.stdout.
        """
        out = stream if stream is not None else sys.stdout
        for line in self.iter_lines(depth):
            print(line, file=out)

    def count(self) -> int:
        """Return the number of nodes in this subtree, self included."""
        return sum(1 for _ in self.walk())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"


# -----------------------------------------------------------------------------
# TERMINAL NODE
# -----------------------------------------------------------------------------

class Leaf(Component):
    """A childless node, such as a file."""

    __slots__ = ()

    def is_leaf(self) -> bool:
        return True

    def walk(self, depth: int = 0) -> Iterator[Tuple[int, Component]]:
        _check_depth(depth)
        yield depth, self


# -----------------------------------------------------------------------------
# BRANCH NODE
# -----------------------------------------------------------------------------

class Container(Component):
    """
    A node holding an ordered sequence of child components, such as a folder.

    Children keep insertion order. Duplicates and components shared with
    other containers are allowed; a container can never become its own
    ancestor.
    """

    __slots__ = ("_children",)

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._children: List[Component] = []

    @property
    def children(self) -> Tuple[Component, ...]:
        """Snapshot of the direct children in insertion order."""
        return tuple(self._children)

    def is_leaf(self) -> bool:
        return False

    def add(self, child: Component) -> None:
        """
        Append a child at the end of the children sequence.

        Args:
            child: Leaf or Container to attach.

        Raises:
            TypeError: If child is not a Component.
            CycleError: If child is this container or one of its ancestors.
        """
        if not isinstance(child, Component):
            raise TypeError(
                f"Expected a Component, received {type(child).__name__}."
            )

        if _reaches(child, self):
            logger.warning(f"Rejected '{child.name}' under '{self.name}': cycle detected.")
            raise CycleError(self.name, child.name)

        self._children.append(child)
        logger.debug(f"Added '{child.name}' to '{self.name}' ({len(self._children)} children).")

    def remove(self, child: Component) -> None:
        """
        Detach the first occurrence of child, matched by identity.

        Raises:
            ChildNotFoundError: If child is not a direct child.
        """
        for i, existing in enumerate(self._children):
            if existing is child:
                del self._children[i]
                logger.debug(f"Removed '{child.name}' from '{self.name}'.")
                return
        raise ChildNotFoundError(self.name, getattr(child, "name", repr(child)))

    def find(self, name: str) -> Optional[Component]:
        """Return the first node named `name` in pre-order, self included."""
        for _, node in self.walk():
            if node.name == name:
                return node
        return None

    def walk(self, depth: int = 0) -> Iterator[Tuple[int, Component]]:
        _check_depth(depth)
        yield depth, self
        for child in list(self._children):
            yield from child.walk(depth + 1)

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[Component]:
        return iter(tuple(self._children))

    def __contains__(self, item: object) -> bool:
        return any(existing is item for existing in self._children)


# File-system vocabulary
File = Leaf
Folder = Container

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _check_depth(depth: int) -> None:
    """Reject depths that are not non-negative integers."""
    if isinstance(depth, bool) or not isinstance(depth, int) or depth < 0:
        raise ValueError(f"depth must be an integer >= 0, received {depth!r}.")


def _reaches(start: Component, target: Component) -> bool:
    """Return True if target is start or one of start's descendants."""
    pending: List[Component] = [start]
    seen: Set[int] = set()
    while pending:
        node = pending.pop()
        if node is target:
            return True
        if id(node) in seen:
            continue
        seen.add(id(node))
        if isinstance(node, Container):
            pending.extend(node._children)
    return False
