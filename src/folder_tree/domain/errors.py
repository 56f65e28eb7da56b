from __future__ import annotations

"""
Structural Error Taxonomy.

Defines the typed failures raised when a composite tree is assembled or
mutated in a way that would break its shape.
"""

# -----------------------------------------------------------------------------
# BASE ERROR
# -----------------------------------------------------------------------------

class CompositeError(Exception):
    """Base class for every structural error raised by folder_tree."""


# -----------------------------------------------------------------------------
# SPECIALIZED ERRORS
# -----------------------------------------------------------------------------

class CycleError(CompositeError):
    """
    Raised when adding a child would make a container its own ancestor.

    Attributes:
        parent: Name of the container receiving the child.
        child: Name of the rejected component.
    """

    def __init__(self, parent: str, child: str) -> None:
        self.parent = parent
        self.child = child
        super().__init__(
            f"Cannot add '{child}' to '{parent}': it would create a cycle."
        )


class ChildNotFoundError(CompositeError, LookupError):
    """Raised when removing a component that is not a direct child."""

    def __init__(self, parent: str, child: str) -> None:
        self.parent = parent
        self.child = child
        super().__init__(f"'{child}' is not a child of '{parent}'.")


class TreeSpecError(CompositeError, ValueError):
    """Raised when a declarative tree description has an invalid shape."""
