from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared tree fixtures reused by unit and integration tests.
"""

import os
import sys
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from folder_tree.domain.components import Container, Leaf  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_nodes() -> Dict[str, Any]:
    """
    Return the reference folder example, with handles to every node.

    Structure:
    main_folder
        document.txt
        report.xlsx
        images
    """
    root = Container("main_folder")
    document = Leaf("document.txt")
    report = Leaf("report.xlsx")
    images = Container("images")

    root.add(document)
    root.add(report)
    root.add(images)

    return {
        "root": root,
        "document": document,
        "report": report,
        "images": images,
    }


@pytest.fixture
def deep_tree() -> Container:
    """
    Return a three-level tree used for ordering and indentation checks.

    Structure:
    project
        src
            app.py
            lib
                util.py
        README.md
    """
    root = Container("project")
    src = Container("src")
    lib = Container("lib")

    lib.add(Leaf("util.py"))
    src.add(Leaf("app.py"))
    src.add(lib)
    root.add(src)
    root.add(Leaf("README.md"))
    return root
