from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict

from folder_tree.domain.constants import RENDER_STYLES

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the folder-tree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="folder-tree",
        description="Build the sample folder tree and print it in pre-order.",
    )

    # --- Rendering ---
    p.add_argument(
        "--indent",
        dest="indent_width",
        type=int,
        default=None,
        help="Spaces per depth level for the plain style (default: 4).",
    )
    p.add_argument(
        "--style",
        choices=RENDER_STYLES,
        default=None,
        help="Output style: plain indentation or ascii connectors.",
    )
    p.add_argument(
        "--with-photo",
        action="store_true",
        help="Add photo.png to the images folder before printing.",
    )

    # --- Tree Source ---
    p.add_argument(
        "--tree",
        dest="tree_json",
        default=None,
        help='Print this tree instead of the sample, e.g. \'{"docs": ["a.txt", {"img": []}]}\'.',
    )

    # --- Output Format ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the tree as nested JSON instead of text.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Only the keys the user actually set.
    """
    overrides: Dict[str, Any] = {}

    if args.indent_width is not None:
        overrides["indent_width"] = args.indent_width
    if args.style is not None:
        overrides["style"] = args.style
    if args.with_photo:
        overrides["include_photo"] = True
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
