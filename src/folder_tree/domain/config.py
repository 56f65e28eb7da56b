from __future__ import annotations

"""
Rendering Configuration Defaults.

Holds the dictionary-based session state consumed by the CLI and the
renderers. Values are normalized by the validator before use.
"""

from typing import Any, Dict

from folder_tree.domain.constants import DEFAULT_INDENT_WIDTH, DEFAULT_STYLE

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Rendering
        "indent_width": DEFAULT_INDENT_WIDTH,
        "style": DEFAULT_STYLE,

        # Sample tree
        "include_photo": False,

        # Diagnostics
        "log_level": "INFO",
    }
