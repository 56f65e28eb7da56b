from __future__ import annotations

"""
Domain Constants.

Centralizes rendering defaults shared by the components, the renderers
and the CLI.
"""

# Width of one depth level in plain rendering
DEFAULT_INDENT_WIDTH = 4
INDENT_UNIT = " " * DEFAULT_INDENT_WIDTH

# Connectors for the ASCII rendering style
BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE_PREFIX = "│   "
SPACE_PREFIX = "    "

RENDER_STYLES = ("plain", "ascii")
DEFAULT_STYLE = "plain"
