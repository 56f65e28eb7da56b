from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merge and
validation, tree construction and rendering to standard output.
"""

import json
import sys
from typing import List, Optional

from folder_tree.core.builder import build_tree, sample_tree, to_dict
from folder_tree.core.rendering import print_tree
from folder_tree.core.validator import validate_config
from folder_tree.domain.config import get_default_config
from folder_tree.domain.errors import CompositeError
from folder_tree.infra.logging import LoggingConfig, configure_logging, get_logger
from folder_tree.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 invalid tree, 2 bad configuration
        or malformed --tree JSON, 130 interrupted).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    raw_conf = get_default_config()
    raw_conf.update(cli_args.args_to_overrides(args))

    try:
        conf, warnings = validate_config(raw_conf, strict=True)
    except (TypeError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    configure_logging(LoggingConfig(level=conf["log_level"], console=True))
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=2))
        return 0

    if args.indent_width is not None and conf["style"] == "ascii":
        logger.warning("--indent is ignored with the ascii style.")

    tree_data = None
    if args.tree_json is not None:
        try:
            tree_data = json.loads(args.tree_json)
        except json.JSONDecodeError as e:
            print(f"ERROR: --tree is not valid JSON: {e}", file=sys.stderr)
            return 2
        if conf["include_photo"]:
            logger.warning("--with-photo only applies to the sample tree; ignored.")

    try:
        if tree_data is not None:
            root = build_tree(tree_data)
        else:
            root = sample_tree(with_photo=conf["include_photo"])

        if args.json_output:
            print(json.dumps(to_dict(root), ensure_ascii=False, indent=2))
        else:
            print_tree(root, indent=" " * conf["indent_width"], style=conf["style"])
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return 130
    except CompositeError as e:
        logger.error(f"Tree construction failed: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    logger.debug(f"Printed '{root.name}' ({root.count()} nodes).")
    return 0

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
