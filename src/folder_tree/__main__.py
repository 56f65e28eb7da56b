from __future__ import annotations

import sys

from folder_tree.interface.cli.app import main

sys.exit(main())
