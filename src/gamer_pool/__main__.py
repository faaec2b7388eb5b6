"""Allow ``python -m gamer_pool``."""

import sys

from .cli import main

sys.exit(main())
