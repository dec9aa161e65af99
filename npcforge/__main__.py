"""Allow ``python -m npcforge``."""

import sys

from npcforge.cli import main

sys.exit(main())
