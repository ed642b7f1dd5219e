"""Allow ``python -m rwenv``."""

import sys

from rwenv.cli import main

sys.exit(main())
