"""Allow ``python -m nashlex``."""

import sys

from nashlex.cli import main

sys.exit(main())
