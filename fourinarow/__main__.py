"""Allow ``python -m fourinarow``."""

import sys

from fourinarow.interfaces.cli import main

sys.exit(main())
