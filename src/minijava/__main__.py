"""Allow ``python -m minijava``."""

import sys

from minijava.cli import main

sys.exit(main())
