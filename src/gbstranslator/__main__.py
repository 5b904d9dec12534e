"""Entry point for ``python -m gbstranslator``."""

import sys

from gbstranslator.cli import main

sys.exit(main())
