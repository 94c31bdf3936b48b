"""Entry point for running quickpopup as a module: python -m quickpopup"""

import sys

from quickpopup.cli import main

sys.exit(main())
