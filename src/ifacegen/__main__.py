"""`python -m ifacegen`."""

import sys

from ifacegen.presentation.cli import main

sys.exit(main())
