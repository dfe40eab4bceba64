"""Allow ``python -m schematicnav``."""

import sys

from schematicnav.cli import main

sys.exit(main())
