import sys

from pattern_catalog.cli import main

sys.exit(main())
