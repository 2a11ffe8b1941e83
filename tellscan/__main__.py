import sys

from tellscan.cli import main

sys.exit(main())
