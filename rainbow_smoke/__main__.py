import sys

from rainbow_smoke.cli import main

sys.exit(main())
