import sys

from gridwalk.cli import main

sys.exit(main())
