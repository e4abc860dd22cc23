import sys

from azlab.cli import main

sys.exit(main())
