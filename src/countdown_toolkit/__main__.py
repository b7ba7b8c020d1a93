import sys

from countdown_toolkit.runner.cli import main

sys.exit(main())
