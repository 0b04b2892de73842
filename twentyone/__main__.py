import sys

from twentyone.cli import main

sys.exit(main())
