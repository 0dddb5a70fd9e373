import sys

from maze_carver.cli import main

sys.exit(main())
