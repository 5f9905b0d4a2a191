import sys

from line_sort.cli import main

sys.exit(main())
