import sys

from line_splitter.cli import main

sys.exit(main())
