import sys

from hexcolorize.cli import main

sys.exit(main())
