import sys

from pybig.cli import main

sys.exit(main())
