import sys

from phishhunter.cli import main

sys.exit(main())
