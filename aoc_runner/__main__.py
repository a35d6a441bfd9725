import sys

from aoc_runner.main import main

sys.exit(main())
