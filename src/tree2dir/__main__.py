import sys

from tree2dir.main import main

sys.exit(main())
