import sys

from playht.cli import main

sys.exit(main())
