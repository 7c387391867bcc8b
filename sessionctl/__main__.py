import sys

from sessionctl.main import main

sys.exit(main())
