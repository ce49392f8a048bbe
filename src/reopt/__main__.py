import sys

from reopt.app import main

sys.exit(main())
