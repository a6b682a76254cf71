import sys
from pifan.cli import main

sys.exit(main())
