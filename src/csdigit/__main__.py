import sys

from csdigit.cli import main

sys.exit(main())
