import sys

from porterstem.cli import main

sys.exit(main())
