"""TypeID - Entry Point."""

import sys

from typeid.cli import main

sys.exit(main())
