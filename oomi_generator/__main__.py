"""Allow ``python -m oomi_generator``."""

import sys

from oomi_generator.cli.commands import main

sys.exit(main())
