"""Allow ``python -m curatorator`` execution."""

import sys

from curatorator.cli.report import main

sys.exit(main())
