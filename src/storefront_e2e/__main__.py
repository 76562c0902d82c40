"""Allow ``python -m storefront_e2e``."""

import sys

from storefront_e2e.cli import main

sys.exit(main())
