"""Allow ``python -m trending_scraper``."""

import sys

from trending_scraper.main import main

sys.exit(main())
