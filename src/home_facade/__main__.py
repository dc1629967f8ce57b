"""Run the demonstration: python -m home_facade"""

import sys

from home_facade.client import main

sys.exit(main())
