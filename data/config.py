"""
Runtime configuration flags.
"""

import os

DEBUG = os.environ.get("CHAOTIX_DEBUG", "0") == "1"

# Reject rows whose end X precedes their start X instead of reading them as empty
STRICT_ROWS = True

CURRENT_VERSION = "1.0.0"
