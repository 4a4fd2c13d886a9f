# ----------------------------------------------
# For managing the list locally
# ----------------------------------------------
from __future__ import annotations

from dotenv import load_dotenv

load_dotenv()

from .base import *  # noqa F403 F401 E402

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = True

try:
    from .local import *  # noqa F403 F401
except ImportError:
    pass
