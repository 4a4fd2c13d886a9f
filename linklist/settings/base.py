"""
Shared settings for the linklist project.

The project has no database and no web frontend; it exists to run the
resource management commands against a JSON file in the working directory.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent.parent

SECRET_KEY = os.getenv("SECRET_KEY", "linklist-insecure-local-only")

DEBUG = False

INSTALLED_APPS = [
    "resources",
]

DATABASES = {}

USE_TZ = True

# Resource files are resolved against the current working directory, not
# BASE_DIR, so the commands manage the list of whatever checkout they run in.
RESOURCES_FILE = os.getenv("RESOURCES_FILE", "resources.json")
RESOURCES_README_FILE = os.getenv("RESOURCES_README_FILE", "README.md")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "{levelname} {name}: {message}",
            "style": "{",
        },
    },
    "handlers": {
        # stderr keeps log lines out of the interactive menu on stdout
        "console": {
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
            "formatter": "simple",
        },
    },
    "loggers": {
        "resources": {
            "handlers": ["console"],
            "level": os.getenv("RESOURCES_LOG_LEVEL", "WARNING"),
            "propagate": False,
        },
    },
}
