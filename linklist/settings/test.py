from .base import *  # noqa F403 F401

# Tests point RESOURCES_FILE and RESOURCES_README_FILE at temporary
# directories with override_settings, these defaults must never be written.
RESOURCES_FILE = "test-resources.json"
RESOURCES_README_FILE = "test-README.md"

LOGGING["loggers"]["resources"]["level"] = "CRITICAL"  # noqa F405
