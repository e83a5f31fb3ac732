# constants.py

"""
Application Constants

This module defines static configuration values for the application's framework.
These are not expected to change between runs; run parameters live in config.json.

Data Contract:
- All values are immutable constants.
"""

# Configuration
CONFIG_PATH = 'config.json'

# Logging
LOGGER_NAME = "bounding_region"
RUNS_DIR = 'runs'
LOG_FILE_NAME = 'region.log'

# Sampling defaults, used when the 'sampling' section omits a key.
DEFAULT_POINT_COUNT = 1000
DEFAULT_PADDING = 0.25  # Fraction of the region's extent added on each side.
