"""
Configuration & Path Management
===============================
This module serves as the central registry for resource paths and global
constants.

Why is this file needed?
------------------------
1. Abstraction: It keeps magic numbers (tick period, size divisor, date
   pattern) out of the model and view code.
2. Deployment: Resources are resolved through importlib.resources so the
   face image is found both from a source checkout and from an installed
   wheel.

Exports:
    DATE_FORMAT_PATTERN (str): strptime pattern of the initial-time string.
    TICK_INTERVAL_MS (int): Period of the tick timer.
    SIZE_DIVISOR (int): Surface size divided by this gives the minimum hand
        half-width / protruding length.
    CLOCK_FACE_PATH (str): Absolute path to the face SVG.
"""
from importlib.resources import files


def get_resource_path(name: str) -> str:
    """
    Get absolute path to a file shipped in the `customclocks.resources` package.
    """
    return str(files("customclocks.resources").joinpath(name))


# Global Constants
DATE_FORMAT_PATTERN: str = "%Y/%m/%d %H:%M:%S"
TICK_INTERVAL_MS: int = 1000
SIZE_DIVISOR: int = 200

CLOCK_FACE_PATH: str = get_resource_path("clock_face.svg")

# QSettings keys
SETTINGS_ELAPSED_SECONDS_KEY: str = "clock/elapsed_seconds"
