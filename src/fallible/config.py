"""
Configuration for the fallible package.
"""

from typing import Final

# --- Runtime Type Checking ---
BEARTYPE_THIS_PACKAGE_ENV: Final[str] = "FALLIBLE_BEARTYPE_THIS_PACKAGE"
BEARTYPE_ALL_ENV: Final[str] = "FALLIBLE_BEARTYPE_ALL"

# --- Error Accumulation ---
ACCUMULATED_ERRORS_MESSAGE: Final[str] = "accumulated failures"

# --- Logging ---
LOGGER_NAME: Final[str] = "fallible"

# --- SSoT Enforcement ---
__all__ = [
    "ACCUMULATED_ERRORS_MESSAGE",
    "BEARTYPE_ALL_ENV",
    "BEARTYPE_THIS_PACKAGE_ENV",
    "LOGGER_NAME",
]
