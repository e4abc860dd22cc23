"""Utility module for common helper functions.

Import directly from submodules when needed:
  - from azlab.utils.naming import ...
  - from azlab.utils.logging_setup import ...
"""

__all__ = [
    "logging_setup",
    "naming",
]
