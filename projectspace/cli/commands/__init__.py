"""
CLI commands.
"""

from .show import show
from .validate import validate

__all__ = ["show", "validate"]
