"""CLI commands."""

from .check import check
from .show import show

__all__ = ["check", "show"]
