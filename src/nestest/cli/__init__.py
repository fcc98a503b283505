#
# src/nestest/cli/__init__.py
#
"""
Command line interface for nestest.
"""

from .main import cli

__all__ = ["cli"]

# 🔼⚙️
