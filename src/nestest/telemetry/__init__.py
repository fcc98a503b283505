#
# src/nestest/telemetry/__init__.py
#
"""
Structured logging for nestest.
"""

from .logger import StructLogger, setup_logging

__all__ = [
    "StructLogger",
    "setup_logging",
]

# 🔼⚙️
