"""
AdjWeaver v0.1.0

Configuration management for AdjWeaver.

Author: AdjWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from .parser import ConfigParser, ConfigurationError

__all__ = ["ConfigParser", "ConfigurationError"]
