"""
H5P Integration Configuration

Environment-driven settings (H5P_* variables).
"""

from .schemas import ApiVersion, AppSettings

__all__ = [
    "ApiVersion",
    "AppSettings",
]
