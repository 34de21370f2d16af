"""
CBLAUNCH Commands Package.

This package contains the CLI commands organized as separate modules.
"""

from .launch import launch

__all__ = ["launch"]
