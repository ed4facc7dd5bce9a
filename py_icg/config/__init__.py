"""
Configuration for the shared generator.
"""

from .config import Settings, settings

__all__ = ['Settings', 'settings']
