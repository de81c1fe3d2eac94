"""
Data access layer.
"""

from .base import BaseRepository, ModelT

__all__ = ["BaseRepository", "ModelT"]
