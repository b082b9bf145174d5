"""
Directory Module

Static State -> City -> Community -> Block -> Flat hierarchy. Validates the
location chosen on signup and resolves ids to display names.

API Endpoints:
- GET /communities - Full directory tree
"""

from .router import router
from .service import Directory, InvalidLocationError, ResolvedLocation, get_directory

__all__ = ["Directory", "InvalidLocationError", "ResolvedLocation", "get_directory", "router"]
