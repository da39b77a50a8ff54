"""Shared helpers."""

from srtconvert.util.fs_util import FSUtil

__all__ = ["FSUtil"]
