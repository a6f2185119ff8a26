"""
Top-level package for the Standup Scheduler API.

All functionality lives in submodules under ``app``; this package
provides no public exports of its own.
"""

__all__ = []
