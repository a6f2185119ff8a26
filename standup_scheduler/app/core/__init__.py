"""
Core infrastructure: settings, logging, the SQLite engine and the
outcome-to-response mapping.
"""
