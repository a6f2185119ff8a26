"""
Version 1 of the Standup Scheduler API.
"""
