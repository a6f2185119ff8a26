"""
Pydantic schema definitions for API payloads.

Each domain (teams, standups, activities) defines its own request and
response models.  Request models are validated by FastAPI before any
service code runs, so a missing or mistyped field never reaches the
store.
"""
