"""
Service layer.

Each service encapsulates the queries for one domain and returns an
outcome from ``core.responses`` rather than raising HTTP errors.  All
writes go through ``MutationGuard`` so that a missing parent is
reported before anything is written.
"""
