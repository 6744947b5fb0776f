"""Core Layer — pure domain logic, no IO, no async.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - Shaping functions are pure; timestamps are added by the callers

Design Decisions:
    - Functional core separated from the imperative shell that fetches upstream data
"""
