"""Pydantic Schemas — request validation for the entrypoint API boundary.

Invariants:
    - Schemas validate at system boundary (entrypoint input)
    - Upstream ESPN payload models live in core/espn_types.py
"""
