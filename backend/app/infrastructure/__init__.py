"""Infrastructure Layer — upstream HTTP client and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Every upstream failure is mapped to UpstreamAPIError (core/errors.py)
"""
