"""Route Modules — one file per concern (entrypoints, discovery, health).

Invariants:
    - Each module defines its own APIRouter
"""
