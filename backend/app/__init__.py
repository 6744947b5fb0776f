"""golf-intel Application Package — priced golf-data entrypoints over the ESPN API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
