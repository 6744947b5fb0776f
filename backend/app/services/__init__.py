"""Services Layer — entrypoint handlers, registry and the agent builder.

Invariants:
    - Handlers grouped by concern: golf data vs payment analytics
    - Entrypoint routing uses an explicit list (no auto-discovery)
"""
