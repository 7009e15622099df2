"""Sample API — demonstration HTTP server with fixed sample endpoints.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
