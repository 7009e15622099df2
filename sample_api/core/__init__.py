"""Core — error hierarchy and the deadline guard.

Invariants:
    - No FastAPI imports here; core is framework-agnostic
"""
