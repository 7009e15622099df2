"""Route Modules — one file per concern.

Invariants:
    - Each module defines its own APIRouter under the /api prefix
    - Handlers hold no state between requests
"""
