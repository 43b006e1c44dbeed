"""Route Modules: one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Write routes pass the service outcome through commit_outcome()
"""
