"""Computer and Keys service: computer catalog and per-server authorized SSH keys.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
