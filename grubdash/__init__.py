"""GrubDash Orders Package: order validation, lifecycle and CRUD API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
