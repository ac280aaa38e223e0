"""Core Layer: pure order domain logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - Validators and lifecycle checks are pure and deterministic
"""
