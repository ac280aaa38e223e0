"""Pydantic Schemas: request/response envelopes for the orders API.

Invariants:
    - Schemas check envelope shape only; field rules live in core/enforce_order.py
    - Wire names are camelCase (aliases); Python attributes are snake_case
"""
