"""Pydantic Schemas — request/response contracts for API endpoints.

Invariants:
    - JSON keys are camelCase on the wire, snake_case in Python
    - Schemas are API contracts, models are persistence
"""
