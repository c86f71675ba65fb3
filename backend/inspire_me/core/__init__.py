"""Core Layer — pure quote-selection logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/ or schemas/
    - Randomness enters only through an injected random.Random instance
"""
