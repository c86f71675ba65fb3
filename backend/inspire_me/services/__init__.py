"""Services Layer — the imperative shell around the pure selector.

Invariants:
    - Services own delays and logging; core/ stays pure
"""
