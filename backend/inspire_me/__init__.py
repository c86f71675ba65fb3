"""Inspire Me — topic-driven quote generator.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
