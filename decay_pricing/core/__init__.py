"""
Core pricing curves, fixed-point primitives, and contracts.

This module contains the foundational building blocks that are independent
of external systems (settlement, storage, etc.).
"""
