"""
Test suite for decay_pricing

Contains:
- tests/unit/          : Unit tests for curves, fixed-point math and contracts
"""
