"""
Test suite for domain-primitives

Contains:
- tests/unit/          : Unit tests for individual primitives and contracts
- tests/property/      : Hypothesis property tests for the invariants
"""
