"""
Test suite for ledger-dec

Contains:
- tests/unit/          : Unit tests for individual modules
"""
