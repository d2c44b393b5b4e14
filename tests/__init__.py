"""
Test suite for boson-domain

Contains:
- tests/unit/          : Unit tests for entities, contracts, math and config
"""
