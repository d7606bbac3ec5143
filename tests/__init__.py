"""
Test suite for the trading simulation

Contains:
- tests/unit/          : Unit tests for domain models, pricing, traders and contracts
"""
