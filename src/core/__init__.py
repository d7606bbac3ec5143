"""
Core domain models and contracts.

This module contains the foundational building blocks of the trading
simulation: items, prices and trader snapshots, independent of any
trading strategy.
"""
