"""
Contract Validation Module

Модуль для валидации JSON контрактов (снапшоты трейдеров).
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    TraderStateValidator,
    validate_trader_state,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "TraderStateValidator",
    # Functions
    "validate_trader_state",
]
