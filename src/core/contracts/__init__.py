"""
Contract Validation Module

Модуль для валидации JSON контрактов моделей леджера (Operation, Coin).
"""

from .validators import (
    DEFAULT_SCHEMA_DIR,
    CoinValidator,
    ContractValidator,
    ContractViolation,
    OperationValidator,
    SchemaLoader,
    default_loader,
    validate_coin,
    validate_operation,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "OperationValidator",
    "CoinValidator",
    "ContractViolation",
    # Functions
    "default_loader",
    "validate_operation",
    "validate_coin",
    # Constants
    "DEFAULT_SCHEMA_DIR",
]
