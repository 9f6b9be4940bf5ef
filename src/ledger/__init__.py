"""Ledger — трансляция событий исполнения в операции изменения баланса.

- coin_spent / coin_received → знаковые операции по аккаунтам
- tx (fee, fee_payer) → пара операций комиссии
- Последовательная нумерация операций транзакции
"""

from .translation import (
    OperationConverter,
    TransactionOperations,
    add_operation_indexes,
    balance_change_operations,
    fee_operations,
)

__all__ = [
    "OperationConverter",
    "TransactionOperations",
    "add_operation_indexes",
    "balance_change_operations",
    "fee_operations",
]
