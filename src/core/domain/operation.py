"""
Operation — Модель стандартизованной записи изменения баланса

Immutable Pydantic модели для слоя трансляции событий леджера:
- Attribute / Event: входные события (тип + упорядоченные атрибуты)
- Operation: типизированное изменение баланса аккаунта с Dec-суммой

Полная совместимость с JSON Schema (src/core/contracts/schema/operation.json).
"""

from enum import Enum
from typing import Final, Optional

from pydantic import BaseModel, Field

from src.core.math import Dec

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Типы событий
EVENT_TYPE_COIN_SPENT: Final[str] = "coin_spent"
EVENT_TYPE_COIN_RECEIVED: Final[str] = "coin_received"
EVENT_TYPE_TX: Final[str] = "tx"

# Ключи атрибутов
ATTRIBUTE_KEY_SPENDER: Final[str] = "spender"
ATTRIBUTE_KEY_RECEIVER: Final[str] = "receiver"
ATTRIBUTE_KEY_AMOUNT: Final[str] = "amount"
ATTRIBUTE_KEY_FEE: Final[str] = "fee"
ATTRIBUTE_KEY_FEE_PAYER: Final[str] = "fee_payer"

# Типы операций
FEE_PAYER_OPERATION: Final[str] = "fee_payer"
FEE_RECEIVER_OPERATION: Final[str] = "fee_receiver"


# =============================================================================
# ENUMS
# =============================================================================


class OperationStatus(str, Enum):
    """Статус операции"""

    SUCCESS = "Success"
    REVERTED = "Reverted"


STATUS_TX_SUCCESS: Final[OperationStatus] = OperationStatus.SUCCESS
STATUS_TX_REVERTED: Final[OperationStatus] = OperationStatus.REVERTED


# =============================================================================
# EVENT MODELS
# =============================================================================


class Attribute(BaseModel):
    """Пара ключ/значение атрибута события."""

    key: str = Field(..., min_length=1)
    value: str

    model_config = {"frozen": True}


class Event(BaseModel):
    """
    Событие исполнения: тип и упорядоченный список атрибутов.

    Порядок атрибутов значим (пары spender/amount, receiver/amount).
    """

    type: str = Field(..., min_length=1)
    attributes: tuple[Attribute, ...] = ()

    model_config = {"frozen": True}

    @classmethod
    def of(cls, event_type: str, *pairs: tuple[str, str]) -> "Event":
        """Удобный конструктор: Event.of("coin_spent", ("spender", addr), ("amount", "1uatom"))."""
        return cls(
            type=event_type,
            attributes=tuple(Attribute(key=key, value=value) for key, value in pairs),
        )

    def values(self, key: str) -> list[str]:
        return [attr.value for attr in self.attributes if attr.key == key]


# =============================================================================
# OPERATION MODEL
# =============================================================================


class Operation(BaseModel):
    """
    Изменение баланса аккаунта.

    Immutable модель (frozen=True). Знак amount определяет направление:
    отрицательная сумма — списание, положительная — зачисление.
    """

    index: Optional[int] = Field(None, ge=0, description="Порядковый номер в транзакции")
    related_operations: Optional[tuple[int, ...]] = Field(
        None, description="Индексы связанных операций"
    )
    type: str = Field(..., min_length=1, description="Тип операции")
    status: OperationStatus = Field(..., description="Статус")
    account: str = Field(..., min_length=1, description="Адрес аккаунта")
    amount: Dec = Field(..., description="Знаковая сумма")
    denom: str = Field(..., min_length=1, description="Деноминация")

    model_config = {"frozen": True}

    def is_debit(self) -> bool:
        return self.amount.is_negative()

    def is_credit(self) -> bool:
        return self.amount.is_positive()
