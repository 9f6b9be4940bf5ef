"""
Coin — Модель суммы в конкретной деноминации

Immutable Pydantic модель с Dec-суммой и разбор строк вида
"10uatom,2.5stake" (формат атрибутов amount/fee в событиях леджера).
"""

import re
from typing import Final

from pydantic import BaseModel, Field, field_validator

from src.core.math import Dec

# =============================================================================
# ГРАММАТИКА
# =============================================================================

# Деноминация: буква, затем 2..127 символов [a-zA-Z0-9/:._-]
DENOM_PATTERN: Final[str] = r"^[a-zA-Z][a-zA-Z0-9/:._-]{2,127}$"

_COIN_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"([0-9]+(?:\.[0-9]+)?)\s*([a-zA-Z][a-zA-Z0-9/:._-]{2,127})"
)


# =============================================================================
# COIN MODEL
# =============================================================================


class Coin(BaseModel):
    """
    Неотрицательная сумма в деноминации.

    Immutable модель (frozen=True).
    """

    denom: str = Field(..., pattern=DENOM_PATTERN, description="Деноминация (например, 'uatom')")
    amount: Dec = Field(..., description="Сумма (неотрицательная)")

    model_config = {"frozen": True}

    @field_validator("amount")
    @classmethod
    def validate_amount_non_negative(cls, v: Dec) -> Dec:
        """Отрицательные суммы выражаются знаком операции, не монеты."""
        if v.is_negative():
            raise ValueError(f"coin amount cannot be negative: {v}")
        return v

    def is_zero(self) -> bool:
        return self.amount.is_zero()

    def __str__(self) -> str:
        return f"{self.amount}{self.denom}"


# =============================================================================
# РАЗБОР
# =============================================================================


def parse_coin(text: str) -> Coin:
    """
    Разбор одной монеты "2.5stake".

    Raises:
        ValueError: нарушение формата (ParseError/PrecisionExceeded для суммы)
    """
    match = _COIN_PATTERN.fullmatch(text.strip())
    if match is None:
        raise ValueError(f"invalid coin expression: {text!r}")
    amount, denom = match.groups()
    return Coin(denom=denom, amount=Dec.from_str(amount))


def parse_coins(text: str) -> tuple[Coin, ...]:
    """
    Разбор списка монет через запятую с нормализацией.

    Нормализация: нулевые суммы отбрасываются, результат отсортирован
    по деноминации, повтор деноминации запрещён.

    Args:
        text: Строка вида "10uatom,2.5stake" (пустая строка → пустой набор)

    Returns:
        Кортеж монет

    Raises:
        ValueError: нарушение формата или повтор деноминации

    Examples:
        >>> [str(c) for c in parse_coins("2stake,1.5uatom")]
        ['2.000000000000000000stake', '1.500000000000000000uatom']
    """
    text = text.strip()
    if not text:
        return ()

    coins = [parse_coin(part) for part in text.split(",")]
    denoms = [coin.denom for coin in coins]
    if len(set(denoms)) != len(denoms):
        raise ValueError(f"duplicate denomination in {text!r}")

    return tuple(sorted((coin for coin in coins if not coin.is_zero()), key=lambda c: c.denom))
