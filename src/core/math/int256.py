"""
Int — целое произвольной точности с 256-битной границей модуля

Коллаборатор Dec: вход конструктора Dec.from_big_int и результат
round_int / truncate_int.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. |value| <= MAX_ABS_RAW (2^256 - 1) после каждой операции
2. Граница совпадает с границей Dec (одна и та же константа)
3. Immutable: каждая операция возвращает новый экземпляр
4. Деление усекает к нулю (не floor)
"""

import json
import re
from typing import Final, Union

from src.core.math.errors import DivideByZero, Overflow, ParseError

# =============================================================================
# ГРАНИЦЫ
# =============================================================================

# Максимальный модуль как для Int, так и для масштабированного raw у Dec
MAX_BIT_LEN: Final[int] = 256
MAX_ABS_RAW: Final[int] = (1 << MAX_BIT_LEN) - 1

_INT_PATTERN: Final[re.Pattern[str]] = re.compile(r"-?[0-9]+")

# Число десятичных цифр в MAX_ABS_RAW; более длинные строки заведомо вне диапазона
MAX_DIGITS: Final[int] = len(str(MAX_ABS_RAW))


def is_valid_raw(raw: int) -> bool:
    """
    Предикат диапазона: |raw| <= 2^256 - 1.

    Args:
        raw: Целое (для Dec — масштабированное на 10^18)

    Returns:
        True если значение представимо
    """
    return -MAX_ABS_RAW <= raw <= MAX_ABS_RAW


def check_range(raw: int) -> int:
    """
    Проверка диапазона с сигналом Overflow.

    Raises:
        Overflow: если |raw| > 2^256 - 1
    """
    if not is_valid_raw(raw):
        raise Overflow(f"integer out of range: bit length {raw.bit_length()} > {MAX_BIT_LEN}")
    return raw


def trunc_div(numerator: int, denominator: int) -> int:
    """Целочисленное деление с усечением к нулю."""
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


# =============================================================================
# INT
# =============================================================================


class Int:
    """
    Знаковое целое с границей |value| <= 2^256 - 1.

    Examples:
        >>> Int(7).add(Int(5))
        Int(12)
        >>> Int(-7).quo(Int(2))
        Int(-3)
    """

    __slots__ = ("_value",)

    def __init__(self, value: Union[int, str, "Int"] = 0):
        if isinstance(value, Int):
            parsed = value._value
        elif isinstance(value, bool):
            raise TypeError("bool is not a valid Int value")
        elif isinstance(value, int):
            parsed = value
        elif isinstance(value, str):
            if not _INT_PATTERN.fullmatch(value):
                raise ParseError(f"invalid integer string: {value!r}")
            sign, digits = ("-", value[1:]) if value.startswith("-") else ("", value)
            digits = digits.lstrip("0") or "0"
            if len(digits) > MAX_DIGITS:
                raise Overflow(f"integer out of range: {len(value)} digits")
            parsed = int(sign + digits)
        else:
            raise TypeError(f"cannot build Int from {type(value).__name__}")
        object.__setattr__(self, "_value", check_range(parsed))

    def __setattr__(self, name, value):
        raise AttributeError("Int is immutable")

    # -------------------------------------------------------------------------
    # Доступ
    # -------------------------------------------------------------------------

    @property
    def value(self) -> int:
        """Значение как python int."""
        return self._value

    def big_int(self) -> int:
        return self._value

    def int64(self) -> int:
        """
        Значение как signed 64-bit.

        Raises:
            Overflow: если значение не помещается в int64
        """
        if not -(1 << 63) <= self._value < (1 << 63):
            raise Overflow(f"Int64() out of bound: {self._value}")
        return self._value

    def is_zero(self) -> bool:
        return self._value == 0

    def is_negative(self) -> bool:
        return self._value < 0

    def is_positive(self) -> bool:
        return self._value > 0

    def sign(self) -> int:
        return (self._value > 0) - (self._value < 0)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: "Int") -> "Int":
        return Int(self._value + _as_int(other))

    def sub(self, other: "Int") -> "Int":
        return Int(self._value - _as_int(other))

    def mul(self, other: "Int") -> "Int":
        return Int(self._value * _as_int(other))

    def quo(self, other: "Int") -> "Int":
        """Деление с усечением к нулю."""
        divisor = _as_int(other)
        if divisor == 0:
            raise DivideByZero("division by zero")
        return Int(trunc_div(self._value, divisor))

    def mod(self, other: "Int") -> "Int":
        """Остаток со знаком делимого (пара к quo)."""
        divisor = _as_int(other)
        if divisor == 0:
            raise DivideByZero("division by zero")
        return Int(self._value - trunc_div(self._value, divisor) * divisor)

    def neg(self) -> "Int":
        return Int(-self._value)

    def abs(self) -> "Int":
        return Int(abs(self._value))

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __neg__ = neg
    __abs__ = abs

    # -------------------------------------------------------------------------
    # Сравнения
    # -------------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        if isinstance(other, Int):
            return self._value == other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value == other
        return NotImplemented

    def __lt__(self, other) -> bool:
        return self._value < _as_int(other)

    def __le__(self, other) -> bool:
        return self._value <= _as_int(other)

    def __gt__(self, other) -> bool:
        return self._value > _as_int(other)

    def __ge__(self, other) -> bool:
        return self._value >= _as_int(other)

    def __hash__(self) -> int:
        return hash(self._value)

    def __int__(self) -> int:
        return self._value

    # -------------------------------------------------------------------------
    # Кодеки
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"Int({self._value})"

    def marshal(self) -> bytes:
        return str(self._value).encode("ascii")

    @classmethod
    def unmarshal(cls, data: bytes) -> "Int":
        try:
            text = data.decode("ascii")
        except UnicodeDecodeError as e:
            raise ParseError(f"invalid integer bytes: {e}") from e
        return cls(text)

    def to_json(self) -> str:
        """JSON-строка в кавычках (как у Dec)."""
        return json.dumps(str(self._value))

    @classmethod
    def from_json(cls, text: str) -> "Int":
        try:
            data = json.loads(text)
        except ValueError as e:
            raise ParseError(f"invalid JSON: {e}") from e
        if isinstance(data, (str, int)) and not isinstance(data, bool):
            return cls(data)
        raise ParseError(f"invalid JSON integer: {text!r}")


def _as_int(other: Union[Int, int]) -> int:
    if isinstance(other, Int):
        return other._value
    if isinstance(other, int) and not isinstance(other, bool):
        return other
    raise TypeError(f"unsupported operand type: {type(other).__name__}")
