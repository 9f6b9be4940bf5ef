"""
Dec — детерминированное десятичное число с фиксированной точкой

Представление экономических величин (балансы токенов, курсы обмена,
доли наград) внутри реплицируемой машины состояний. Все реплики, исполняющие
одну и ту же последовательность операций, обязаны получить побайтно
идентичный результат.

Внутреннее представление: одно целое произвольной точности raw,
равное истинному значению × 10^18 (PRECISION = 18 дробных разрядов).

Модуль объединяет пять обязанностей:
- Конструирование и разбор литералов
- Проверка диапазона: |raw| <= 2^256 - 1 после каждой операции
- Арифметическое ядро: add/sub/mul/quo с точными и округляющими режимами
- Округление и приближения: round (ties-to-even), truncate, ceil, power,
  approx_root (метод Ньютона)
- Кодеки: каноническая строка, bytes, JSON, YAML, pydantic

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Никакого float: все вычисления в целых числах
2. Immutable: каждая операция возвращает новый экземпляр
3. Переполнение → Overflow, деление на ноль → DivideByZero (без clamp/wrap)
4. Ошибки ввода (ParseError, PrecisionExceeded) — отдельный канал
5. quo(x).mul(x) в общем случае != исходному значению; это сохраняется

ФОРМУЛЫ:
    mul:  raw = round_half_away(raw1 * raw2 / 10^18)
    quo:  raw = round_half_away(raw1 * 10^36 / raw2 / 10^18)
    approx_root: y_{n+1} = y_n + (value / y_n^(root-1) - y_n) / root
"""

import json
import logging
import re
from enum import Enum
from typing import Final, Iterable, Union

import yaml
from pydantic_core import core_schema

from src.core.math.errors import DivideByZero, Overflow, ParseError, PrecisionExceeded
from src.core.math.int256 import MAX_DIGITS, Int, check_range, is_valid_raw, trunc_div

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ ТОЧНОСТИ
# =============================================================================

# Количество сохраняемых дробных разрядов
PRECISION: Final[int] = 18

# Множитель масштаба raw (10^18)
PRECISION_MULTIPLIER: Final[int] = 10**PRECISION

# Предельное число итераций метода Ньютона в approx_root
# Некоторые входы циклятся, не сходясь ниже допуска (например 1e-8 ^ 1/3)
MAX_APPROX_ROOT_ITERATIONS: Final[int] = 100

# Граница signed 64-bit для round_int64 / truncate_int64
_INT64_MIN: Final[int] = -(1 << 63)
_INT64_MAX: Final[int] = (1 << 63) - 1

# Грамматика литерала: -?[0-9]+(\.[0-9]+)?
DEC_STRING_PATTERN: Final[str] = r"^-?[0-9]+(\.[0-9]+)?$"
_DEC_PATTERN: Final[re.Pattern[str]] = re.compile(r"(-?)([0-9]+)(?:\.([0-9]+))?")

# Ширина вывода YAML без переноса длинных скаляров
_YAML_WIDTH: Final[int] = 1 << 16


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


class Rounding(str, Enum):
    """Режим округления при отсечении разрядов (chop)."""

    TRUNCATE = "truncate"  # к нулю
    HALF_AWAY = "half_away"  # половина от нуля
    HALF_EVEN = "half_even"  # половина к чётному (banker's)
    UP = "up"  # любой ненулевой остаток от нуля


def chop(numerator: int, denominator: int, rounding: Rounding) -> int:
    """
    Деление целых с заданным режимом округления модуля.

    Округление симметрично: вычисляется над модулями, знак восстанавливается.

    Args:
        numerator: Делимое
        denominator: Делитель (ненулевой)
        rounding: Режим округления

    Returns:
        Округлённое частное

    Raises:
        DivideByZero: если denominator == 0

    Examples:
        >>> chop(15, 10, Rounding.HALF_AWAY)
        2
        >>> chop(25, 10, Rounding.HALF_EVEN)
        2
        >>> chop(-11, 10, Rounding.UP)
        -2
    """
    if denominator == 0:
        raise DivideByZero("division by zero")

    negative = (numerator < 0) != (denominator < 0)
    divisor = abs(denominator)
    quotient, remainder = divmod(abs(numerator), divisor)

    if remainder:
        if rounding is Rounding.UP:
            quotient += 1
        elif rounding is Rounding.HALF_AWAY:
            if 2 * remainder >= divisor:
                quotient += 1
        elif rounding is Rounding.HALF_EVEN:
            twice = 2 * remainder
            if twice > divisor or (twice == divisor and quotient % 2 == 1):
                quotient += 1

    return -quotient if negative else quotient


# =============================================================================
# DEC
# =============================================================================

DecLike = Union["Dec", int]


class Dec:
    """
    Десятичное число с фиксированной точкой (18 дробных разрядов).

    Immutable value type: операции не изменяют операнды.
    Два экземпляра с одинаковым raw взаимозаменяемы.

    Конструктор принимает:
    - int: целое значение (масштаб 0), Dec(5) == 5.000000000000000000
    - str: десятичный литерал, Dec("0.75")
    - Dec: копия
    - Int: целое значение (масштаб 0)

    Examples:
        >>> Dec("0.75").raw
        750000000000000000
        >>> str(Dec(3).quo(Dec(7)))
        '0.428571428571428571'
        >>> Dec(-1).mul(Dec(-1)) == Dec(1)
        True
    """

    __slots__ = ("_raw",)

    def __init__(self, value: Union["Dec", Int, int, str] = 0):
        if isinstance(value, Dec):
            raw = value._raw
        elif isinstance(value, Int):
            raw = value.big_int() * PRECISION_MULTIPLIER
        elif isinstance(value, bool):
            raise TypeError("bool is not a valid Dec value")
        elif isinstance(value, int):
            raw = value * PRECISION_MULTIPLIER
        elif isinstance(value, str):
            raw = _parse_raw(value)
        elif isinstance(value, float):
            raise TypeError("float is not supported, use a decimal string")
        else:
            raise TypeError(f"cannot build Dec from {type(value).__name__}")
        object.__setattr__(self, "_raw", check_range(raw))

    def __setattr__(self, name, value):
        raise AttributeError("Dec is immutable")

    def __delattr__(self, name):
        raise AttributeError("Dec is immutable")

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_raw(cls, raw: int) -> "Dec":
        """
        Dec из уже масштабированного целого (raw = value × 10^18).

        Raises:
            Overflow: если |raw| > 2^256 - 1
        """
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise TypeError(f"raw must be int, got {type(raw).__name__}")
        dec = cls.__new__(cls)
        object.__setattr__(dec, "_raw", check_range(raw))
        return dec

    @classmethod
    def from_str(cls, text: str) -> "Dec":
        """
        Разбор десятичного литерала.

        Raises:
            ParseError: нарушение грамматики -?[0-9]+(\\.[0-9]+)?
            PrecisionExceeded: больше 18 дробных разрядов
            Overflow: масштабированное значение вне диапазона
        """
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        return cls.from_raw(_parse_raw(text))

    @classmethod
    def from_int(cls, value: int) -> "Dec":
        """Целое значение (масштаб 0)."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected int, got {type(value).__name__}")
        return cls.from_raw(value * PRECISION_MULTIPLIER)

    @classmethod
    def from_int_with_prec(cls, value: Union[int, Int], prec: int) -> "Dec":
        """
        Dec из предварительно масштабированного целого с явной точностью.

        raw = value × 10^(18 - prec); при prec > 18 деление с усечением.

        Examples:
            >>> str(Dec.from_int_with_prec(75, 2))
            '0.750000000000000000'
        """
        big = value.big_int() if isinstance(value, Int) else value
        if isinstance(big, bool) or not isinstance(big, int):
            raise TypeError(f"expected int, got {type(value).__name__}")
        if isinstance(prec, bool) or not isinstance(prec, int) or prec < 0:
            raise ValueError(f"prec must be a non-negative int, got {prec!r}")
        if prec <= PRECISION:
            return cls.from_raw(big * 10 ** (PRECISION - prec))
        return cls.from_raw(trunc_div(big, 10 ** (prec - PRECISION)))

    @classmethod
    def from_big_int(cls, value: Int) -> "Dec":
        """Dec из Int (масштаб 0)."""
        return cls.from_raw(value.big_int() * PRECISION_MULTIPLIER)

    @classmethod
    def zero(cls) -> "Dec":
        return cls.from_raw(0)

    @classmethod
    def one(cls) -> "Dec":
        return cls.from_raw(PRECISION_MULTIPLIER)

    @classmethod
    def smallest(cls) -> "Dec":
        """Наименьшая представимая единица 10^-18."""
        return cls.from_raw(1)

    # -------------------------------------------------------------------------
    # Доступ и предикаты
    # -------------------------------------------------------------------------

    @property
    def raw(self) -> int:
        """Масштабированное целое (значение × 10^18)."""
        return self._raw

    def big_int(self) -> int:
        return self._raw

    def is_in_valid_range(self) -> bool:
        return is_valid_raw(self._raw)

    def is_zero(self) -> bool:
        return self._raw == 0

    def is_negative(self) -> bool:
        return self._raw < 0

    def is_positive(self) -> bool:
        return self._raw > 0

    def is_integer(self) -> bool:
        return self._raw % PRECISION_MULTIPLIER == 0

    def sign(self) -> int:
        return (self._raw > 0) - (self._raw < 0)

    def equal(self, other: "Dec") -> bool:
        return self._raw == _lift(other)._raw

    def gt(self, other: "Dec") -> bool:
        return self._raw > _lift(other)._raw

    def gte(self, other: "Dec") -> bool:
        return self._raw >= _lift(other)._raw

    def lt(self, other: "Dec") -> bool:
        return self._raw < _lift(other)._raw

    def lte(self, other: "Dec") -> bool:
        return self._raw <= _lift(other)._raw

    # -------------------------------------------------------------------------
    # Арифметическое ядро
    # -------------------------------------------------------------------------

    def add(self, other: "Dec") -> "Dec":
        return Dec.from_raw(self._raw + _lift(other)._raw)

    def sub(self, other: "Dec") -> "Dec":
        return Dec.from_raw(self._raw - _lift(other)._raw)

    def neg(self) -> "Dec":
        return Dec.from_raw(-self._raw)

    def abs(self) -> "Dec":
        return Dec.from_raw(abs(self._raw))

    def mul(self, other: "Dec") -> "Dec":
        """Умножение, округление половины от нуля."""
        product = self._raw * _lift(other)._raw
        return Dec.from_raw(chop(product, PRECISION_MULTIPLIER, Rounding.HALF_AWAY))

    def mul_truncate(self, other: "Dec") -> "Dec":
        """Умножение с усечением к нулю."""
        product = self._raw * _lift(other)._raw
        return Dec.from_raw(chop(product, PRECISION_MULTIPLIER, Rounding.TRUNCATE))

    def mul_int(self, other: Int) -> "Dec":
        """Умножение на Int (точное)."""
        return Dec.from_raw(self._raw * _check_big_int(other))

    def mul_int64(self, other: int) -> "Dec":
        """Умножение на python int (точное)."""
        return Dec.from_raw(self._raw * _check_int64(other))

    def quo(self, other: "Dec") -> "Dec":
        """
        Деление, округление половины от нуля.

        Raises:
            DivideByZero: если делитель равен нулю
        """
        return self._quo(_lift(other), Rounding.HALF_AWAY)

    def quo_round_up(self, other: "Dec") -> "Dec":
        """Деление; любой ненулевой остаток увеличивает модуль результата."""
        return self._quo(_lift(other), Rounding.UP)

    def quo_truncate(self, other: "Dec") -> "Dec":
        """Деление с усечением к нулю."""
        return self._quo(_lift(other), Rounding.TRUNCATE)

    def quo_int(self, other: Int) -> "Dec":
        """Деление на Int с усечением к нулю."""
        divisor = _check_big_int(other)
        if divisor == 0:
            raise DivideByZero("division by zero")
        return Dec.from_raw(trunc_div(self._raw, divisor))

    def quo_int64(self, other: int) -> "Dec":
        """Деление на python int с усечением к нулю."""
        divisor = _check_int64(other)
        if divisor == 0:
            raise DivideByZero("division by zero")
        return Dec.from_raw(trunc_div(self._raw, divisor))

    def _quo(self, other: "Dec", rounding: Rounding) -> "Dec":
        if other._raw == 0:
            raise DivideByZero("division by zero")
        # raw1 * 10^36 / raw2 / 10^18 == raw1 * 10^18 / raw2 (точно)
        return Dec.from_raw(chop(self._raw * PRECISION_MULTIPLIER, other._raw, rounding))

    # -------------------------------------------------------------------------
    # Округление, усечение, потолок, степень
    # -------------------------------------------------------------------------

    def round_int(self) -> Int:
        """
        Округление до ближайшего целого, половина — к чётному.

        Examples:
            >>> [Dec(s).round_int64() for s in ("0.5", "1.5", "2.5", "7.5")]
            [0, 2, 2, 8]
        """
        return Int(chop(self._raw, PRECISION_MULTIPLIER, Rounding.HALF_EVEN))

    def round_int64(self) -> int:
        return self.round_int().int64()

    def round_dec(self) -> "Dec":
        """Ближайшее целое как Dec (половина — к чётному)."""
        return Dec.from_raw(
            chop(self._raw, PRECISION_MULTIPLIER, Rounding.HALF_EVEN) * PRECISION_MULTIPLIER
        )

    def truncate_int(self) -> Int:
        """Отбрасывание дробной части (к нулю): 7.6 → 7, -7.6 → -7."""
        return Int(trunc_div(self._raw, PRECISION_MULTIPLIER))

    def truncate_int64(self) -> int:
        return self.truncate_int().int64()

    def truncate_dec(self) -> "Dec":
        return Dec.from_raw(trunc_div(self._raw, PRECISION_MULTIPLIER) * PRECISION_MULTIPLIER)

    def ceil(self) -> "Dec":
        """
        Наименьшее целое не меньше значения (к +∞).

        Результат проходит проверку диапазона: потолок максимального
        допустимого значения вызывает Overflow.

        Examples:
            >>> str(Dec("4.001").ceil()), str(Dec("-4.7").ceil())
            ('5.000000000000000000', '-4.000000000000000000')
        """
        quotient = -(-self._raw // PRECISION_MULTIPLIER)
        return Dec.from_raw(quotient * PRECISION_MULTIPLIER)

    def power(self, exponent: int) -> "Dec":
        """
        Целая степень возведением в квадрат через mul.

        Каждый шаг повторно применяет округление mul, поэтому для
        неточных оснований погрешность накапливается.

        Raises:
            ValueError: если exponent отрицательный или не int
        """
        _check_uint(exponent, "exponent")
        if exponent == 0:
            return Dec.one()

        base = self
        accumulator = Dec.one()
        i = exponent
        while i > 1:
            if i % 2 != 0:
                accumulator = accumulator.mul(base)
            i //= 2
            base = base.mul(base)
        return base.mul(accumulator)

    # -------------------------------------------------------------------------
    # Приближённое извлечение корня
    # -------------------------------------------------------------------------

    def approx_root(self, root: int) -> "Dec":
        """
        Приближение value^(1/root) методом Ньютона.

        Знак: для отрицательного значения вычисляется корень модуля и
        исходный знак возвращается результату, независимо от чётности root
        (approx_root(-81, 4) == -3).

        Останов: |delta| <= 10^-18 либо MAX_APPROX_ROOT_ITERATIONS итераций;
        при достижении предела возвращается текущее приближение.

        Args:
            root: Степень корня (неотрицательный int)

        Returns:
            Приближение корня

        Examples:
            >>> str(Dec(2).approx_root(2))
            '1.414213562373095049'
            >>> str(Dec(27).approx_root(3))
            '3.000000000000000000'
        """
        _check_uint(root, "root")
        if self._raw < 0:
            return self.neg().approx_root(root).neg()

        if root == 1 or self._raw == 0 or self._raw == PRECISION_MULTIPLIER:
            return self
        if root == 0:
            return Dec.one()

        guess = Dec.one()
        delta = Dec.one()
        iterations = 0
        while abs(delta._raw) > 1 and iterations < MAX_APPROX_ROOT_ITERATIONS:
            previous = guess.power(root - 1)
            if previous._raw == 0:
                previous = Dec.smallest()
            delta = self.quo(previous).sub(guess).quo_int64(root)
            guess = guess.add(delta)
            iterations += 1

        if abs(delta._raw) > 1:
            logger.debug(
                "approx_root iteration cap reached: value=%s root=%d last_delta=%s",
                self, root, delta,
            )
        return guess

    def approx_sqrt(self) -> "Dec":
        """Квадратный корень: approx_root(2)."""
        return self.approx_root(2)

    # -------------------------------------------------------------------------
    # Каноническая строка
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        integer, fraction = divmod(abs(self._raw), PRECISION_MULTIPLIER)
        sign = "-" if self._raw < 0 else ""
        return f"{sign}{integer}.{fraction:0{PRECISION}d}"

    def __repr__(self) -> str:
        return f"Dec('{self}')"

    def to_string(self) -> str:
        return str(self)

    # -------------------------------------------------------------------------
    # Кодеки: bytes / JSON / YAML
    # -------------------------------------------------------------------------

    def marshal(self) -> bytes:
        """ASCII-байты канонической строки."""
        return str(self).encode("ascii")

    @classmethod
    def unmarshal(cls, data: bytes) -> "Dec":
        """
        Обратная операция к marshal.

        Raises:
            ParseError: не-ASCII или нарушение грамматики
        """
        try:
            text = bytes(data).decode("ascii")
        except UnicodeDecodeError as e:
            raise ParseError(f"invalid decimal bytes: {e}") from e
        return cls.from_str(text)

    def to_json(self) -> str:
        """JSON-скаляр: каноническая строка в кавычках."""
        return json.dumps(str(self))

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> "Dec":
        """
        Разбор JSON-строки.

        Числовые JSON-литералы отклоняются: значение должно быть строкой.
        """
        try:
            data = json.loads(text)
        except ValueError as e:
            raise ParseError(f"invalid JSON: {e}") from e
        if not isinstance(data, str):
            raise ParseError(f"decimal JSON value must be a string, got {type(data).__name__}")
        return cls.from_str(data)

    def to_yaml(self) -> str:
        """YAML-документ: каноническая строка в двойных кавычках."""
        return yaml.dump(self, Dumper=yaml.SafeDumper, width=_YAML_WIDTH)

    @classmethod
    def from_yaml(cls, text: str) -> "Dec":
        try:
            data = yaml.safe_load(text)
        except (yaml.YAMLError, ValueError) as e:
            raise ParseError(f"invalid YAML: {e}") from e
        if isinstance(data, bool) or not isinstance(data, (str, int)):
            raise ParseError(f"decimal YAML value must be a string, got {type(data).__name__}")
        if isinstance(data, int):
            return cls.from_int(data)
        return cls.from_str(data)

    # -------------------------------------------------------------------------
    # pydantic
    # -------------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type, handler):
        return core_schema.no_info_plain_validator_function(
            _coerce,
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema, handler):
        return {"type": "string", "pattern": DEC_STRING_PATTERN}

    # -------------------------------------------------------------------------
    # Операторы python
    # -------------------------------------------------------------------------

    def __add__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return _lift(other).add(self)

    def __sub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return _lift(other).sub(self)

    def __mul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return _lift(other).mul(self)

    def __truediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.quo(other)

    def __rtruediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return _lift(other).quo(self)

    def __neg__(self) -> "Dec":
        return self.neg()

    def __pos__(self) -> "Dec":
        return self

    def __abs__(self) -> "Dec":
        return self.abs()

    def __bool__(self) -> bool:
        return self._raw != 0

    def __eq__(self, other) -> bool:
        if not _is_operand(other):
            return NotImplemented
        if isinstance(other, Dec):
            return self._raw == other._raw
        return self._raw == other * PRECISION_MULTIPLIER

    def __lt__(self, other) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self._raw < _raw_of(other)

    def __le__(self, other) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self._raw <= _raw_of(other)

    def __gt__(self, other) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self._raw > _raw_of(other)

    def __ge__(self, other) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self._raw >= _raw_of(other)

    def __hash__(self) -> int:
        # Согласовано с __eq__ для целых: hash(Dec(5)) == hash(5)
        integer, fraction = divmod(self._raw, PRECISION_MULTIPLIER)
        if fraction == 0:
            return hash(integer)
        return hash((self._raw, PRECISION))

    def __reduce__(self):
        return (Dec.from_raw, (self._raw,))


# =============================================================================
# РАЗБОР ЛИТЕРАЛА
# =============================================================================


def _parse_raw(text: str) -> int:
    """
    Литерал → масштабированное целое (без проверки диапазона).

    Raises:
        ParseError: нарушение грамматики
        PrecisionExceeded: больше PRECISION дробных разрядов
        Overflow: заведомо слишком длинная целая часть
    """
    if not text:
        raise ParseError("decimal string cannot be empty")

    match = _DEC_PATTERN.fullmatch(text)
    if match is None:
        raise ParseError(f"invalid decimal string: {text!r}")

    sign, integer_part, fraction_part = match.groups()
    fraction_part = fraction_part or ""

    if len(fraction_part) > PRECISION:
        raise PrecisionExceeded(
            f"value {text!r} exceeds max precision by {len(fraction_part) - PRECISION} decimal places: "
            f"max precision {PRECISION}"
        )

    # Оценка длины до int(): защита от гигантских литералов
    if len(integer_part.lstrip("0")) + PRECISION > MAX_DIGITS:
        raise Overflow(f"decimal string out of range: {len(integer_part)} integer digits")

    # Ведущие нули отбрасываются до int(): результат не зависит от лимита длины строки
    raw = int((integer_part.lstrip("0") or "0") + fraction_part.ljust(PRECISION, "0"))
    return -raw if sign else raw


# =============================================================================
# ВСПОМОГАТЕЛЬНОЕ
# =============================================================================


def _is_operand(value) -> bool:
    return isinstance(value, Dec) or (isinstance(value, int) and not isinstance(value, bool))


def _lift(value: DecLike) -> Dec:
    if isinstance(value, Dec):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Dec.from_int(value)
    raise TypeError(f"unsupported operand type: {type(value).__name__}")


def _raw_of(value: DecLike) -> int:
    if isinstance(value, Dec):
        return value._raw
    return value * PRECISION_MULTIPLIER


def _check_uint(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def _check_big_int(value: Int) -> int:
    if not isinstance(value, Int):
        raise TypeError(f"expected Int, got {type(value).__name__}")
    return value.big_int()


def _check_int64(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int, got {type(value).__name__}")
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise Overflow(f"int64 operand out of bound: {value}")
    return value


def _coerce(value) -> Dec:
    """Валидатор pydantic: Dec | str | int → Dec."""
    if isinstance(value, Dec):
        return value
    if isinstance(value, str):
        return Dec.from_str(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return Dec.from_int(value)
    raise ValueError(f"Dec expects a decimal string, got {type(value).__name__}")


def _represent_dec(dumper: yaml.SafeDumper, data: Dec) -> yaml.ScalarNode:
    return dumper.represent_scalar("tag:yaml.org,2002:str", str(data), style='"')


yaml.add_representer(Dec, _represent_dec, Dumper=yaml.SafeDumper)


# =============================================================================
# ФУНКЦИИ НАД НАБОРАМИ
# =============================================================================


def decs_equal(left: Iterable[Dec], right: Iterable[Dec]) -> bool:
    """Поэлементное равенство последовательностей (порядок важен)."""
    left_list = list(left)
    right_list = list(right)
    if len(left_list) != len(right_list):
        return False
    return all(a.equal(b) for a, b in zip(left_list, right_list))


def min_dec(first: Dec, second: Dec) -> Dec:
    return first if first.lt(second) else second


def max_dec(first: Dec, second: Dec) -> Dec:
    return first if first.gt(second) else second

