"""
Sortable Dec Bytes — ключи фиксированной ширины с лексикографическим порядком

Кодирование Dec в байты, у которых беззнаковый побайтовый порядок совпадает
с числовым. Используется как ключ упорядоченного KV-хранилища
(range-запросы, ранжирование по стейку).

ФОРМАТ (ширина целой части 18, дробной 18):
    неотрицательные:  IIIIIIIIIIIIIIIIII.FFFFFFFFFFFFFFFFFF
    отрицательные:    '-' + дополнение до 9 каждой цифры модуля
    +10^18:           b"max"
    -10^18:           b"--"

Порядок байт: '-' (0x2D) < '0'..'9' (0x30..0x39) < 'm' (0x6D).
Дополнение до 9 обращает порядок внутри отрицательных: больший модуль →
меньшие цифры → более ранняя позиция.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. d1 < d2 ⇔ sortable_dec_bytes(d1) < sortable_dec_bytes(d2)
2. |value| > 10^18 → Overflow (без усечения)
3. parse_sortable_dec_bytes(sortable_dec_bytes(d)) == d
"""

import re
from typing import Final

from src.core.math.dec import PRECISION, PRECISION_MULTIPLIER, Dec
from src.core.math.errors import Overflow, ParseError

# =============================================================================
# ПАРАМЕТРЫ КОДИРОВАНИЯ
# =============================================================================

# Ширина целой части (цифр)
SORTABLE_INTEGER_WIDTH: Final[int] = 18

# Ширина дробной части (цифр)
SORTABLE_FRACTION_WIDTH: Final[int] = PRECISION

# Предельный модуль raw: значение 10^18
SORTABLE_LIMIT_RAW: Final[int] = 10**SORTABLE_INTEGER_WIDTH * PRECISION_MULTIPLIER

SORTABLE_MAX: Final[bytes] = b"max"
SORTABLE_MIN: Final[bytes] = b"--"

_COMPLEMENT: Final[dict] = str.maketrans("0123456789", "9876543210")
_BODY_PATTERN: Final[re.Pattern[str]] = re.compile(
    rf"[0-9]{{{SORTABLE_INTEGER_WIDTH}}}\.[0-9]{{{SORTABLE_FRACTION_WIDTH}}}"
)


# =============================================================================
# КОДИРОВАНИЕ
# =============================================================================


def sortable_dec_bytes(dec: Dec) -> bytes:
    """
    Dec → байты фиксированной ширины с сохранением порядка.

    Args:
        dec: Значение с |dec| <= 10^18

    Returns:
        Байтовый ключ

    Raises:
        Overflow: если |dec| > 10^18

    Examples:
        >>> sortable_dec_bytes(Dec(1))
        b'000000000000000001.000000000000000000'
        >>> sortable_dec_bytes(Dec(-1))
        b'-999999999999999998.999999999999999999'
    """
    raw = dec.raw
    if raw == SORTABLE_LIMIT_RAW:
        return SORTABLE_MAX
    if raw == -SORTABLE_LIMIT_RAW:
        return SORTABLE_MIN
    if abs(raw) > SORTABLE_LIMIT_RAW:
        raise Overflow(
            f"decimal out of range for sortable encoding: {dec}; "
            f"max magnitude is 10^{SORTABLE_INTEGER_WIDTH}"
        )

    integer, fraction = divmod(abs(raw), PRECISION_MULTIPLIER)
    body = f"{integer:0{SORTABLE_INTEGER_WIDTH}d}.{fraction:0{SORTABLE_FRACTION_WIDTH}d}"
    if raw < 0:
        return b"-" + body.translate(_COMPLEMENT).encode("ascii")
    return body.encode("ascii")


# =============================================================================
# ДЕКОДИРОВАНИЕ
# =============================================================================


def parse_sortable_dec_bytes(data: bytes) -> Dec:
    """
    Обратное преобразование sortable_dec_bytes.

    Raises:
        ParseError: если байты не являются корректным ключом
    """
    data = bytes(data)
    if data == SORTABLE_MAX:
        return Dec.from_raw(SORTABLE_LIMIT_RAW)
    if data == SORTABLE_MIN:
        return Dec.from_raw(-SORTABLE_LIMIT_RAW)

    try:
        text = data.decode("ascii")
    except UnicodeDecodeError as e:
        raise ParseError(f"invalid sortable decimal bytes: {e}") from e

    negative = text.startswith("-")
    body = text[1:] if negative else text
    if not _BODY_PATTERN.fullmatch(body):
        raise ParseError(f"invalid sortable decimal bytes: {data!r}")

    if negative:
        body = body.translate(_COMPLEMENT)
    raw = int(body.replace(".", ""))

    if negative:
        if raw == 0:
            raise ParseError("negative zero is not a valid sortable decimal")
        raw = -raw
    return Dec.from_raw(raw)
