"""
KV Store — упорядоченное байтовое хранилище ключ/значение

Ключи сравниваются лексикографически как байты; итераторы обходят
полуинтервал [start, end). Сортируемое представление Dec
(src/core/math/sortable.py) даёт ключи, порядок которых совпадает
с числовым порядком значений.
"""

import bisect
import logging
from typing import Callable, Iterator, Optional, Protocol, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


# =============================================================================
# ПРОТОКОЛ
# =============================================================================


class KVStore(Protocol):
    """Минимальный интерфейс упорядоченного хранилища."""

    def get(self, key: bytes) -> Optional[bytes]: ...

    def has(self, key: bytes) -> bool: ...

    def set(self, key: bytes, value: bytes) -> None: ...

    def delete(self, key: bytes) -> None: ...

    def iterator(
        self, start: Optional[bytes], end: Optional[bytes]
    ) -> Iterator[tuple[bytes, bytes]]: ...

    def reverse_iterator(
        self, start: Optional[bytes], end: Optional[bytes]
    ) -> Iterator[tuple[bytes, bytes]]: ...


# =============================================================================
# IN-MEMORY РЕАЛИЗАЦИЯ
# =============================================================================


class MemoryKVStore:
    """
    Хранилище в памяти с отсортированным списком ключей.

    Значения копируются при записи, итераторы работают по снимку ключей,
    поэтому запись во время обхода безопасна.
    """

    def __init__(self):
        self._keys: list[bytes] = []
        self._data: dict[bytes, bytes] = {}

    def __len__(self) -> int:
        return len(self._keys)

    def get(self, key: bytes) -> Optional[bytes]:
        _check_key(key)
        return self._data.get(bytes(key))

    def has(self, key: bytes) -> bool:
        _check_key(key)
        return bytes(key) in self._data

    def set(self, key: bytes, value: bytes) -> None:
        """
        Запись значения.

        Raises:
            ValueError: пустой ключ или value=None
        """
        _check_key(key)
        if value is None:
            raise ValueError("value is nil")
        key = bytes(key)
        if key not in self._data:
            bisect.insort(self._keys, key)
        self._data[key] = bytes(value)
        logger.debug("set %r (%d bytes)", key, len(value))

    def delete(self, key: bytes) -> None:
        _check_key(key)
        key = bytes(key)
        if key not in self._data:
            return
        del self._data[key]
        del self._keys[bisect.bisect_left(self._keys, key)]
        logger.debug("delete %r", key)

    def iterator(
        self, start: Optional[bytes] = None, end: Optional[bytes] = None
    ) -> Iterator[tuple[bytes, bytes]]:
        """Обход [start, end) по возрастанию ключей (None = без границы)."""
        for key in self._range(start, end):
            value = self._data.get(key)
            if value is not None:
                yield key, value

    def reverse_iterator(
        self, start: Optional[bytes] = None, end: Optional[bytes] = None
    ) -> Iterator[tuple[bytes, bytes]]:
        """Обход [start, end) по убыванию ключей."""
        for key in reversed(self._range(start, end)):
            value = self._data.get(key)
            if value is not None:
                yield key, value

    def _range(self, start: Optional[bytes], end: Optional[bytes]) -> list[bytes]:
        lo = 0 if start is None else bisect.bisect_left(self._keys, start)
        hi = len(self._keys) if end is None else bisect.bisect_left(self._keys, end)
        return self._keys[lo:hi]


def _check_key(key: bytes) -> None:
    if not key:
        raise ValueError("key is empty")


# =============================================================================
# STORE API
# =============================================================================


class StoreAPI:
    """
    Обёртка над KVStore с префиксом пространства ключей.

    Все ключи хранятся как prefix + key; итераторы возвращают ключи
    без префикса.
    """

    def __init__(self, store: KVStore, prefix: bytes = b""):
        self.store = store
        self.prefix = bytes(prefix)

    def get(self, key: bytes) -> Optional[bytes]:
        return self.store.get(self.prefix + key)

    def has(self, key: bytes) -> bool:
        return self.store.has(self.prefix + key)

    def set(self, key: bytes, value: bytes) -> None:
        self.store.set(self.prefix + key, value)

    def delete(self, key: bytes) -> None:
        self.store.delete(self.prefix + key)

    def iterator(
        self, start: Optional[bytes] = None, end: Optional[bytes] = None
    ) -> Iterator[tuple[bytes, bytes]]:
        lo, hi = self._bounds(start, end)
        for key, value in self.store.iterator(lo, hi):
            yield key[len(self.prefix):], value

    def reverse_iterator(
        self, start: Optional[bytes] = None, end: Optional[bytes] = None
    ) -> Iterator[tuple[bytes, bytes]]:
        lo, hi = self._bounds(start, end)
        for key, value in self.store.reverse_iterator(lo, hi):
            yield key[len(self.prefix):], value

    def _bounds(
        self, start: Optional[bytes], end: Optional[bytes]
    ) -> tuple[Optional[bytes], Optional[bytes]]:
        lo = self.prefix + start if start is not None else (self.prefix or None)
        if end is not None:
            hi = self.prefix + end
        else:
            hi = prefix_end(self.prefix)
        return lo, hi


def prefix_end(prefix: bytes) -> Optional[bytes]:
    """
    Наименьший ключ, больший всех ключей с данным префиксом.

    Returns:
        Граница или None, если префикс пуст либо состоит из 0xFF
    """
    end = bytearray(prefix)
    while end:
        if end[-1] != 0xFF:
            end[-1] += 1
            return bytes(end)
        end.pop()
    return None


def get_and_decode(
    store: KVStore, decode: Callable[[bytes], T], key: bytes
) -> Optional[T]:
    """
    Чтение и декодирование значения.

    Returns:
        Декодированное значение или None, если ключ отсутствует

    Raises:
        Ошибки decode пробрасываются без изменений
    """
    raw = store.get(key)
    if raw is None:
        return None
    return decode(raw)
