"""
Dec Rank Index — упорядоченный по значению индекс владельцев

Ключ индекса: prefix + b"r" + sortable_dec_bytes(value) + b"/" + owner
Значение владельца: prefix + b"o" + owner → Dec.marshal()

Побайтовый порядок ключей индекса совпадает с числовым порядком значений,
при равных значениях — с порядком владельцев. Символ '/' не встречается
в сортируемом представлении, поэтому разделитель однозначен.
"""

import logging
from typing import Final, Iterator, Optional

from src.core.math import Dec, parse_sortable_dec_bytes, sortable_dec_bytes
from src.store.kv import KVStore, StoreAPI, get_and_decode

logger = logging.getLogger(__name__)

RANK_SUBPREFIX: Final[bytes] = b"r"
OWNER_SUBPREFIX: Final[bytes] = b"o"
SEPARATOR: Final[bytes] = b"/"


class DecRankIndex:
    """
    Индекс владелец → Dec с обходом по возрастанию и убыванию значения.

    Значения ограничены диапазоном сортируемого кодирования (|value| <= 10^18);
    при выходе за него set() поднимает Overflow и индекс не изменяется.
    """

    def __init__(self, store: KVStore, prefix: bytes = b""):
        self.ranks = StoreAPI(store, prefix + RANK_SUBPREFIX)
        self.owners = StoreAPI(store, prefix + OWNER_SUBPREFIX)

    def __len__(self) -> int:
        return sum(1 for _ in self.owners.iterator())

    def get(self, owner: str) -> Optional[Dec]:
        return get_and_decode(self.owners, Dec.unmarshal, _owner_key(owner))

    def set(self, owner: str, value: Dec) -> None:
        """
        Установка значения владельца с перестроением ключа индекса.

        Raises:
            Overflow: значение вне диапазона сортируемого кодирования
        """
        new_key = _rank_key(value, owner)
        previous = self.get(owner)
        if previous is not None:
            self.ranks.delete(_rank_key(previous, owner))
        self.ranks.set(new_key, b"")
        self.owners.set(_owner_key(owner), value.marshal())
        logger.debug("rank set owner=%s value=%s previous=%s", owner, value, previous)

    def remove(self, owner: str) -> bool:
        """
        Удаление владельца.

        Returns:
            True, если владелец присутствовал
        """
        previous = self.get(owner)
        if previous is None:
            return False
        self.ranks.delete(_rank_key(previous, owner))
        self.owners.delete(_owner_key(owner))
        logger.debug("rank remove owner=%s value=%s", owner, previous)
        return True

    def ascending(self) -> Iterator[tuple[str, Dec]]:
        for key, _ in self.ranks.iterator():
            yield _split_rank_key(key)

    def descending(self) -> Iterator[tuple[str, Dec]]:
        for key, _ in self.ranks.reverse_iterator():
            yield _split_rank_key(key)

    def top(self, n: int) -> list[tuple[str, Dec]]:
        """n владельцев с наибольшими значениями (по убыванию)."""
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        result = []
        for entry in self.descending():
            if len(result) >= n:
                break
            result.append(entry)
        return result


def _owner_key(owner: str) -> bytes:
    if not owner:
        raise ValueError("owner cannot be empty")
    return owner.encode("utf-8")


def _rank_key(value: Dec, owner: str) -> bytes:
    return sortable_dec_bytes(value) + SEPARATOR + _owner_key(owner)


def _split_rank_key(key: bytes) -> tuple[str, Dec]:
    encoded, owner = key.split(SEPARATOR, 1)
    return owner.decode("utf-8"), parse_sortable_dec_bytes(encoded)
