"""Store — упорядоченное KV-хранилище и индексы поверх сортируемых ключей Dec."""

from .kv import KVStore, MemoryKVStore, StoreAPI, get_and_decode, prefix_end
from .ranking import DecRankIndex

__all__ = [
    "KVStore",
    "MemoryKVStore",
    "StoreAPI",
    "get_and_decode",
    "prefix_end",
    "DecRankIndex",
]
