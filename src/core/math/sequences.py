"""
Sequences — обобщённые функции высшего порядка над последовательностями

Используются слоем трансляции событий в операции.
Порядок результата всегда совпадает с порядком входа (детерминизм).
"""

from typing import Callable, Iterable, Optional, Sequence, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def filter_items(source: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    """Элементы, удовлетворяющие предикату."""
    return [item for item in source if predicate(item)]


def filter_index(source: Iterable[T], predicate: Callable[[T], bool]) -> list[int]:
    """Индексы элементов, удовлетворяющих предикату."""
    return [i for i, item in enumerate(source) if predicate(item)]


def map_items(source: Iterable[T], func: Callable[[T], R]) -> list[R]:
    return [func(item) for item in source]


def first_match(source: Iterable[T], predicate: Callable[[T], bool]) -> Optional[T]:
    """
    Первый элемент, удовлетворяющий предикату.

    Returns:
        Элемент или None, если совпадений нет
    """
    for item in source:
        if predicate(item):
            return item
    return None


def contains(source: Sequence[T], value: T) -> bool:
    return value in source


def all_of(*predicates: Callable[[T], bool]) -> Callable[[T], bool]:
    """
    Конъюнкция предикатов.

    Пустой набор предикатов даёт предикат, истинный для любого элемента.
    """

    def combined(item: T) -> bool:
        return all(predicate(item) for predicate in predicates)

    return combined
