"""Event Translation — события исполнения → стандартизованные операции баланса.

Слой трансляции потребляет Dec-суммы из событий и выдаёт список
типизированных записей Operation:
- coin_spent (пары spender/amount) → отрицательные операции
- coin_received (пары receiver/amount) → положительные операции
- tx (fee, fee_payer) → fee_payer (списание) + fee_receiver (зачисление
  на модульный аккаунт fee_collector)

Порядок операций детерминирован: порядок событий, затем порядок атрибутов,
затем порядок монет после нормализации.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from src.core.domain.accounts import FEE_COLLECTOR
from src.core.domain.coin import Coin, parse_coins
from src.core.domain.operation import (
    ATTRIBUTE_KEY_AMOUNT,
    ATTRIBUTE_KEY_FEE,
    ATTRIBUTE_KEY_FEE_PAYER,
    ATTRIBUTE_KEY_RECEIVER,
    ATTRIBUTE_KEY_SPENDER,
    EVENT_TYPE_COIN_RECEIVED,
    EVENT_TYPE_COIN_SPENT,
    EVENT_TYPE_TX,
    FEE_PAYER_OPERATION,
    FEE_RECEIVER_OPERATION,
    STATUS_TX_SUCCESS,
    Event,
    Operation,
    OperationStatus,
)
from src.core.contracts import ContractValidator
from src.core.math import all_of, contains, filter_index, filter_items, first_match, map_items

logger = logging.getLogger(__name__)

# Ключ адреса в паре атрибутов для каждого балансового события
_ACCOUNT_KEYS = {
    EVENT_TYPE_COIN_SPENT: ATTRIBUTE_KEY_SPENDER,
    EVENT_TYPE_COIN_RECEIVED: ATTRIBUTE_KEY_RECEIVER,
}
_BALANCE_EVENT_TYPES = tuple(_ACCOUNT_KEYS)


@dataclass(frozen=True)
class TransactionOperations:
    """Результат трансляции одной транзакции."""

    fee_operations: tuple[Operation, ...]
    balance_operations: tuple[Operation, ...]

    # Все операции с индексами (fee, затем балансовые)
    operations: tuple[Operation, ...]

    def total_by_denom(self) -> dict:
        """Сумма знаковых изменений по деноминациям (для сверки баланса)."""
        totals: dict = {}
        for op in self.operations:
            totals[op.denom] = totals[op.denom].add(op.amount) if op.denom in totals else op.amount
        return totals

    def debit_indexes(self) -> list[int]:
        """Индексы операций списания."""
        return filter_index(self.operations, Operation.is_debit)


class OperationConverter:
    """Конвертер событий в операции.

    Stateless: один экземпляр можно переиспользовать для любых транзакций.
    """

    def __init__(self, fee_collector: str = FEE_COLLECTOR, contract: Optional[ContractValidator] = None):
        """
        Args:
            fee_collector: адрес получателя комиссий
            contract: если задан, convert сверяет JSON-форму каждой операции
                с контрактом (например, OperationValidator())
        """
        self.fee_collector = fee_collector
        self.contract = contract

    def coin_operations(
        self,
        coins: Iterable[Coin],
        is_sub: bool,
        account: str,
        operation_type: str,
        status: OperationStatus = STATUS_TX_SUCCESS,
    ) -> list[Operation]:
        """Операции для набора монет одного аккаунта.

        Args:
            coins: монеты (неотрицательные суммы)
            is_sub: True для списания (сумма со знаком минус)
            account: адрес аккаунта
            operation_type: тип операции
            status: статус операции

        Returns:
            Операция на каждую монету
        """
        operations = []
        for coin in coins:
            amount = coin.amount.neg() if is_sub else coin.amount
            operations.append(
                Operation(
                    type=operation_type,
                    status=status,
                    account=account,
                    amount=amount,
                    denom=coin.denom,
                )
            )
        return operations

    def balance_change_operations(
        self,
        events: Sequence[Event],
        status: OperationStatus = STATUS_TX_SUCCESS,
    ) -> list[Operation]:
        """Операции из событий coin_spent / coin_received.

        Прочие события игнорируются.

        Raises:
            ValueError: если атрибуты события не образуют пары (адрес, amount)
        """
        operations: list[Operation] = []
        for event in filter_items(events, lambda e: contains(_BALANCE_EVENT_TYPES, e.type)):
            account_key = _ACCOUNT_KEYS[event.type]
            attributes = event.attributes
            if len(attributes) % 2 != 0:
                raise ValueError(
                    f"{event.type} event has odd number of attributes: {len(attributes)}"
                )

            for i in range(0, len(attributes), 2):
                account_attr, amount_attr = attributes[i], attributes[i + 1]
                if account_attr.key != account_key or amount_attr.key != ATTRIBUTE_KEY_AMOUNT:
                    raise ValueError(
                        f"{event.type} event expects ({account_key}, {ATTRIBUTE_KEY_AMOUNT}) pairs, "
                        f"got ({account_attr.key}, {amount_attr.key})"
                    )
                operations.extend(
                    self.coin_operations(
                        parse_coins(amount_attr.value),
                        is_sub=event.type == EVENT_TYPE_COIN_SPENT,
                        account=account_attr.value,
                        operation_type=event.type,
                        status=status,
                    )
                )

        logger.debug("balance change: %d events -> %d operations", len(events), len(operations))
        return operations

    def fee_operations(self, events: Sequence[Event]) -> list[Operation]:
        """Операции списания комиссии с плательщика и зачисления сборщику.

        Ищется первое событие tx ровно с атрибутами (fee, fee_payer).
        Без такого события возвращается пустой список.
        """
        fee_event = first_match(events, _is_fee_event)
        if fee_event is None:
            logger.debug("no fee event among %d events", len(events))
            return []

        fee_attr, payer_attr = fee_event.attributes
        operations: list[Operation] = []
        for fee in parse_coins(fee_attr.value):
            operations.append(
                Operation(
                    type=FEE_PAYER_OPERATION,
                    status=STATUS_TX_SUCCESS,
                    account=payer_attr.value,
                    amount=fee.amount.neg(),
                    denom=fee.denom,
                )
            )
            operations.append(
                Operation(
                    type=FEE_RECEIVER_OPERATION,
                    status=STATUS_TX_SUCCESS,
                    account=self.fee_collector,
                    amount=fee.amount,
                    denom=fee.denom,
                )
            )
        return operations

    def convert(
        self,
        events: Sequence[Event],
        status: OperationStatus = STATUS_TX_SUCCESS,
    ) -> TransactionOperations:
        """Полная трансляция транзакции.

        Для неуспешной транзакции балансовые события не обрабатываются:
        остаются только операции комиссии.

        Raises:
            ContractViolation: операции не проходят контракт (если он задан)
        """
        fee_ops = tuple(self.fee_operations(events))
        if status == STATUS_TX_SUCCESS:
            balance_ops = tuple(self.balance_change_operations(events, status))
        else:
            balance_ops = ()

        operations = tuple(add_operation_indexes(fee_ops + balance_ops))
        if self.contract is not None:
            self.contract.validate_models(operations)

        return TransactionOperations(
            fee_operations=fee_ops,
            balance_operations=balance_ops,
            operations=operations,
        )


def add_operation_indexes(operations: Iterable[Operation]) -> list[Operation]:
    """Последовательная нумерация операций.

    Операции с непустым (включая пустой кортеж) related_operations получают
    в него индекс предыдущей операции.
    """
    indexed = []
    for index, op in enumerate(operations):
        update: dict = {"index": index}
        related: Optional[tuple[int, ...]] = op.related_operations
        if related is not None:
            update["related_operations"] = related + (index - 1,)
        indexed.append(op.model_copy(update=update))
    return indexed


_FEE_ATTRIBUTE_KEYS = [ATTRIBUTE_KEY_FEE, ATTRIBUTE_KEY_FEE_PAYER]

# Событие tx ровно с атрибутами (fee, fee_payer) в этом порядке
_is_fee_event = all_of(
    lambda event: event.type == EVENT_TYPE_TX,
    lambda event: map_items(event.attributes, lambda attr: attr.key) == _FEE_ATTRIBUTE_KEYS,
)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def balance_change_operations(
    events: Sequence[Event],
    status: OperationStatus = STATUS_TX_SUCCESS,
) -> list[Operation]:
    """Операции из событий coin_spent / coin_received (сборщик комиссий по умолчанию)."""
    return OperationConverter().balance_change_operations(events, status)


def fee_operations(events: Sequence[Event]) -> list[Operation]:
    """Операции комиссии из события tx (сборщик комиссий по умолчанию)."""
    return OperationConverter().fee_operations(events)
