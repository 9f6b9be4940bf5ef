"""
Тесты для Event Translation — события исполнения → операции баланса

Проверяемые инварианты:
1. coin_spent → отрицательные суммы, coin_received → положительные
2. Порядок: события, затем атрибуты, затем монеты по деноминации
3. Комиссия: fee_payer (списание) + fee_receiver (fee_collector)
4. Нумерация операций и связи related_operations
5. Некорректные пары атрибутов → ValueError
"""

import logging

import pytest

from src.core.contracts import ContractViolation, OperationValidator
from src.core.domain import (
    FEE_COLLECTOR,
    FEE_PAYER_OPERATION,
    FEE_RECEIVER_OPERATION,
    STATUS_TX_REVERTED,
    STATUS_TX_SUCCESS,
    Event,
    Operation,
)
from src.core.math import Dec
from src.ledger import (
    OperationConverter,
    add_operation_indexes,
    balance_change_operations,
    fee_operations,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def transfer_events() -> list[Event]:
    """Перевод addr1 → addr2 двух деноминаций с комиссией."""
    return [
        Event.of("tx", ("fee", "100uatom"), ("fee_payer", "addr1")),
        Event.of("message", ("action", "/cosmos.bank.v1beta1.MsgSend")),
        Event.of("coin_spent", ("spender", "addr1"), ("amount", "10uatom,5stake")),
        Event.of("coin_received", ("receiver", "addr2"), ("amount", "10uatom,5stake")),
    ]


def summary(operations: list[Operation]) -> list[tuple]:
    return [(op.type, op.account, str(op.amount), op.denom) for op in operations]


# =============================================================================
# BALANCE CHANGE
# =============================================================================


class TestBalanceChangeOperations:
    """Тесты balance_change_operations"""

    def test_transfer(self, transfer_events):
        """Перевод двух деноминаций."""
        ops = balance_change_operations(transfer_events)
        assert summary(ops) == [
            ("coin_spent", "addr1", "-5.000000000000000000", "stake"),
            ("coin_spent", "addr1", "-10.000000000000000000", "uatom"),
            ("coin_received", "addr2", "5.000000000000000000", "stake"),
            ("coin_received", "addr2", "10.000000000000000000", "uatom"),
        ]
        assert all(op.status == STATUS_TX_SUCCESS for op in ops)

    def test_multiple_pairs_in_one_event(self):
        """Несколько пар в одном событии."""
        event = Event.of(
            "coin_received",
            ("receiver", "addr2"), ("amount", "1uatom"),
            ("receiver", "addr3"), ("amount", "2.5uatom"),
        )
        assert summary(balance_change_operations([event])) == [
            ("coin_received", "addr2", "1.000000000000000000", "uatom"),
            ("coin_received", "addr3", "2.500000000000000000", "uatom"),
        ]

    def test_status_propagated(self, transfer_events):
        """Статус переносится в операции."""
        ops = balance_change_operations(transfer_events, STATUS_TX_REVERTED)
        assert {op.status for op in ops} == {STATUS_TX_REVERTED}

    def test_other_events_ignored(self):
        """Прочие события игнорируются."""
        assert balance_change_operations([Event.of("message", ("module", "bank"))]) == []

    def test_odd_attributes(self):
        """Нечётное число атрибутов → ValueError."""
        event = Event.of("coin_spent", ("spender", "addr1"))
        with pytest.raises(ValueError, match="odd number"):
            balance_change_operations([event])

    def test_wrong_pair_keys(self):
        """Неверные ключи пары → ValueError."""
        event = Event.of("coin_spent", ("receiver", "addr1"), ("amount", "1uatom"))
        with pytest.raises(ValueError, match="expects"):
            balance_change_operations([event])

    def test_sum_is_zero_for_transfer(self, transfer_events):
        """Перевод сохраняет баланс по каждой деноминации."""
        totals = {}
        for op in balance_change_operations(transfer_events):
            totals[op.denom] = totals.get(op.denom, Dec.zero()) + op.amount
        assert all(total.is_zero() for total in totals.values())


# =============================================================================
# FEES
# =============================================================================


class TestFeeOperations:
    """Тесты fee_operations"""

    def test_fee(self, transfer_events):
        """Списание с плательщика и зачисление сборщику."""
        ops = fee_operations(transfer_events)
        assert summary(ops) == [
            (FEE_PAYER_OPERATION, "addr1", "-100.000000000000000000", "uatom"),
            (FEE_RECEIVER_OPERATION, FEE_COLLECTOR, "100.000000000000000000", "uatom"),
        ]

    def test_multi_denom_fee(self):
        """Комиссия в нескольких деноминациях."""
        event = Event.of("tx", ("fee", "3uatom,1stake"), ("fee_payer", "addr9"))
        ops = fee_operations([event])
        assert [(op.type, op.denom) for op in ops] == [
            (FEE_PAYER_OPERATION, "stake"),
            (FEE_RECEIVER_OPERATION, "stake"),
            (FEE_PAYER_OPERATION, "uatom"),
            (FEE_RECEIVER_OPERATION, "uatom"),
        ]

    def test_tx_event_with_extra_attributes_ignored(self):
        """Событие tx с лишними атрибутами не считается комиссией."""
        event = Event.of("tx", ("fee", "1uatom"), ("fee_payer", "addr1"), ("acc_seq", "addr1/1"))
        assert fee_operations([event]) == []

    def test_fee_attribute_order_matters(self):
        """Атрибуты tx в обратном порядке не считаются событием комиссии."""
        event = Event.of("tx", ("fee_payer", "addr1"), ("fee", "1uatom"))
        assert fee_operations([event]) == []

    def test_no_fee_event(self, caplog):
        """Без события комиссии пишется debug-сообщение."""
        with caplog.at_level(logging.DEBUG, logger="src.ledger.translation"):
            assert fee_operations([]) == []
        assert "no fee event" in caplog.text

    def test_custom_fee_collector(self, transfer_events):
        """Адрес сборщика задаётся в конструкторе."""
        ops = OperationConverter(fee_collector="collector").fee_operations(transfer_events)
        assert ops[1].account == "collector"


# =============================================================================
# INDEXES / CONVERT
# =============================================================================


class TestAddOperationIndexes:
    """Тесты add_operation_indexes"""

    def test_sequential(self, transfer_events):
        """Индексы идут подряд с нуля."""
        ops = add_operation_indexes(balance_change_operations(transfer_events))
        assert [op.index for op in ops] == [0, 1, 2, 3]

    def test_related_operations_extended(self):
        """related_operations получает индекс предыдущей операции."""
        first = Operation(type="a", status="Success", account="x", amount=1, denom="uatom")
        second = first.model_copy(update={"related_operations": ()})
        indexed = add_operation_indexes([first, second])
        assert indexed[0].related_operations is None
        assert indexed[1].related_operations == (0,)

    def test_inputs_unchanged(self):
        """Входные операции не изменяются."""
        op = Operation(type="a", status="Success", account="x", amount=1, denom="uatom")
        add_operation_indexes([op])
        assert op.index is None


class TestOperationConverter:
    """Тесты полной трансляции транзакции"""

    def test_success(self, transfer_events):
        """Успешная транзакция: комиссия, затем балансовые операции."""
        result = OperationConverter().convert(transfer_events)
        assert len(result.fee_operations) == 2
        assert len(result.balance_operations) == 4
        assert [op.index for op in result.operations] == list(range(6))
        assert result.operations[0].type == FEE_PAYER_OPERATION

    def test_reverted_keeps_only_fee(self, transfer_events):
        """Отменённая транзакция: только комиссия."""
        result = OperationConverter().convert(transfer_events, STATUS_TX_REVERTED)
        assert result.balance_operations == ()
        assert [op.type for op in result.operations] == [FEE_PAYER_OPERATION, FEE_RECEIVER_OPERATION]

    def test_totals_balance(self, transfer_events):
        """Перевод сохраняет сумму по деноминациям."""
        totals = OperationConverter().convert(transfer_events).total_by_denom()
        assert totals == {"uatom": Dec(0), "stake": Dec(0)}

    def test_debit_indexes(self, transfer_events):
        """Индексы списаний: fee_payer и два coin_spent."""
        assert OperationConverter().convert(transfer_events).debit_indexes() == [0, 2, 3]

    def test_contract_check_passes(self, transfer_events):
        """С контрактом корректная транзакция транслируется без изменений."""
        checked = OperationConverter(contract=OperationValidator()).convert(transfer_events)
        assert checked == OperationConverter().convert(transfer_events)

    def test_contract_check_rejects_malformed_account(self):
        """Адрес с пробелом допустим моделью, но нарушает контракт операции."""
        events = [
            Event.of("coin_spent", ("spender", "addr 1"), ("amount", "1uatom")),
            Event.of("coin_received", ("receiver", "addr2"), ("amount", "1uatom")),
        ]
        assert len(OperationConverter().convert(events).operations) == 2

        with pytest.raises(ContractViolation) as exc_info:
            OperationConverter(contract=OperationValidator()).convert(events)
        assert len(exc_info.value.errors) == 1
        assert exc_info.value.errors[0].startswith("0/account: 'addr 1'")
