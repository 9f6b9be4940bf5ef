"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema контрактов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов и pattern (суммы — канонические строки Dec)
- Все ошибки собираются в ContractViolation в детерминированном порядке
- Интеграция с Pydantic моделями и трансляцией операций
"""

import json

import pytest

from src.core.contracts import (
    DEFAULT_SCHEMA_DIR,
    CoinValidator,
    ContractValidator,
    ContractViolation,
    OperationValidator,
    SchemaLoader,
    default_loader,
    validate_coin,
    validate_operation,
)
from src.core.domain import Coin, Event, Operation, parse_coins
from src.ledger import OperationConverter


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_operation():
    """Валидная operation для тестирования."""
    return {
        "index": 0,
        "related_operations": None,
        "type": "fee_payer",
        "status": "Success",
        "account": "addr1",
        "amount": "-100.000000000000000000",
        "denom": "uatom",
    }


@pytest.fixture
def valid_coin():
    """Валидная монета для тестирования."""
    return {"denom": "uatom", "amount": "2.500000000000000000"}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_load_all_schemas(self):
        """Пакетные схемы загружаются и объявляют Draft 2020-12."""
        loader = SchemaLoader()
        assert loader.schema_dir == DEFAULT_SCHEMA_DIR
        for name in ("operation", "coin"):
            schema = loader.load_schema(name)
            assert schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"

    def test_cache(self):
        """Повторная загрузка возвращает тот же объект."""
        loader = SchemaLoader()
        assert loader.load_schema("coin") is loader.load_schema("coin")

    def test_default_loader_shared(self):
        """default_loader создаётся один раз."""
        assert default_loader() is default_loader()

    def test_missing_schema(self):
        """Неизвестное имя схемы → FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path):
        """Несуществующий каталог → RuntimeError."""
        with pytest.raises(RuntimeError):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema(self, tmp_path):
        """Схема, не проходящая meta-валидацию → ValueError."""
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")

    def test_custom_directory(self, tmp_path):
        """Валидатор можно построить на схеме из произвольного каталога."""
        schema = {"$schema": "https://json-schema.org/draft/2020-12/schema", "type": "string"}
        (tmp_path / "text.json").write_text(json.dumps(schema), encoding="utf-8")
        contract = ContractValidator("text", SchemaLoader(tmp_path))
        assert contract.is_valid("abc")
        assert not contract.is_valid(1)


# =============================================================================
# OPERATION CONTRACT
# =============================================================================


class TestOperationContract:
    """Тесты operation.json"""

    def test_valid(self, valid_operation):
        """Корректная операция проходит контракт."""
        validate_operation(valid_operation)
        assert OperationValidator().is_valid(valid_operation)

    def test_missing_required(self, valid_operation):
        """Отсутствующее обязательное поле называется в сообщении."""
        del valid_operation["amount"]
        with pytest.raises(ContractViolation, match="'amount' is a required property"):
            validate_operation(valid_operation)

    @pytest.mark.parametrize("amount", ["1.5", "1", 1.5, 100, "1e3", "-0.0000000000000000001"])
    def test_non_canonical_amount(self, valid_operation, amount):
        """Сумма — только каноническая строка с 18 дробными разрядами."""
        valid_operation["amount"] = amount
        assert not OperationValidator().is_valid(valid_operation)

    def test_unknown_status(self, valid_operation):
        """Статус вне перечисления отклоняется."""
        valid_operation["status"] = "Pending"
        with pytest.raises(ContractViolation) as exc_info:
            validate_operation(valid_operation)
        assert exc_info.value.schema_name == "operation"

    @pytest.mark.parametrize("account", ["", "addr 1", "addr\t1"])
    def test_account_without_whitespace(self, valid_operation, account):
        """Адрес непустой и без пробельных символов."""
        valid_operation["account"] = account
        assert not OperationValidator().is_valid(valid_operation)

    def test_denom_grammar(self, valid_operation):
        """Деноминация подчиняется грамматике монет."""
        valid_operation["denom"] = "x"
        assert not OperationValidator().is_valid(valid_operation)

    def test_additional_properties(self, valid_operation):
        """Лишние поля запрещены."""
        valid_operation["extra"] = 1
        assert not OperationValidator().is_valid(valid_operation)

    def test_all_errors_ordered_by_path(self, valid_operation):
        """Все нарушения собираются, порядок определяется путём."""
        valid_operation["status"] = "Pending"
        valid_operation["index"] = -1
        with pytest.raises(ContractViolation) as exc_info:
            validate_operation(valid_operation)
        errors = exc_info.value.errors
        assert len(errors) == 2
        assert errors[0].startswith("index: ")
        assert errors[1].startswith("status: ")

    def test_root_error_path(self):
        """Ошибка уровня документа помечается как <root>."""
        assert OperationValidator().errors([]) == ["<root>: [] is not of type 'object'"]

    def test_violation_is_value_error(self, valid_operation):
        """ContractViolation — ошибка входных данных."""
        valid_operation["status"] = "Pending"
        with pytest.raises(ValueError):
            validate_operation(valid_operation)


# =============================================================================
# MODELS
# =============================================================================


class TestModelValidation:
    """Тесты проверки pydantic-моделей"""

    def test_validate_model(self):
        """JSON-форма Operation проходит контракт."""
        op = Operation(type="coin_spent", status="Success", account="addr1", amount="-1", denom="uatom")
        OperationValidator().validate_model(op)

    def test_model_stricter_than_pydantic(self):
        """Модель допускает адрес с пробелом, контракт — нет."""
        op = Operation(type="coin_spent", status="Success", account="addr 1", amount=1, denom="uatom")
        with pytest.raises(ContractViolation, match="account"):
            OperationValidator().validate_model(op)

    def test_validate_models_reports_positions(self):
        """Ошибки последовательности помечены позицией элемента."""
        good = Operation(type="t", status="Success", account="a", amount=1, denom="uatom")
        bad = good.model_copy(update={"account": "a b"})
        with pytest.raises(ContractViolation) as exc_info:
            OperationValidator().validate_models([good, bad, good])
        assert len(exc_info.value.errors) == 1
        assert exc_info.value.errors[0].startswith("1/account: ")

    def test_validate_models_empty(self):
        """Пустая последовательность валидна."""
        OperationValidator().validate_models([])

    def test_translated_operations_conform(self):
        """Операции трансляции проходят контракт."""
        events = [
            Event.of("tx", ("fee", "100uatom"), ("fee_payer", "addr1")),
            Event.of("coin_spent", ("spender", "addr1"), ("amount", "10uatom")),
            Event.of("coin_received", ("receiver", "addr2"), ("amount", "10uatom")),
        ]
        OperationValidator().validate_models(OperationConverter().convert(events).operations)


# =============================================================================
# COIN CONTRACT
# =============================================================================


class TestCoinContract:
    """Тесты coin.json"""

    def test_valid(self, valid_coin):
        """Корректная монета проходит контракт."""
        validate_coin(valid_coin)

    def test_negative_amount(self, valid_coin):
        """Отрицательная сумма отклоняется."""
        valid_coin["amount"] = "-2.500000000000000000"
        with pytest.raises(ContractViolation):
            validate_coin(valid_coin)

    def test_invalid_denom(self, valid_coin):
        """Деноминация с цифры отклоняется."""
        valid_coin["denom"] = "1x"
        assert not CoinValidator().is_valid(valid_coin)

    def test_pydantic_models_conform(self):
        """Монеты из parse_coins и конструктора проходят контракт."""
        contract = CoinValidator()
        contract.validate_models(parse_coins("10uatom,0.000000000000000001stake"))
        contract.validate_model(Coin(denom="ibc/ABC", amount=7))
