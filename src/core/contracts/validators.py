"""
JSON Schema контракты моделей леджера

JSON-формы Operation и Coin (model_dump(mode="json")) сверяются с
формальными схемами из пакета. Схемы ужесточают то, что pydantic-модели
допускают: суммы только в канонической форме Dec, адрес без пробелов,
деноминация по грамматике монет.

Схемы (src/core/contracts/schema/):
- operation.json: Operation (сумма — каноническая строка Dec со знаком)
- coin.json: Coin (сумма — неотрицательная каноническая строка Dec)

Нарушение контракта → ContractViolation со ВСЕМИ ошибками, упорядоченными
по пути в документе (детерминированный текст для сравнения между узлами).
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import jsonschema
from jsonschema import Draft202012Validator
from pydantic import BaseModel

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_DIR = Path(__file__).parent / "schema"


class ContractViolation(ValueError):
    """
    JSON-форма модели не соответствует схеме.

    Attributes:
        schema_name: имя нарушенной схемы
        errors: сообщения вида "<путь>: <текст>", упорядоченные по пути
    """

    def __init__(self, schema_name: str, errors: list[str]):
        self.schema_name = schema_name
        self.errors = errors
        super().__init__(f"{schema_name} contract violated: " + "; ".join(errors))


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Читает схемы из каталога и проверяет их meta-схемой Draft 2020-12."""

    def __init__(self, schema_dir: Optional[Path] = None):
        self.schema_dir = Path(schema_dir) if schema_dir is not None else DEFAULT_SCHEMA_DIR
        if not self.schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self.schema_dir}")
        self._cache: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Raises:
            FileNotFoundError: файла схемы нет
            ValueError: схема не проходит meta-валидацию
        """
        cached = self._cache.get(schema_name)
        if cached is not None:
            return cached

        path = self.schema_dir / f"{schema_name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")
        schema = json.loads(path.read_text(encoding="utf-8"))

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

        logger.debug("loaded schema %s from %s", schema_name, path)
        self._cache[schema_name] = schema
        return schema


@lru_cache(maxsize=None)
def default_loader() -> SchemaLoader:
    """Загрузчик пакетных схем (создаётся при первом обращении)."""
    return SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Проверка JSON-документов и pydantic-моделей против одной схемы.

    Examples:
        >>> contract = ContractValidator("coin")
        >>> contract.is_valid({"denom": "uatom", "amount": "1.000000000000000000"})
        True
    """

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self._validator = Draft202012Validator((loader or default_loader()).load_schema(schema_name))

    def errors(self, data: Any) -> list[str]:
        """Все нарушения, упорядоченные по пути в документе."""
        found = sorted(self._validator.iter_errors(data), key=lambda e: (list(map(str, e.absolute_path)), e.message))
        return [f"{'/'.join(map(str, e.absolute_path)) or '<root>'}: {e.message}" for e in found]

    def is_valid(self, data: Any) -> bool:
        return self._validator.is_valid(data)

    def validate(self, data: Any) -> None:
        """
        Raises:
            ContractViolation: документ не соответствует схеме
        """
        errors = self.errors(data)
        if errors:
            raise ContractViolation(self.schema_name, errors)

    def validate_model(self, model: BaseModel) -> None:
        """Проверка JSON-формы pydantic-модели."""
        self.validate(model.model_dump(mode="json"))

    def validate_models(self, models: Iterable[BaseModel]) -> None:
        """
        Проверка последовательности моделей.

        Ошибки всех элементов собираются в одно исключение; путь каждой
        ошибки начинается с позиции элемента.
        """
        errors: list[str] = []
        for position, model in enumerate(models):
            errors.extend(f"{position}/{error}" for error in self.errors(model.model_dump(mode="json")))
        if errors:
            raise ContractViolation(self.schema_name, errors)


class OperationValidator(ContractValidator):
    """Контракт JSON-формы Operation."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__("operation", loader)


class CoinValidator(ContractValidator):
    """Контракт JSON-формы Coin."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__("coin", loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_operation(data: Dict[str, Any]) -> None:
    """
    Args:
        data: JSON-форма операции, например Operation.model_dump(mode="json")

    Raises:
        ContractViolation: данные не соответствуют operation.json
    """
    OperationValidator().validate(data)


def validate_coin(data: Dict[str, Any]) -> None:
    """
    Raises:
        ContractViolation: данные не соответствуют coin.json
    """
    CoinValidator().validate(data)
