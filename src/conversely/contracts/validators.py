"""
JSON Schema Contract Validators для опций резолверов

Модуль для проверки словарей опций согласно JSON Schema контрактам.
Использует библиотеку jsonschema для определения ключей с невалидными типами.

Схемы:
- numberifier_options.json
- booleanifier_options.json
- stringifier_options.json
"""

import json
from pathlib import Path
from typing import Any, Dict, Set

from jsonschema import Draft202012Validator, SchemaError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Загрузчик схем опций из каталога schema/ (с кэшем)."""

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема опций по имени без расширения ('numberifier_options').

        Raises:
            FileNotFoundError: Файла схемы нет
            ValueError: Схема не проходит meta-validation
        """
        schema = self._schemas.get(schema_name)
        if schema is not None:
            return schema

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class OptionsContract:
    """
    Контракт словаря опций.

    В отличие от строгой валидации, не бросает исключений: сообщает, какие
    ключи верхнего уровня нарушают схему, чтобы их можно было отбросить.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """True если все опции соответствуют схеме."""
        return self.validator.is_valid(data)

    def invalid_keys(self, data: Dict[str, Any]) -> Set[str]:
        """
        Ключи верхнего уровня с невалидными значениями.

        Args:
            data: Словарь опций (ключи в camelCase)

        Returns:
            Множество ключей, значения которых нарушают схему
        """
        return {str(error.path[0]) for error in self.validator.iter_errors(data) if error.path}


_CONTRACTS: Dict[str, OptionsContract] = {}


def get_contract(schema_name: str) -> OptionsContract:
    """Кэшированный контракт по имени схемы."""
    if schema_name not in _CONTRACTS:
        _CONTRACTS[schema_name] = OptionsContract(schema_name)
    return _CONTRACTS[schema_name]
