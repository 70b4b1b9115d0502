"""
Options — неизменяемые опции резолверов

Immutable Pydantic модели, задающие политику каждого экземпляра резолвера.
Опции задаются один раз при создании резолвера; новая политика требует
нового экземпляра.

Правила приёма опций:
- Ключи принимаются в camelCase (valueOfNaN) и snake_case (value_of_nan)
- Неизвестные ключи игнорируются
- Ключи с невалидным типом отбрасываются (остаётся default)
- Флаги принимают True/False/1/0
- Конструирование опций никогда не бросает исключений
"""

import logging
from collections.abc import Mapping
from functools import lru_cache
from typing import Any, ClassVar, Dict, Union

from pydantic import BaseModel, Field, TypeAdapter, ValidationError, model_validator

from src.conversely.contracts import get_contract

logger = logging.getLogger(__name__)

# Политическое значение: число или None (indeterminate)
PolicyValue = Union[int, float, None]


@lru_cache(maxsize=None)
def _field_adapter(annotation: Any) -> TypeAdapter:
    """Кэшированный TypeAdapter для аннотации поля."""
    return TypeAdapter(annotation)


# =============================================================================
# BASE MODEL
# =============================================================================


class ResolverOptions(BaseModel):
    """
    Базовые опции резолвера.

    use_primitive_hint читается резолвером один раз при создании и хранится
    как неизменяемое поле экземпляра.
    """

    schema_name: ClassVar[str] = ""

    use_primitive_hint: bool = Field(
        True,
        alias="usePrimitiveHint",
        description="Учитывать to_primitive(hint) у объектов-обёрток",
    )

    model_config = {"frozen": True, "extra": "ignore", "populate_by_name": True}

    @model_validator(mode="before")
    @classmethod
    def drop_invalid_options(cls, data: Any) -> Dict[str, Any]:
        """
        Нормализация входного словаря опций.

        Приводит ключи к alias, отбрасывает неизвестные ключи и ключи,
        значения которых нарушают JSON Schema контракт.
        """
        if isinstance(data, ResolverOptions):
            data = {
                key: sorted(value) if isinstance(value, frozenset) else value
                for key, value in data.model_dump(by_alias=True).items()
            }
        if not isinstance(data, Mapping):
            if data is not None:
                logger.debug("Ignoring non-mapping options %r", data)
            return {}

        aliases = {name: field.alias or name for name, field in cls.model_fields.items()}
        known = set(aliases.values())

        options: Dict[str, Any] = {}
        for key, value in data.items():
            alias = aliases.get(key, key)
            if alias in known:
                options[alias] = value
            else:
                logger.debug("Ignoring unknown option %r", key)

        if cls.schema_name:
            for key in get_contract(cls.schema_name).invalid_keys(options):
                logger.debug("Ignoring option %s=%r: invalid type", key, options[key])
                del options[key]

        # Значения, прошедшие схему, но отвергнутые pydantic (например complex)
        for name, field in cls.model_fields.items():
            alias = aliases[name]
            if alias not in options:
                continue
            try:
                _field_adapter(field.annotation).validate_python(options[alias])
            except ValidationError:
                logger.debug("Ignoring option %s=%r: invalid value", alias, options[alias])
                del options[alias]

        # Флаги: 0/1 → False/True
        for name, field in cls.model_fields.items():
            if field.annotation is bool and aliases[name] in options:
                options[aliases[name]] = bool(options[aliases[name]])

        return options


# =============================================================================
# NUMBERIFIER
# =============================================================================


class NumberifierOptions(ResolverOptions):
    """
    Опции Numberifier.

    Политические значения (value_of_*) подставляются вместо результата,
    который иначе был бы неопределённым. Флаги ignore_* отключают
    распознавание альтернативных нотаций.
    """

    schema_name: ClassVar[str] = "numberifier_options"

    # Политические значения
    value_of_null: PolicyValue = Field(None, alias="valueOfNull")
    value_of_undefined: PolicyValue = Field(None, alias="valueOfUndefined")
    value_of_nan: PolicyValue = Field(None, alias="valueOfNaN")
    value_of_infinity: PolicyValue = Field(None, alias="valueOfInfinity")
    value_of_blank: PolicyValue = Field(None, alias="valueOfBlank")

    # Распознавание нотаций
    ignore_hex: bool = Field(True, alias="ignoreHex", description="Не распознавать 0x..")
    ignore_bin: bool = Field(True, alias="ignoreBin", description="Не распознавать 0b..")
    ignore_octal: bool = Field(True, alias="ignoreOctal", description="Не распознавать 0o..")
    ignore_exp: bool = Field(True, alias="ignoreExp", description="Не распознавать 1e5")
    ignore_infinity: bool = Field(
        True, alias="ignoreInfinity", description="Не распознавать строку 'Infinity'"
    )
    no_leading_zero: bool = Field(
        False, alias="noLeadingZero", description="Отклонять лишний ведущий ноль ('007')"
    )


# =============================================================================
# BOOLEANIFIER
# =============================================================================


class BooleanifierOptions(ResolverOptions):
    """
    Опции Booleanifier.

    Канонические классы {1, "1", True} и {0, "0", False} распознаются всегда;
    truthy_strings / falsy_strings добавляют к ним строки.
    """

    schema_name: ClassVar[str] = "booleanifier_options"

    truthy_strings: frozenset[str] = Field(frozenset(), alias="truthyStrings")
    falsy_strings: frozenset[str] = Field(frozenset(), alias="falsyStrings")
    trim_string: bool = Field(False, alias="trimString")


# =============================================================================
# STRINGIFIER
# =============================================================================


class StringifierOptions(ResolverOptions):
    """Опции Stringifier"""

    schema_name: ClassVar[str] = "stringifier_options"

    value_of_true: str = Field("1", alias="valueOfTrue")
    value_of_false: str = Field("0", alias="valueOfFalse")
    trim_string: bool = Field(False, alias="trimString")
