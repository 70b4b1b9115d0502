"""
Primitives — базовые типы и диспетчеризация по виду значения

Модуль определяет:
- Сентинел UNDEFINED (отсутствие значения, отличное от None)
- ValueKind: тегированная классификация входного значения
- PreferredKind: подсказка о предпочтительном виде при извлечении примитива
- Capability-протоколы обёрток (value_of / __str__ / to_primitive)
- AccessorResult: результат одного вызова accessor-метода

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. bool проверяется раньше int (bool — подкласс int)
2. Примитив не хранит ссылок на исходный объект
3. Неудачный вызов accessor — это явный AccessorResult.failure, а не исключение
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Final, Protocol, Union, runtime_checkable


# =============================================================================
# СЕНТИНЕЛ UNDEFINED
# =============================================================================


class _Undefined:
    """Отсутствие значения (аналог undefined). Singleton, falsy."""

    _instance = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()

# bool | int | float | str | None | UNDEFINED
Primitive = Union[bool, int, float, str, None, _Undefined]


# =============================================================================
# ENUMS
# =============================================================================


class ValueKind(str, Enum):
    """Вид значения во время выполнения"""

    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    NULL = "null"
    UNDEFINED = "undefined"
    CALLABLE = "callable"
    OBJECT = "object"


class PreferredKind(str, Enum):
    """Предпочтительный вид примитива при разрешении обёртки"""

    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"

    @property
    def hint(self) -> str:
        """Подсказка для to_primitive(): BOOLEAN передаётся как "default"."""
        if self is PreferredKind.BOOLEAN:
            return "default"
        return self.value


SCALAR_KINDS: Final[frozenset[ValueKind]] = frozenset(
    {ValueKind.BOOLEAN, ValueKind.NUMBER, ValueKind.STRING}
)


def kind_of(value: Any) -> ValueKind:
    """
    Классификация значения по виду.

    Порядок проверок важен: bool до int, None/UNDEFINED до callable.

    Args:
        value: Произвольное значение

    Returns:
        ValueKind входного значения

    Examples:
        >>> kind_of(True)
        <ValueKind.BOOLEAN: 'boolean'>
        >>> kind_of(1.5)
        <ValueKind.NUMBER: 'number'>
        >>> kind_of(lambda: 1)
        <ValueKind.CALLABLE: 'callable'>
    """
    if value is None:
        return ValueKind.NULL
    if value is UNDEFINED:
        return ValueKind.UNDEFINED
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if callable(value):
        return ValueKind.CALLABLE
    return ValueKind.OBJECT


def is_bns(value: Any) -> bool:
    """True если значение — bool, число или строка."""
    return kind_of(value) in SCALAR_KINDS


# =============================================================================
# CAPABILITY-ПРОТОКОЛЫ
# =============================================================================


@runtime_checkable
class HasValueAccessor(Protocol):
    """Обёртка с value-accessor: value_of() возвращает примитив"""

    def value_of(self) -> Any: ...


@runtime_checkable
class HasPrimitiveHint(Protocol):
    """Обёртка с coercion hint: to_primitive("number"|"string"|"default")"""

    def to_primitive(self, hint: str) -> Any: ...


def has_string_accessor(obj: Any) -> bool:
    """
    Проверка наличия нетривиального string-accessor.

    Унаследованный object.__str__ (выдаёт "<X object at 0x...>") считается
    тривиальным и не учитывается.
    """
    return type(obj).__str__ is not object.__str__


# =============================================================================
# РЕЗУЛЬТАТ ВЫЗОВА ACCESSOR
# =============================================================================


@dataclass(frozen=True)
class AccessorResult:
    """
    Результат одного вызова accessor-метода.

    produced=True — accessor вернул значение (в т.ч. None).
    produced=False — accessor отсутствует или завершился исключением.
    """

    produced: bool
    value: Any = UNDEFINED
    error: Exception | None = None

    @classmethod
    def success(cls, value: Any) -> "AccessorResult":
        return cls(produced=True, value=value)

    @classmethod
    def failure(cls, error: Exception | None = None) -> "AccessorResult":
        return cls(produced=False, error=error)

    @property
    def is_bns(self) -> bool:
        return self.produced and is_bns(self.value)

    @property
    def is_null(self) -> bool:
        return self.produced and self.value is None
