"""
Primitify — извлечение примитива из произвольного значения

Алгоритм:
1. Callable вызывается ровно один раз (callable-результат → UNDEFINED)
2. None → None
3. bool/число/строка/UNDEFINED возвращаются без изменений
4. Объект с to_primitive(hint) — hint имеет приоритет над accessor-методами
5. value_of() и __str__ вызываются, результаты разрешаются по preferred_kind

Любое исключение внутри accessor перехватывается и трактуется как
"значение не получено". Вызывающему коду исключения не пробрасываются.
"""

import logging
from typing import Any, Callable

from src.conversely.primitives import (
    SCALAR_KINDS,
    UNDEFINED,
    AccessorResult,
    HasPrimitiveHint,
    HasValueAccessor,
    PreferredKind,
    Primitive,
    ValueKind,
    has_string_accessor,
    kind_of,
)

logger = logging.getLogger(__name__)


# =============================================================================
# ВЫЗОВ ACCESSOR
# =============================================================================


def call_accessor(fn: Callable[..., Any], *args: Any) -> AccessorResult:
    """
    Вызов accessor внутри failure boundary.

    Args:
        fn: Вызываемый объект
        *args: Аргументы вызова

    Returns:
        AccessorResult.success(value) или AccessorResult.failure(error)
    """
    try:
        value = fn(*args)
    except Exception as e:
        logger.debug("Accessor %r failed: %s: %s", fn, type(e).__name__, e)
        return AccessorResult.failure(e)
    return AccessorResult.success(value)


def _invoke_method(obj: Any, name: str, *args: Any) -> Any:
    return getattr(obj, name)(*args)


def call_method(obj: Any, name: str, *args: Any) -> AccessorResult:
    """Вызов метода объекта по имени; сбой поиска атрибута тоже перехватывается."""
    return call_accessor(_invoke_method, obj, name, *args)


def unwrap(source: Any) -> Any:
    """
    Разворачивание AccessorFn.

    Callable вызывается без аргументов один раз. Если вызов упал или вернул
    ещё один callable — результат UNDEFINED (повторный вызов не выполняется).

    Examples:
        >>> unwrap(lambda: 5)
        5
        >>> unwrap(lambda: (lambda: 5))
        UNDEFINED
        >>> unwrap("x")
        'x'
    """
    if kind_of(source) is not ValueKind.CALLABLE:
        return source

    result = call_accessor(source)
    if not result.produced:
        return UNDEFINED
    if kind_of(result.value) is ValueKind.CALLABLE:
        logger.debug("Accessor %r returned a callable, treated as undefined", source)
        return UNDEFINED
    return result.value


def supports(obj: Any, protocol: type) -> bool:
    """Capability probe: isinstance() по протоколу внутри failure boundary."""
    probe = call_accessor(isinstance, obj, protocol)
    return probe.produced and probe.value is True


def read_primitive_hint(obj: Any, preferred_kind: PreferredKind) -> AccessorResult:
    """Вызов to_primitive(hint), если объект его поддерживает."""
    if not supports(obj, HasPrimitiveHint):
        return AccessorResult.failure()
    return call_method(obj, "to_primitive", preferred_kind.hint)


def read_value_accessor(obj: Any) -> AccessorResult:
    """Вызов value_of(), если объект его поддерживает."""
    if not supports(obj, HasValueAccessor):
        return AccessorResult.failure()
    return call_method(obj, "value_of")


def read_string_accessor(obj: Any) -> AccessorResult:
    """
    Вызов нетривиального __str__.

    __str__ вызывается напрямую через тип, поэтому результат может быть
    любым примитивом, а не только str.
    """
    if not has_string_accessor(obj):
        return AccessorResult.failure()
    return call_accessor(type(obj).__str__, obj)


# =============================================================================
# РАЗРЕШЕНИЕ
# =============================================================================


def resolve_accessor_results(
    value_result: AccessorResult,
    string_result: AccessorResult,
    preferred_kind: PreferredKind = PreferredKind.STRING,
) -> Primitive:
    """
    Выбор примитива из результатов value_of() и __str__.

    STRING: сначала строка из __str__, затем bool/число/строка из value_of(),
    затем bool/число/строка из __str__.
    NUMBER/BOOLEAN: сначала value_of(), затем __str__.
    Если хотя бы одна сторона вернула None — None, иначе UNDEFINED.
    """
    if (
        preferred_kind is PreferredKind.STRING
        and string_result.produced
        and isinstance(string_result.value, str)
    ):
        return string_result.value

    if value_result.is_bns:
        return value_result.value
    if string_result.is_bns:
        return string_result.value

    if value_result.is_null or string_result.is_null:
        return None
    return UNDEFINED


def primitify(
    source: Any,
    preferred_kind: PreferredKind = PreferredKind.STRING,
    *,
    primitive_hint: bool = True,
) -> Primitive:
    """
    Извлечение примитива из значения, обёртки или AccessorFn.

    Args:
        source: Произвольное значение
        preferred_kind: Предпочтительный вид (разрешает конфликт value_of/__str__)
        primitive_hint: Учитывать to_primitive(hint) у объектов

    Returns:
        bool, число, строка, None или UNDEFINED

    Examples:
        >>> primitify(lambda: "1")
        '1'
        >>> primitify(object())
        UNDEFINED
        >>> primitify(None)
    """
    preferred_kind = PreferredKind(preferred_kind)
    value = unwrap(source)
    kind = kind_of(value)

    if kind is ValueKind.NULL:
        return None
    if kind in SCALAR_KINDS or kind is ValueKind.UNDEFINED:
        return value
    if kind is ValueKind.CALLABLE:
        return UNDEFINED

    if primitive_hint:
        hinted = read_primitive_hint(value, preferred_kind)
        if hinted.is_null or hinted.is_bns:
            return hinted.value

    return resolve_accessor_results(
        read_value_accessor(value),
        read_string_accessor(value),
        preferred_kind,
    )
