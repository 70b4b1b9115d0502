"""
Booleanifier — строгая конверсия в bool

Точное сопоставление с двумя классами эквивалентности:
- {1, "1", True}  → True
- {0, "0", False} → False
Всё остальное (2, 0.5, "true", None, UNDEFINED) → None.
"""

from typing import Any

from src.conversely.options import BooleanifierOptions
from src.conversely.primitify import (
    read_primitive_hint,
    read_string_accessor,
    read_value_accessor,
    unwrap,
)
from src.conversely.primitives import AccessorResult, PreferredKind, ValueKind, kind_of


class Booleanifier:
    """
    Резолвер bool с неизменяемой политикой.

    Examples:
        >>> Booleanifier().booleanify("1")
        True
        >>> Booleanifier().booleanify(2)
        >>> Booleanifier({"truthyStrings": ["yes"]}).boolean("yes")
        True
    """

    __slots__ = ("_options", "_primitive_hint")

    def __init__(self, options: BooleanifierOptions | dict[str, Any] | None = None):
        if not isinstance(options, BooleanifierOptions):
            options = BooleanifierOptions.model_validate(options)
        object.__setattr__(self, "_options", options)
        object.__setattr__(self, "_primitive_hint", options.use_primitive_hint)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"Booleanifier({self._options!r})"

    @property
    def options(self) -> BooleanifierOptions:
        return self._options

    def _eval_string(self, src: str) -> bool | None:
        opts = self._options
        text = src.strip() if opts.trim_string else src

        if text == "1":
            return True
        if text == "0":
            return False

        truthy = text in opts.truthy_strings
        falsy = text in opts.falsy_strings
        if truthy == falsy:
            # Не найдена или найдена в обоих наборах
            return None
        return truthy

    def boolean(self, src: Any) -> bool | None:
        """
        Конверсия примитива в bool.

        Args:
            src: bool, число, строка, None или UNDEFINED

        Returns:
            True, False или None
        """
        kind = kind_of(src)
        if kind is ValueKind.BOOLEAN:
            return src
        if kind is ValueKind.NUMBER:
            if src == 1:
                return True
            if src == 0:
                return False
            return None
        if kind is ValueKind.STRING:
            return self._eval_string(src)
        return None

    def _boolean_of(self, result: AccessorResult) -> bool | None:
        return self.boolean(result.value) if result.produced else None

    def booleanify(self, src: Any) -> bool | None:
        """
        Конверсия значения, обёртки или AccessorFn в bool.

        Для обёртки сначала используется value_of(), и только если он не дал
        bool — __str__.
        """
        value = unwrap(src)
        kind = kind_of(value)

        if kind in (ValueKind.NULL, ValueKind.UNDEFINED, ValueKind.CALLABLE):
            return None
        if kind is not ValueKind.OBJECT:
            return self.boolean(value)

        if self._primitive_hint:
            hinted = read_primitive_hint(value, PreferredKind.BOOLEAN)
            if hinted.is_null or hinted.is_bns:
                return self.boolean(hinted.value)

        result = self._boolean_of(read_value_accessor(value))
        if result is None:
            result = self._boolean_of(read_string_accessor(value))
        return result
