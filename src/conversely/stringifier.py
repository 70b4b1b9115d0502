"""
Stringifier — строгая конверсия в строку

- Конечное число → каноническая десятичная запись ("2", "0.5", "1e+21")
- NaN/Inf → None (не-конечные числа никогда не превращаются в строку)
- Строка → без изменений
- bool → "1"/"0"
- None/UNDEFINED/объект → None

Каноническая запись float:
- Кратчайшие цифры, однозначно восстанавливающие значение (как repr)
- Десятичная запись для 1e-6 <= |x| < 1e21, иначе экспонента без
  ведущих нулей в порядке ("1e-7", "1.5e+21")
- Экспоненциальная запись не читается Numberifier по умолчанию
  (ignoreExp=True)

int длиннее лимита int-строки интерпретатора (sys.get_int_max_str_digits)
→ None.
"""

import math
from typing import Any, Final

from src.conversely.options import StringifierOptions
from src.conversely.primitify import (
    read_primitive_hint,
    read_string_accessor,
    read_value_accessor,
    unwrap,
)
from src.conversely.primitives import PreferredKind, ValueKind, kind_of

# Целые float ниже этого порога записываются без дробной части
INTEGRAL_FLOAT_LIMIT: Final[float] = 1e21

# Минимальная позиция десятичной точки для записи без экспоненты (1e-6)
MIN_DECIMAL_POINT: Final[int] = -5


def _normalize_exponent(text: str) -> str:
    """
    Перевод repr с экспонентой ("1e-05", "1.5e+21") в каноническую форму.

    point — позиция десятичной точки относительно первой значащей цифры.
    repr даёт экспоненту для целых значений >= 1e16, которые сюда приходят
    только начиная с 1e21, поэтому десятичная запись нужна лишь для дробей.
    """
    mantissa, _, exponent = text.partition("e")
    sign = "-" if mantissa.startswith("-") else ""
    int_part, _, frac_part = mantissa.lstrip("-").partition(".")
    digits = int_part + frac_part
    point = len(int_part) + int(exponent)

    if MIN_DECIMAL_POINT <= point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"

    power = point - 1
    head = digits[0] + (f".{digits[1:]}" if len(digits) > 1 else "")
    return f"{sign}{head}e{'+' if power >= 0 else '-'}{abs(power)}"


def format_number(value: int | float) -> str | None:
    """
    Каноническая десятичная запись числа.

    Examples:
        >>> format_number(2.0)
        '2'
        >>> format_number(-0.0)
        '0'
        >>> format_number(0.1)
        '0.1'
        >>> format_number(1e-6)
        '0.000001'
        >>> format_number(1e-7)
        '1e-7'
        >>> format_number(float("nan"))
    """
    if isinstance(value, int):
        try:
            return str(value)
        except ValueError:
            # Превышен лимит длины int-строки
            return None
    if not math.isfinite(value):
        return None
    if value.is_integer() and abs(value) < INTEGRAL_FLOAT_LIMIT:
        return str(int(value))
    text = repr(value)
    if "e" in text:
        return _normalize_exponent(text)
    return text


class Stringifier:
    """
    Резолвер строк с неизменяемой политикой.

    Examples:
        >>> Stringifier().stringify(True)
        '1'
        >>> Stringifier().stringify(float("inf"))
    """

    __slots__ = ("_options", "_primitive_hint")

    def __init__(self, options: StringifierOptions | dict[str, Any] | None = None):
        if not isinstance(options, StringifierOptions):
            options = StringifierOptions.model_validate(options)
        object.__setattr__(self, "_options", options)
        object.__setattr__(self, "_primitive_hint", options.use_primitive_hint)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"Stringifier({self._options!r})"

    @property
    def options(self) -> StringifierOptions:
        return self._options

    def string(self, src: Any) -> str | None:
        """
        Конверсия примитива в строку.

        Args:
            src: bool, число, строка, None или UNDEFINED

        Returns:
            Строка или None
        """
        kind = kind_of(src)
        if kind is ValueKind.STRING:
            return src.strip() if self._options.trim_string else src
        if kind is ValueKind.NUMBER:
            return format_number(src)
        if kind is ValueKind.BOOLEAN:
            return self._options.value_of_true if src else self._options.value_of_false
        return None

    def stringify(self, src: Any) -> str | None:
        """
        Конверсия значения, обёртки или AccessorFn в строку.

        Для обёртки предпочитается строка из __str__, затем результат
        value_of(), затем любой результат __str__.
        """
        value = unwrap(src)
        kind = kind_of(value)

        if kind in (ValueKind.NULL, ValueKind.UNDEFINED, ValueKind.CALLABLE):
            return None
        if kind is not ValueKind.OBJECT:
            return self.string(value)

        if self._primitive_hint:
            hinted = read_primitive_hint(value, PreferredKind.STRING)
            if hinted.is_null or hinted.is_bns:
                return self.string(hinted.value)

        value_result = read_value_accessor(value)
        string_result = read_string_accessor(value)

        if string_result.produced and isinstance(string_result.value, str):
            return self.string(string_result.value)
        if value_result.produced and value_result.value is not None:
            return self.string(value_result.value)
        return self.string(string_result.value)
