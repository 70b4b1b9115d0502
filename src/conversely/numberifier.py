"""
Numberifier — строгая конверсия в число

Правила для строки (по порядку):
1. Пробелы по краям отбрасываются; пустая строка → value_of_blank
2. Hex/bin/octal литерал → value_of_nan при ignore_*, иначе int
3. 'Infinity'/'+Infinity'/'-Infinity' → value_of_nan при ignore_infinity,
   иначе value_of_infinity (со знаком)
4. Экспоненциальный литерал → value_of_nan при ignore_exp, иначе float
5. Десятичный литерал → число (частичный разбор запрещён); лишний ведущий
   ноль при no_leading_zero → value_of_nan
6. Всё остальное → value_of_nan

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Конечное число проходит без изменений
2. NaN/Inf никогда не возвращаются сами по себе, только через политику
3. bool → 1/0 без политики
"""

import math
import re
from typing import Any, Final

from src.conversely.options import NumberifierOptions, PolicyValue
from src.conversely.primitify import primitify
from src.conversely.primitives import PreferredKind, ValueKind, kind_of

# =============================================================================
# ЛИТЕРАЛЫ
# =============================================================================

RE_HEX: Final[re.Pattern[str]] = re.compile(r"0[xX][0-9a-fA-F]+")
RE_BIN: Final[re.Pattern[str]] = re.compile(r"0[bB][01]+")
RE_OCTAL: Final[re.Pattern[str]] = re.compile(r"0[oO][0-7]+")
RE_EXP: Final[re.Pattern[str]] = re.compile(r"[-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)[eE][-+]?[0-9]+")
RE_DECIMAL: Final[re.Pattern[str]] = re.compile(r"[-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")
RE_LEADING_ZERO: Final[re.Pattern[str]] = re.compile(r"[-+]?0[0-9]")

INFINITY_TOKENS: Final[dict[str, int]] = {"Infinity": 1, "+Infinity": 1, "-Infinity": -1}


class Numberifier:
    """
    Резолвер чисел с неизменяемой политикой.

    Examples:
        >>> Numberifier().numberify("  2 ")
        2
        >>> Numberifier().numberify("2a")
        >>> Numberifier({"valueOfBlank": 0}).number("")
        0
    """

    __slots__ = ("_options", "_primitive_hint")

    def __init__(self, options: NumberifierOptions | dict[str, Any] | None = None):
        if not isinstance(options, NumberifierOptions):
            options = NumberifierOptions.model_validate(options)
        object.__setattr__(self, "_options", options)
        object.__setattr__(self, "_primitive_hint", options.use_primitive_hint)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"Numberifier({self._options!r})"

    @property
    def options(self) -> NumberifierOptions:
        return self._options

    # -------------------------------------------------------------------------
    # Числа
    # -------------------------------------------------------------------------

    def _signed_infinity(self, sign: int) -> PolicyValue:
        """value_of_infinity с учётом знака (отрицается только числовое значение)."""
        value = self._options.value_of_infinity
        if sign < 0 and kind_of(value) is ValueKind.NUMBER:
            return -value
        return value

    def _eval_number(self, src: int | float) -> PolicyValue:
        if isinstance(src, int) or math.isfinite(src):
            return src
        if math.isnan(src):
            return self._options.value_of_nan
        return self._signed_infinity(1 if src > 0 else -1)

    # -------------------------------------------------------------------------
    # Строки
    # -------------------------------------------------------------------------

    def _eval_string(self, src: str) -> PolicyValue:
        opts = self._options
        text = src.strip()

        if not text:
            return opts.value_of_blank

        for pattern, ignored, base in (
            (RE_HEX, opts.ignore_hex, 16),
            (RE_BIN, opts.ignore_bin, 2),
            (RE_OCTAL, opts.ignore_octal, 8),
        ):
            if pattern.fullmatch(text):
                return opts.value_of_nan if ignored else int(text, base)

        if text in INFINITY_TOKENS:
            if opts.ignore_infinity:
                return opts.value_of_nan
            return self._signed_infinity(INFINITY_TOKENS[text])

        if RE_EXP.fullmatch(text):
            if opts.ignore_exp:
                return opts.value_of_nan
            return self._eval_number(float(text))

        if not RE_DECIMAL.fullmatch(text):
            return opts.value_of_nan
        if opts.no_leading_zero and RE_LEADING_ZERO.match(text):
            return opts.value_of_nan

        if "." in text:
            return self._eval_number(float(text))
        try:
            return int(text)
        except ValueError:
            # Превышен лимит длины int-строки: результат float, обычно ±Infinity
            return self._eval_number(float(text))

    # -------------------------------------------------------------------------
    # Публичный API
    # -------------------------------------------------------------------------

    def number(self, src: Any) -> PolicyValue:
        """
        Конверсия примитива в число.

        Args:
            src: bool, число, строка, None или UNDEFINED

        Returns:
            Число или политическое значение (None по умолчанию)
        """
        kind = kind_of(src)
        if kind is ValueKind.NUMBER:
            return self._eval_number(src)
        if kind is ValueKind.STRING:
            return self._eval_string(src)
        if kind is ValueKind.BOOLEAN:
            return 1 if src else 0
        if kind is ValueKind.NULL:
            return self._options.value_of_null
        if kind is ValueKind.UNDEFINED:
            return self._options.value_of_undefined
        return None

    def numberify(self, src: Any) -> PolicyValue:
        """
        Конверсия значения, обёртки или AccessorFn в число.

        Examples:
            >>> Numberifier().numberify(lambda: "5")
            5
        """
        value = primitify(src, PreferredKind.NUMBER, primitive_hint=self._primitive_hint)
        return self.number(value)
