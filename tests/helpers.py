"""
Общие тестовые обёртки и accessor-функции.
"""

import math


class WhatYouSaid:
    """Обёртка, value_of() которой возвращает исходное значение."""

    def __init__(self, value):
        self.value = value

    def value_of(self):
        return self.value


class OneOhOne:
    """Обёртка с обоими accessor: value_of() → 101, __str__ → 'one oh one'."""

    def value_of(self):
        return 101

    def __str__(self):
        return "one oh one"


class Hinted:
    """Обёртка с to_primitive(hint); запоминает полученные подсказки."""

    def __init__(self, result):
        self.result = result
        self.hints = []

    def to_primitive(self, hint):
        self.hints.append(hint)
        return self.result

    def value_of(self):
        return "value_of"

    def __str__(self):
        return "__str__"


class Exploding:
    """Обёртка, все accessor которой бросают исключение."""

    def value_of(self):
        raise RuntimeError("value_of failed")

    def __str__(self):
        raise RuntimeError("__str__ failed")

    def to_primitive(self, hint):
        raise RuntimeError("to_primitive failed")


def raising():
    raise ValueError("accessor failed")


# Значения, которые возвращают accessor-функции и обёртки
SAMPLES = {
    "NaN": math.nan,
    "Zero": 0,
    "One": 1,
    "Two": 2,
    "Huh": "Huh?",
    "StringZero": "0",
    "StringOne": "1",
    "StringTwo": "2",
    "True": True,
    "False": False,
    "Null": None,
}


def fn_returning(value):
    """AccessorFn, возвращающая value."""
    return lambda: value


def fn_returning_wrapper(value):
    """AccessorFn, возвращающая WhatYouSaid(value)."""
    return lambda: WhatYouSaid(value)
