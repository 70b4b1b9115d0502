"""
Conversely — фасад конверсии

Объединяет три резолвера (Numberifier, Booleanifier, Stringifier), каждый
со своей неизменяемой политикой. Модульный экземпляр `conversely` использует
политику по умолчанию.
"""

from typing import Any

from src.conversely.booleanifier import Booleanifier
from src.conversely.numberifier import Numberifier
from src.conversely.options import (
    BooleanifierOptions,
    NumberifierOptions,
    PolicyValue,
    StringifierOptions,
)
from src.conversely.stringifier import Stringifier


class Conversely:
    """
    Точка входа строгой конверсии.

    Examples:
        >>> c = Conversely(number_options={"valueOfNaN": 0})
        >>> c.numberify("2a")
        0
        >>> c.booleanify("1")
        True
        >>> c.stringify(lambda: 2.0)
        '2'
    """

    __slots__ = ("numberifier", "booleanifier", "stringifier")

    def __init__(
        self,
        number_options: NumberifierOptions | dict[str, Any] | None = None,
        boolean_options: BooleanifierOptions | dict[str, Any] | None = None,
        string_options: StringifierOptions | dict[str, Any] | None = None,
    ):
        self.numberifier = Numberifier(number_options)
        self.booleanifier = Booleanifier(boolean_options)
        self.stringifier = Stringifier(string_options)

    def number(self, src: Any) -> PolicyValue:
        """Примитив → число."""
        return self.numberifier.number(src)

    def numberify(self, src: Any) -> PolicyValue:
        """Значение, обёртка или AccessorFn → число."""
        return self.numberifier.numberify(src)

    def boolean(self, src: Any) -> bool | None:
        """Примитив → bool."""
        return self.booleanifier.boolean(src)

    def booleanify(self, src: Any) -> bool | None:
        """Значение, обёртка или AccessorFn → bool."""
        return self.booleanifier.booleanify(src)

    def string(self, src: Any) -> str | None:
        """Примитив → строка."""
        return self.stringifier.string(src)

    def stringify(self, src: Any) -> str | None:
        """Значение, обёртка или AccessorFn → строка."""
        return self.stringifier.stringify(src)


# Экземпляр с политикой по умолчанию
conversely = Conversely()
