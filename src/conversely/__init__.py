"""
Conversely — строгая конверсия значений в number / string / boolean

Вместо неявного приведения типов возвращает None (indeterminate), если
конверсия не определена однозначно. None в результате всегда означает
"конверсия не определена" и никогда не совпадает с 0, "" или False.
"""

__version__ = "0.1.0"

from src.conversely.booleanifier import Booleanifier
from src.conversely.facade import Conversely, conversely
from src.conversely.numberifier import Numberifier
from src.conversely.options import (
    BooleanifierOptions,
    NumberifierOptions,
    ResolverOptions,
    StringifierOptions,
)
from src.conversely.primitify import primitify, unwrap
from src.conversely.primitives import (
    UNDEFINED,
    AccessorResult,
    HasPrimitiveHint,
    HasValueAccessor,
    PreferredKind,
    Primitive,
    ValueKind,
    kind_of,
)
from src.conversely.stringifier import Stringifier

# Функции модульного экземпляра (политика по умолчанию)
number = conversely.number
numberify = conversely.numberify
boolean = conversely.boolean
booleanify = conversely.booleanify
string = conversely.string
stringify = conversely.stringify

__all__ = [
    "__version__",
    # Sentinel & types
    "UNDEFINED",
    "Primitive",
    "ValueKind",
    "PreferredKind",
    "AccessorResult",
    "HasValueAccessor",
    "HasPrimitiveHint",
    "kind_of",
    # Extractor
    "primitify",
    "unwrap",
    # Options
    "ResolverOptions",
    "NumberifierOptions",
    "BooleanifierOptions",
    "StringifierOptions",
    # Resolvers
    "Numberifier",
    "Booleanifier",
    "Stringifier",
    # Facade
    "Conversely",
    "conversely",
    "number",
    "numberify",
    "boolean",
    "booleanify",
    "string",
    "stringify",
]
