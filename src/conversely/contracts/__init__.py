"""
Contract Validation Module

Модуль для проверки словарей опций резолверов по JSON Schema.
"""

from .validators import OptionsContract, SchemaLoader, get_contract

__all__ = [
    # Classes
    "SchemaLoader",
    "OptionsContract",
    # Functions
    "get_contract",
]
