"""
legalnum ユーティリティモジュール
"""

from .number_parts import (
    DIGITS,
    FINANCIAL_SEPARATORS,
    DECIMAL_SEPARATORS,
    NumeralTables,
    DEFAULT_TABLES,
    extend_tables,
    load_tables,
)

__all__ = [
    'DIGITS',
    'FINANCIAL_SEPARATORS',
    'DECIMAL_SEPARATORS',
    'NumeralTables',
    'DEFAULT_TABLES',
    'extend_tables',
    'load_tables',
]
