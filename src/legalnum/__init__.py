"""
legalnum: 大字（壱・弐・参・拾・萬 …）を算用数字に変換するライブラリ
"""

from .core.financial import parse_financial, parse_financial_integer
from .core.formatter import JapaneseNumberFormatter

__version__ = "0.1.0"

__all__ = [
    'JapaneseNumberFormatter',
    'parse_financial',
    'parse_financial_integer',
]
