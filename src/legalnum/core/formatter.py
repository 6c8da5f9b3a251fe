"""
legalnum: 数値文字列フォーマッタ

入力全体を検証し、整数部と小数部に分割してパーサに渡す。
不正な入力は例外ではなく None で返す。
"""

import logging
from typing import Iterable, List, Optional

from ..utils.number_parts import DEFAULT_TABLES, NumeralTables
from .decimal import break_up_word
from .financial import parse_financial_integer

logger = logging.getLogger(__name__)


class JapaneseNumberFormatter:
    def __init__(self, tables: Optional[NumeralTables] = None):
        self.tables = tables or DEFAULT_TABLES

    def _validate(self, raw: str) -> Optional[str]:
        """不正な理由を返す。正しければ None"""
        tables = self.tables

        unknown = [c for c in raw if c not in tables.alphabet]
        if unknown:
            return f"unrecognized characters {unknown!r}"

        separators = [i for i, c in enumerate(raw) if c in tables.decimal_separators]
        if len(separators) > 1:
            return "multiple decimal separators"

        if separators:
            index = separators[0]
            if index == 0:
                return "missing whole part"
            fraction = raw[index + 1:]
            if not fraction:
                return "missing decimal digits"
            if not all(tables.is_digit(c) for c in fraction):
                return f"invalid decimal digits {fraction!r}"

        return None

    def format(self, raw: str) -> Optional[str]:
        """
        数値文字列を算用数字の文字列に変換

        Args:
            raw: 大字・漢数字・算用数字からなる文字列

        Returns:
            変換結果。入力が不正な場合は None

        Examples:
            >>> JapaneseNumberFormatter().format('壱萬弐仟')
            '12000'
            >>> JapaneseNumberFormatter().format('四割') is None
            True
        """
        if not isinstance(raw, str) or not raw:
            logger.debug(f"Rejected {raw!r}: empty input")
            return None

        reason = self._validate(raw)
        if reason:
            logger.debug(f"Rejected {raw!r}: {reason}")
            return None

        whole, decimal = break_up_word(raw, self.tables.digits, self.tables.decimal_separators)
        value = parse_financial_integer(whole, self.tables.digits, self.tables.separators)
        return value + decimal

    def format_many(self, values: Iterable[str]) -> List[Optional[str]]:
        return [self.format(v) for v in values]
