"""
legalnum: 数字・位取り記号テーブル

大字（壱・弐・参・拾・萬 …）の解析で使う定数テーブルを一元管理するモジュール。
- 数字テーブル（文字 → 0〜9）
- 位取り記号テーブル（1〜2文字 → 桁数）
- 小数点テーブル

テーブルはインポート時に一度だけ構築され、全呼び出しで共有される（読み取り専用）。
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Union

import yaml

logger = logging.getLogger(__name__)

# ==============================================================================
# 数字
# ==============================================================================

DIGITS: Dict[str, int] = {
    # 大字
    '零': 0,
    '壱': 1, '壹': 1, '弌': 1,
    '弐': 2, '貳': 2, '弍': 2,
    '参': 3, '參': 3, '弎': 3,
    '肆': 4,
    '伍': 5,
    '陸': 6,
    '漆': 7, '柒': 7,
    '捌': 8,
    '玖': 9,
    # 通常の漢数字
    '〇': 0,
    '一': 1, '二': 2, '三': 3, '四': 4,
    '五': 5, '六': 6, '七': 7, '八': 8, '九': 9,
    # 算用数字（半角・全角）
    '0': 0, '０': 0,
    '1': 1, '１': 1,
    '2': 2, '２': 2,
    '3': 3, '３': 3,
    '4': 4, '４': 4,
    '5': 5, '５': 5,
    '6': 6, '６': 6,
    '7': 7, '７': 7,
    '8': 8, '８': 8,
    '9': 9, '９': 9,
}

# ==============================================================================
# 位取り記号
# ==============================================================================

# 値は「その記号を適用した直後に桁列が持つべき長さ」
# 拾 → 1: 一の位を 0 で埋め、続く数字が十の位に入る
# 2文字の記号（拾萬 など）は1文字の記号より先に照合される
FINANCIAL_SEPARATORS: Dict[str, int] = {
    '拾': 1, '什': 1,
    '佰': 2, '陌': 2,
    '仟': 3, '阡': 3,
    '萬': 4, '万': 4,
    '拾萬': 5, '拾万': 5,
    '佰萬': 6, '佰万': 6,
    '仟萬': 7, '仟万': 7,
    '億': 8,
    '拾億': 9,
    '佰億': 10,
    '仟億': 11,
    '兆': 12,
    '拾兆': 13,
    '佰兆': 14,
    '仟兆': 15,
    '京': 16,
}

# ==============================================================================
# 小数点
# ==============================================================================

DECIMAL_SEPARATORS: FrozenSet[str] = frozenset({'.', '．', '点'})


@dataclass(frozen=True)
class NumeralTables:
    """解析に使うテーブル一式"""
    digits: Mapping[str, int]
    separators: Mapping[str, int]
    decimal_separators: FrozenSet[str]
    marker_glyphs: FrozenSet[str] = field(init=False)
    alphabet: FrozenSet[str] = field(init=False)

    def __post_init__(self):
        markers = frozenset(c for key in self.separators for c in key)
        object.__setattr__(self, 'marker_glyphs', markers)
        object.__setattr__(
            self, 'alphabet',
            frozenset(self.digits) | markers | frozenset(self.decimal_separators),
        )

    def is_digit(self, char: str) -> bool:
        return char in self.digits

    def is_marker(self, char: str) -> bool:
        return char in self.marker_glyphs


DEFAULT_TABLES = NumeralTables(
    digits=DIGITS,
    separators=FINANCIAL_SEPARATORS,
    decimal_separators=DECIMAL_SEPARATORS,
)


def _validate_digits(entries: Mapping) -> Dict[str, int]:
    result = {}
    for glyph, value in entries.items():
        if not isinstance(glyph, str) or len(glyph) != 1:
            raise ValueError(f"Digit key must be a single character: {glyph!r}")
        if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 9:
            raise ValueError(f"Digit value for {glyph!r} must be 0-9: {value!r}")
        result[glyph] = value
    return result


def _validate_separators(entries: Mapping) -> Dict[str, int]:
    result = {}
    for key, power in entries.items():
        if not isinstance(key, str) or len(key) not in (1, 2):
            raise ValueError(f"Separator key must be 1 or 2 characters: {key!r}")
        if not isinstance(power, int) or isinstance(power, bool) or power < 0:
            raise ValueError(f"Separator power for {key!r} must be a non-negative integer: {power!r}")
        result[key] = power
    return result


def _validate_decimal_separators(entries: Iterable) -> FrozenSet[str]:
    result = set()
    for glyph in entries:
        if not isinstance(glyph, str) or len(glyph) != 1:
            raise ValueError(f"Decimal separator must be a single character: {glyph!r}")
        result.add(glyph)
    return frozenset(result)


def extend_tables(
    base: NumeralTables,
    digits: Optional[Mapping] = None,
    separators: Optional[Mapping] = None,
    decimal_separators: Optional[Iterable] = None,
) -> NumeralTables:
    """
    既存テーブルに項目を追加した新しいテーブルを返す

    Raises:
        ValueError: 項目の形式が不正な場合
    """
    new_digits = dict(base.digits)
    new_digits.update(_validate_digits(digits or {}))

    new_separators = dict(base.separators)
    new_separators.update(_validate_separators(separators or {}))

    new_decimal = base.decimal_separators | _validate_decimal_separators(decimal_separators or [])

    overlap = set(new_digits) & {c for key in new_separators for c in key}
    if overlap:
        raise ValueError(f"Glyphs cannot be both digits and separators: {sorted(overlap)}")

    return NumeralTables(
        digits=new_digits,
        separators=new_separators,
        decimal_separators=new_decimal,
    )


def load_tables(path: Union[str, Path], base: NumeralTables = DEFAULT_TABLES) -> NumeralTables:
    """
    YAMLファイルから追加テーブルを読み込む

    形式:
        digits:
          弌: 1
        separators:
          拾萬: 5
        decimal_separators: ['・']

    Args:
        path: YAMLファイルのパス
        base: 拡張元のテーブル

    Returns:
        拡張済みの NumeralTables

    Raises:
        FileNotFoundError: ファイルが存在しない場合
        ValueError: YAMLの内容が不正な場合
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Table file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Table file must contain a mapping: {path}")

    unknown = set(data) - {'digits', 'separators', 'decimal_separators'}
    if unknown:
        raise ValueError(f"Unknown keys in {path}: {sorted(unknown)}")

    for key in ('digits', 'separators'):
        if key in data and not isinstance(data[key], dict):
            raise ValueError(f"'{key}' must be a mapping in {path}")
    if 'decimal_separators' in data and not isinstance(data['decimal_separators'], list):
        raise ValueError(f"'decimal_separators' must be a list in {path}")

    tables = extend_tables(
        base,
        digits=data.get('digits'),
        separators=data.get('separators'),
        decimal_separators=data.get('decimal_separators'),
    )
    logger.info(f"Loaded numeral tables from {path}")
    return tables
