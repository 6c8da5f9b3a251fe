"""
legalnum: 大字の整数部パーサ

大字表記（壱萬弐仟、参仟萬 …）を算用数字の文字列に変換する。

アルゴリズム:
- 下の桁（文字列の末尾）から1文字ずつ走査する
- 数字なら桁列に追加する
- 位取り記号なら桁列を記号の桁数まで 0 で埋める
  （2文字の記号を先に照合し、一致しなければ1文字で照合する）
- 最上位が記号で終わる場合（拾 = 10, 佰 = 100）は暗黙の 1 を補う
"""

from collections import deque
from typing import List, Mapping

from ..utils.number_parts import DIGITS, FINANCIAL_SEPARATORS
from .decimal import break_up_word


def _resize(result: List[str], power: int) -> None:
    """
    桁列の長さを power に揃える

    power が現在の長さより小さい場合は下位の桁を切り捨てる。
    記号の順序が崩れた入力でのみ起こり、従来の挙動として維持している。
    """
    if power > len(result):
        result.extend('0' * (power - len(result)))
    else:
        del result[power:]


def parse_financial_integer(
    whole: str,
    digits: Mapping[str, int] = DIGITS,
    separators: Mapping[str, int] = FINANCIAL_SEPARATORS,
) -> str:
    """
    大字の整数部を算用数字の文字列に変換

    認識できない文字は無視する（入力の検証は呼び出し側の責務）。

    Args:
        whole: 小数点を含まない整数部
        digits: 数字テーブル
        separators: 位取り記号テーブル

    Returns:
        算用数字の文字列（空にはならない）

    Examples:
        >>> parse_financial_integer('弐佰参')
        '203'
        >>> parse_financial_integer('佰')
        '100'
        >>> parse_financial_integer('参仟萬')
        '30000000'
    """
    chars = deque(reversed(whole))
    result: List[str] = []
    last_was_digit = False

    while chars:
        c = chars.popleft()

        if c in digits:
            result.append(str(digits[c]))
            last_was_digit = True
            continue
        last_was_digit = False

        # 先読み文字 + 現在の文字 で2文字の記号を照合
        if chars:
            pair = chars[0] + c
            if pair in separators:
                _resize(result, separators[pair])
                chars.popleft()
                continue

        if c in separators:
            _resize(result, separators[c])

    if not last_was_digit:
        result.append('1')

    return ''.join(reversed(result))


def parse_financial(japanese: str) -> str:
    """
    小数部を含む大字を変換

    Examples:
        >>> parse_financial('壱拾弐点伍')
        '12.5'
    """
    whole, decimal = break_up_word(japanese)
    return parse_financial_integer(whole) + decimal
