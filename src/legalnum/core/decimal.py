"""
整数部と小数部の分割

'壱拾弐点伍' → ('壱拾弐', '.5')
"""

from typing import Mapping, Iterable, Tuple

from ..utils.number_parts import DIGITS, DECIMAL_SEPARATORS


def find_decimal_separator(japanese: str, decimal_separators: Iterable[str] = DECIMAL_SEPARATORS) -> int:
    """最初の小数点の位置を返す。存在しなければ -1"""
    for i, char in enumerate(japanese):
        if char in decimal_separators:
            return i
    return -1


def break_up_word(
    japanese: str,
    digits: Mapping[str, int] = DIGITS,
    decimal_separators: Iterable[str] = DECIMAL_SEPARATORS,
) -> Tuple[str, str]:
    """
    数値文字列を整数部と小数部に分割

    小数部は '.' と変換済みの数字列からなる正規形で返す。
    小数点がない場合、小数部は空文字列。
    小数部に数字以外の文字があれば読み飛ばす（検証は呼び出し側の責務）。

    Args:
        japanese: 数値文字列
        digits: 数字テーブル
        decimal_separators: 小数点として扱う文字

    Returns:
        (整数部, 小数部) のタプル

    Examples:
        >>> break_up_word('壱拾弐点伍')
        ('壱拾弐', '.5')
        >>> break_up_word('参佰')
        ('参佰', '')
    """
    index = find_decimal_separator(japanese, decimal_separators)
    if index < 0:
        return japanese, ''

    whole = japanese[:index]
    fraction = ''.join(str(digits[c]) for c in japanese[index + 1:] if c in digits)
    return whole, '.' + fraction
