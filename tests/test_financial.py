"""
financial.py のテスト

テスト対象:
- 数字のみの入力（位取り記号なし）
- 1文字・2文字の位取り記号
- 最上位が記号で終わる場合の暗黙の 1
- 記号の順序が崩れた場合の切り捨て（従来の挙動を固定）
- 認識できない文字の無視
"""

import pytest

from legalnum.core.financial import parse_financial, parse_financial_integer
from legalnum.utils.number_parts import FINANCIAL_SEPARATORS


class TestDigitsOnly:
    """数字のみの入力は各桁をそのまま連結する"""

    def test_financial_digits(self):
        assert parse_financial_integer('伍弐') == '52'

    def test_leading_zero_is_kept(self):
        assert parse_financial_integer('零壱') == '01'

    def test_standard_kanji_digits(self):
        assert parse_financial_integer('〇一二') == '012'

    def test_arabic_digits(self):
        assert parse_financial_integer('１２3') == '123'

    @pytest.mark.parametrize("text,expected", [
        ('壱', '1'),
        ('玖捌漆', '987'),
        ('參貳壹', '321'),
        ('陸肆', '64'),
    ])
    def test_no_implicit_one(self, text, expected):
        assert parse_financial_integer(text) == expected


class TestSingleGlyphMarkers:
    """1文字の位取り記号"""

    def test_bare_hundred(self):
        assert parse_financial_integer('佰') == '100'

    def test_bare_ten(self):
        assert parse_financial_integer('拾') == '10'

    def test_two_hundred_three(self):
        assert parse_financial_integer('弐佰参') == '203'

    def test_ten_with_digits(self):
        assert parse_financial_integer('壱拾弐') == '12'
        assert parse_financial_integer('拾弐') == '12'
        assert parse_financial_integer('弐拾') == '20'

    def test_variant_markers(self):
        assert parse_financial_integer('陌') == '100'
        assert parse_financial_integer('阡') == '1000'
        assert parse_financial_integer('什') == '10'

    def test_ten_thousand_and_thousands(self):
        assert parse_financial_integer('壱萬弐仟') == '12000'
        assert parse_financial_integer('壱万') == '10000'

    def test_large_markers(self):
        assert parse_financial_integer('伍億') == '500000000'
        assert parse_financial_integer('壱兆') == '1000000000000'
        assert parse_financial_integer('京') == '1' + '0' * 16

    def test_arabic_digit_with_marker(self):
        assert parse_financial_integer('5萬') == '50000'


class TestTwoGlyphMarkers:
    """2文字の位取り記号は1文字より先に照合される"""

    def test_ten_ten_thousand(self):
        assert parse_financial_integer('拾萬') == '100000'

    def test_thousand_ten_thousand(self):
        assert parse_financial_integer('参仟萬') == '30000000'

    def test_digits_below_two_glyph_marker(self):
        assert parse_financial_integer('弐拾萬伍仟') == '205000'

    def test_modern_ten_thousand_glyph(self):
        assert parse_financial_integer('伍佰万') == '5000000'

    def test_hundred_hundred_million(self):
        assert parse_financial_integer('壱佰億') == '10000000000'


class TestImplicitLeadingOne:
    """最上位が記号の場合は 1 を補う"""

    @pytest.mark.parametrize("key,power", sorted(FINANCIAL_SEPARATORS.items()))
    def test_every_bare_marker(self, key, power):
        assert parse_financial_integer(key) == '1' + '0' * power

    def test_empty_input(self):
        assert parse_financial_integer('') == '1'

    def test_leading_marker_before_digits(self):
        result = parse_financial_integer('佰伍')
        assert result[0] == '1'
        assert result == '105'


class TestPositionalOrder:
    """記号の後に追加された数字は、記号による 0 埋めより上の桁に入る"""

    @pytest.mark.parametrize("text,expected", [
        ('弐佰', '200'),
        ('弐佰参拾', '230'),
        ('玖仟玖佰玖拾玖', '9999'),
        ('壱萬', '10000'),
    ])
    def test_digit_after_marker_is_more_significant(self, text, expected):
        assert parse_financial_integer(text) == expected

    def test_length_bounded_by_largest_power(self):
        largest = max(FINANCIAL_SEPARATORS.values())
        assert len(parse_financial_integer('玖京')) == largest + 1


class TestLegacyBehaviour:
    """従来の挙動を固定する（修正しない）"""

    def test_smaller_power_truncates_low_digits(self):
        """仟 (3) が萬 (4) + 弐 の後に来ると下位の桁が切り捨てられる"""
        assert parse_financial_integer('仟弐萬') == '1000'

    def test_unrecognized_glyph_is_ignored(self):
        assert parse_financial_integer('壱X拾') == '10'

    def test_unrecognized_glyph_only(self):
        assert parse_financial_integer('X') == '1'

    def test_unrecognized_glyph_between_digits(self):
        assert parse_financial_integer('弐?参') == '23'


class TestParseFinancial:
    """小数部を含む変換"""

    def test_with_decimal(self):
        assert parse_financial('壱拾弐点伍') == '12.5'

    def test_without_decimal(self):
        assert parse_financial('参佰') == '300'

    def test_fullwidth_point(self):
        assert parse_financial('壱．弐参') == '1.23'
