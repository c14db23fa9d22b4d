"""
Unit tests for the LCCN, cataloging source and field length rules.
"""

import pytest

from marcchecks import Settings, check_010, check_040_present, check_field_length
from marcchecks.rules.identifiers import normalize_lccn
from conftest import build_record, data_field


def create_field(tag, ind1=' ', ind2=' ', **subfields):
    """Helper to create a field with subfields."""
    return data_field(tag, ind1, ind2, list(subfields.items()))


def lccn_messages(lccn, settings=None):
    record = build_record(create_field('010', a=lccn))
    return [str(d) for d in check_010(record, settings)]


class TestNormalizeLccn:
    """Test the blank-padded LCCN forms."""

    def test_normalize(self):
        """Test 8- and 10-digit numbers."""
        assert normalize_lccn('85012345') == '   85012345 '
        assert normalize_lccn('2004012345') == '  2004012345'


class TestCheck010:
    """Test check_010."""

    @pytest.mark.parametrize("lccn", ['   85012345 ', '  2004012345', '   00012345 '])
    def test_valid_numbers(self, lccn):
        """Test properly formed numbers."""
        assert lccn_messages(lccn) == []

    def test_old_two_digit_year(self):
        """Test an 8-digit number starting with a reserved year."""
        assert lccn_messages('   75012345 ') == ['010: First digits of LCCN are 75.']

    def test_ten_digit_year_out_of_range(self):
        """Test a 10-digit number outside the accepted years."""
        assert lccn_messages('  2010012345') == ['010: First digits of LCCN are 2010']

    def test_ten_digit_year_from_settings(self):
        """Test a wider window of 10-digit years."""
        settings = Settings(lccn_ten_digit_years=(2001, 2030))
        assert lccn_messages('  2010012345', settings) == []

    def test_no_number(self):
        """Test a subfield without an 8-10 digit run."""
        assert lccn_messages('1234567') == [
            "010: Could not find an 8-10 digit number in subfield 'a'.",
            "010: LCCN subfield 'a' is not 8 or 10 digits",
        ]

    def test_nine_digits(self):
        """Test a number of the wrong length."""
        assert lccn_messages('  123456789') == ["010: LCCN subfield 'a' is not 8 or 10 digits"]

    def test_improper_spacing(self):
        """Test a valid number without its padding."""
        assert lccn_messages('85012345') == ["010: Subfield 'a' has improper spacing."]

    def test_non_digits(self):
        """Test a prefix in the number."""
        assert lccn_messages('n  85012345 ') == ["010: Subfield 'a' has non-digits."]

    def test_no_010(self, make_record):
        """Test a record without an LCCN."""
        assert check_010(make_record()) == []

    def test_clean_record(self, book_record):
        """Test the clean book record."""
        assert check_010(book_record) == []


class TestCheck040Present:
    """Test check_040_present."""

    def test_present(self, book_record):
        """Test a record with an 040."""
        assert check_040_present(book_record) == []

    def test_missing(self, make_record):
        """Test a record without an 040."""
        assert [str(d) for d in check_040_present(make_record())] == ['040: Record lacks 040 field.']


class TestCheckFieldLength:
    """Test check_field_length."""

    def test_long_field(self):
        """Test a field over the default limit."""
        record = build_record(create_field('500', a='x' * 1900 + '.'), create_field('520', a='Short.'))
        assert [str(d) for d in check_field_length(record)] == ['500: Field is longer than 1870 bytes.']

    def test_limit_from_settings(self, book_record):
        """Test a lower limit supplied through settings."""
        diagnostics = check_field_length(book_record, Settings(max_field_length=40))
        assert [d.tag for d in diagnostics] == ['504']
        assert diagnostics[0].message == 'Field is longer than 40 bytes.'

    def test_clean_record(self, book_record):
        """Test the clean book record."""
        assert check_field_length(book_record) == []
