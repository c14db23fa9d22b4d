"""
Unit tests for spacing, repeated punctuation, hyphen and empty subfield rules.
"""

from marcchecks import (
    check_double_periods,
    check_internal_spaces,
    check_trailing_spaces,
    find_empty_subfields,
    find_floating_hyphens,
)
from conftest import CIP_LEADER, build_record, data_field


def create_field(tag, ind1=' ', ind2=' ', **subfields):
    """Helper to create a field with subfields."""
    return data_field(tag, ind1, ind2, list(subfields.items()))


class TestInternalSpaces:
    """Test check_internal_spaces."""

    def test_clean_record(self, book_record):
        """Test a record without spacing problems."""
        assert check_internal_spaces(book_record) == []

    def test_multiple_internal_spaces(self):
        """Test a run of spaces inside a subfield."""
        record = build_record(create_field('245', a='Title  with gap.'))
        assert [str(d) for d in check_internal_spaces(record)] == ['245: has multiple internal spaces.']

    def test_leading_space(self):
        """Test a subfield starting with a space."""
        record = build_record(create_field('500', a=' Note.'))
        assert [str(d) for d in check_internal_spaces(record)] == ['500: Subfield starts with a space.']

    def test_exempt_fields(self):
        """Test that 010, 035, 787 and leading spaces in 016 are not reported."""
        record = build_record(
            create_field('010', a='   85012345 '),
            create_field('016', a=' 12345'),
            create_field('035', a='(OCoLC)  123'),
            create_field('787', a='Related  title'),
        )
        assert check_internal_spaces(record) == []

    def test_016_internal_spaces_still_reported(self):
        """Test that 016 is exempt only from the leading-space check."""
        record = build_record(create_field('016', a=' 12  345'))
        assert [str(d) for d in check_internal_spaces(record)] == ['016: has multiple internal spaces.']


class TestTrailingSpaces:
    """Test check_trailing_spaces."""

    def test_trailing_space(self):
        """Test a last subfield ending with a space."""
        record = build_record(create_field('650', a='Cats ', x='History. '))
        assert [str(d) for d in check_trailing_spaces(record)] == ['650: has trailing spaces.']

    def test_only_last_subfield_is_checked(self):
        """Test that earlier subfields may end in a space."""
        record = build_record(create_field('650', a='Cats ', x='History.'))
        assert check_trailing_spaces(record) == []

    def test_016_is_exempt(self):
        """Test the 016 exemption."""
        record = build_record(create_field('016', a='12345 '))
        assert check_trailing_spaces(record) == []


class TestDoublePeriods:
    """Test check_double_periods."""

    def test_double_period(self):
        """Test two periods in a row."""
        record = build_record(create_field('500', a='Ends twice..'))
        assert [d.message for d in check_double_periods(record)] == [
            'has multiple consecutive periods that do not appear to be ellipses.'
        ]

    def test_ellipsis_is_accepted(self):
        """Test that three periods are taken as an ellipsis."""
        record = build_record(create_field('505', a='Part one ... Part two.'))
        assert check_double_periods(record) == []

    def test_double_comma(self):
        """Test two commas in a row."""
        record = build_record(create_field('260', b='Pub,,'))
        assert [str(d) for d in check_double_periods(record)] == ['260: has multiple consecutive commas.']


class TestFloatingHyphens:
    """Test find_floating_hyphens."""

    def test_floating_hyphen(self):
        """Test a space-hyphen-space in a title."""
        record = build_record(create_field('245', a='Cats - a history.'))
        assert [str(d) for d in find_floating_hyphens(record)] == [
            '245: May have a floating hyphen, Cats - a h'
        ]

    def test_fields_reported_in_tag_list_order(self):
        """Test that fields are visited in the order of the checked tags."""
        record = build_record(
            create_field('500', a='Note - one.'),
            create_field('245', a='Title - two.'),
        )
        assert [d.tag for d in find_floating_hyphens(record)] == ['245', '500']

    def test_unchecked_fields_and_hyphenated_words(self):
        """Test that other tags and ordinary hyphens are ignored."""
        record = build_record(
            create_field('650', a='Cats - History.'),
            create_field('245', a='Well-known cats.'),
        )
        assert find_floating_hyphens(record) == []


class TestEmptySubfields:
    """Test find_empty_subfields."""

    def test_empty_subfield(self):
        """Test a subfield with no data."""
        record = build_record(create_field('020', a='', c='$10.00'))
        assert [str(d) for d in find_empty_subfields(record)] == ['020: Subfield a is empty.']

    def test_findings_in_field_order(self):
        """Test several empty subfields across fields."""
        record = build_record(
            create_field('010', a=''),
            create_field('300', a='24 p.', b=''),
        )
        assert [str(d) for d in find_empty_subfields(record)] == [
            '010: Subfield a is empty.',
            '300: Subfield b is empty.',
        ]

    def test_037_skipped_in_cip(self):
        """Test that CIP records may carry an empty 037."""
        field = create_field('037', b='')
        assert find_empty_subfields(build_record(field, leader=CIP_LEADER)) == []
        assert len(find_empty_subfields(build_record(field))) == 1
