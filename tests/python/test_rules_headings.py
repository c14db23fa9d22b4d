"""
Unit tests for heading, title, language and geographic consistency rules.
"""

import pytest

from marcchecks import (
    Settings,
    check_041_vs_008_lang,
    check_240_ind1_vs_1xx,
    check_245_ind1_vs_1xx,
    check_490_vs_8xx,
    geog_subject_vs_043,
)
from conftest import BOOK_008, build_record, control_field, data_field


def create_field(tag, ind1=' ', ind2=' ', **subfields):
    """Helper to create a field with subfields."""
    return data_field(tag, ind1, ind2, list(subfields.items()))


class Test490Vs8xx:
    """Test check_490_vs_8xx."""

    @pytest.mark.scenario
    def test_traced_series_without_8xx(self):
        """Test a traced series with no series added entry."""
        record = build_record(create_field('490', '1', ' ', a='Cat studies ;', v='v. 3'))
        assert [str(d) for d in check_490_vs_8xx(record)] == ['490: Indicator is 1 but 8xx does not exist.']

    def test_traced_series_with_8xx(self):
        """Test a traced series with its added entry."""
        record = build_record(
            create_field('490', '1', ' ', a='Cat studies ;', v='v. 3'),
            create_field('830', ' ', '0', a='Cat studies ;', v='v. 3.'),
        )
        assert check_490_vs_8xx(record) == []

    def test_untraced_series(self):
        """Test that indicator 0 needs no added entry."""
        record = build_record(create_field('490', '0', ' ', a='Cat studies'))
        assert check_490_vs_8xx(record) == []


class Test240Ind1Vs1xx:
    """Test check_240_ind1_vs_1xx."""

    def test_without_main_entry(self):
        """Test a uniform title without a 1xx."""
        record = build_record(create_field('240', '1', '0', a='Works'))
        assert [str(d) for d in check_240_ind1_vs_1xx(record)] == ['240: Is present but 1xx does not exist.']

    def test_indicator_0_with_main_entry(self):
        """Test a non-printed uniform title."""
        record = build_record(
            create_field('100', '1', ' ', a='Author, A.'),
            create_field('240', '0', '0', a='Works'),
        )
        assert [str(d) for d in check_240_ind1_vs_1xx(record)] == ['240: First indicator is 0 but 1xx exists.']

    def test_consistent(self):
        """Test a printed uniform title with a main entry, and no 240 at all."""
        record = build_record(
            create_field('110', '2', ' ', a='Cat Society.'),
            create_field('240', '1', '0', a='Works'),
        )
        assert check_240_ind1_vs_1xx(record) == []
        assert check_240_ind1_vs_1xx(build_record()) == []


class Test245Ind1Vs1xx:
    """Test check_245_ind1_vs_1xx."""

    def test_clean_record(self, book_record):
        """Test indicator 1 with a main entry."""
        assert check_245_ind1_vs_1xx(book_record) == []

    def test_indicator_1_without_main_entry(self):
        """Test a title added entry without a 1xx."""
        record = build_record(create_field('245', '1', '0', a='Title.'))
        assert [str(d) for d in check_245_ind1_vs_1xx(record)] == ['245: Indicator is 1 but 1xx does not exist.']

    def test_indicator_0_with_main_entry(self):
        """Test a title main entry when a 1xx exists."""
        record = build_record(
            create_field('100', '1', ' ', a='Author, A.'),
            create_field('245', '0', '0', a='Title.'),
        )
        assert [str(d) for d in check_245_ind1_vs_1xx(record)] == ['245: Indicator is 0 but 1xx exists.']

    def test_blank_indicator_is_not_compared(self):
        """Test that only indicators 0 and 1 are compared."""
        record = build_record(create_field('100', '1', ' ', a='Author, A.'), create_field('245', ' ', '0', a='Title.'))
        assert check_245_ind1_vs_1xx(record) == []


class Test041Vs008Lang:
    """Test check_041_vs_008_lang."""

    def test_matching_language(self):
        """Test an 041 whose first code is the 008 language."""
        record = build_record(control_field('008', BOOK_008), create_field('041', '1', ' ', a='engfre', h='fre'))
        assert check_041_vs_008_lang(record) == []

    def test_mismatched_language(self):
        """Test an 041 whose first code differs from the 008."""
        record = build_record(control_field('008', BOOK_008), create_field('041', '0', ' ', a='fre', b='eng'))
        assert [str(d) for d in check_041_vs_008_lang(record)] == [
            '041: First code (fre) does not match 008 bytes 35-37 (Language eng).',
        ]

    def test_unreadable_008_language(self):
        """Test an 008 language that is not a code."""
        field008 = BOOK_008[:35] + '|||' + BOOK_008[38:]
        record = build_record(control_field('008', field008))
        assert [str(d) for d in check_041_vs_008_lang(record)] == ['008: Could not get language code, |||.']

    def test_without_041(self, book_record):
        """Test a record without an 041."""
        assert check_041_vs_008_lang(book_record) == []


class TestGeogSubjectVs043:
    """Test geog_subject_vs_043."""

    def test_geographic_subdivision_without_043(self):
        """Test a 6xx $z without an 043."""
        record = build_record(create_field('650', ' ', '0', a='Cats', z='France.'))
        assert [str(d) for d in geog_subject_vs_043(record)] == [
            "043: Record has 651 or 6xx subfield 'z' but no 043.",
        ]

    def test_651_without_043(self):
        """Test a geographic subject heading without an 043."""
        record = build_record(create_field('651', ' ', '0', a='France', x='History.'))
        assert len(geog_subject_vs_043(record)) == 1

    def test_with_043(self):
        """Test that an 043 satisfies the rule."""
        record = build_record(
            create_field('043', a='e-fr---'),
            create_field('650', ' ', '0', a='Cats', z='France.'),
        )
        assert geog_subject_vs_043(record) == []

    @pytest.mark.parametrize("place", ['Foreign countries.', 'English-speaking countries', 'Foreign countries,'])
    def test_exceptions(self, place):
        """Test subdivisions that are not places."""
        record = build_record(create_field('650', ' ', '0', a='Cats', z=place))
        assert geog_subject_vs_043(record) == []

    def test_custom_exceptions(self):
        """Test exceptions supplied through settings."""
        record = build_record(create_field('650', ' ', '0', a='Cats', z='Outer space.'))
        settings = Settings(geographic_exceptions=frozenset({'Outer space'}))
        assert geog_subject_vs_043(record, settings) == []
        assert len(geog_subject_vs_043(record)) == 1

    def test_no_subjects(self, book_record):
        """Test subjects without places."""
        assert geog_subject_vs_043(book_record) == []
