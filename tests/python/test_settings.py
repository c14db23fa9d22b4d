"""
Unit tests for Settings, DateWindow and Diagnostic rendering.
"""

from dataclasses import FrozenInstanceError

import pytest
from pydantic import ValidationError

from marcchecks import DEFAULT_SETTINGS, SEPARATOR, DateWindow, Diagnostic, Settings, render_all
from marcchecks.settings import DATE_ENTERED_LATEST_ENV, MAX_FIELD_LENGTH_ENV, EnvironmentOverrides


class TestDateWindow:
    """Test two-digit year expansion."""

    def test_default_window(self):
        """Test years on both sides of the window."""
        window = DateWindow()
        assert window.expand(0) == 2000
        assert window.expand(6) == 2006
        assert window.expand(7) is None
        assert window.expand(79) is None
        assert window.expand(80) == 1980
        assert window.expand(99) == 1999

    def test_description(self):
        """Test the wording used in date-entered diagnostics."""
        assert DateWindow().description == 'after 2006 or before 1980'
        assert DateWindow(latest_2000s=26).description == 'after 2026 or before 1980'


class TestSettings:
    """Test construction and overrides."""

    def test_defaults(self):
        """Test the default profile."""
        assert DEFAULT_SETTINGS.max_field_length == 1870
        assert DEFAULT_SETTINGS.lccn_ten_digit_years == (2001, 2006)
        assert 'Inc.' in DEFAULT_SETTINGS.abbreviation_exceptions
        assert 'Foreign countries' in DEFAULT_SETTINGS.geographic_exceptions

    def test_settings_are_frozen(self):
        """Test that settings cannot be changed in place."""
        with pytest.raises(FrozenInstanceError):
            DEFAULT_SETTINGS.max_field_length = 10

    def test_with_overrides(self):
        """Test copying settings with new values."""
        settings = DEFAULT_SETTINGS.with_overrides(max_field_length=500)
        assert settings.max_field_length == 500
        assert DEFAULT_SETTINGS.max_field_length == 1870

    def test_invalid_values_raise(self):
        """Test that inconsistent settings are rejected."""
        with pytest.raises(ValueError):
            Settings(max_field_length=0)
        with pytest.raises(ValueError):
            Settings(lccn_ten_digit_years=(2006, 2001))
        with pytest.raises(ValueError):
            Settings(date_entered_window=DateWindow(latest_2000s=90, earliest_1900s=80))

    def test_from_env(self):
        """Test overrides taken from environment variables."""
        settings = Settings.from_env({
            DATE_ENTERED_LATEST_ENV: '25',
            MAX_FIELD_LENGTH_ENV: '9999',
        })
        assert settings.date_entered_window.expand(25) == 2025
        assert settings.max_field_length == 9999

    def test_from_env_without_overrides(self):
        """Test that an empty environment gives the defaults."""
        assert Settings.from_env({}) == DEFAULT_SETTINGS

    def test_from_env_rejects_non_integers(self):
        """Test malformed environment values."""
        with pytest.raises(ValidationError, match='max_field_length'):
            Settings.from_env({MAX_FIELD_LENGTH_ENV: 'lots'})
        with pytest.raises(ValueError):
            Settings.from_env({DATE_ENTERED_LATEST_ENV: 'soon'})

    @pytest.mark.parametrize("value", ['0', '-5'])
    def test_from_env_rejects_non_positive_length(self, value):
        """Test that the field-length limit must be positive."""
        with pytest.raises(ValidationError, match='must be positive'):
            Settings.from_env({MAX_FIELD_LENGTH_ENV: value})

    def test_from_env_rejects_year_outside_window(self):
        """Test that the date-entered year must fit two digits below 80."""
        with pytest.raises(ValidationError, match='date_entered_latest'):
            Settings.from_env({DATE_ENTERED_LATEST_ENV: '85'})

    def test_from_env_ignores_blank_and_unrelated_values(self):
        """Test empty variables and other prefixes."""
        settings = Settings.from_env({MAX_FIELD_LENGTH_ENV: '', 'OTHER_MAX_FIELD_LENGTH': '10'})
        assert settings == DEFAULT_SETTINGS

    def test_from_process_environment(self, monkeypatch):
        """Test reading the real environment through the settings model."""
        monkeypatch.setenv(MAX_FIELD_LENGTH_ENV, '500')
        monkeypatch.setenv(DATE_ENTERED_LATEST_ENV, '30')
        settings = Settings.from_env()
        assert settings.max_field_length == 500
        assert settings.date_entered_window.expand(30) == 2030


class TestEnvironmentOverrides:
    """Test the typed environment model."""

    def test_only_set_values_become_changes(self):
        """Test that unset variables leave defaults alone."""
        assert EnvironmentOverrides.from_mapping({}).changes() == {}
        overrides = EnvironmentOverrides.from_mapping({MAX_FIELD_LENGTH_ENV: '100'})
        assert overrides.max_field_length == 100
        assert overrides.changes() == {'max_field_length': 100}


class TestDiagnostic:
    """Test diagnostic values and rendering."""

    def test_render_single_part(self):
        """Test the tag-colon-message format."""
        diagnostic = Diagnostic.of('040', 'Record lacks 040 field.')
        assert str(diagnostic) == '040: Record lacks 040 field.'
        assert diagnostic.render() == str(diagnostic)

    def test_render_joins_parts_with_separator(self):
        """Test multi-part messages."""
        diagnostic = Diagnostic.of('008', 'Bytes 0-5, Date entered has bad characters.', 'Date entered is not 6 digits')
        assert SEPARATOR == '\t'
        assert str(diagnostic) == (
            '008: Bytes 0-5, Date entered has bad characters.\tDate entered is not 6 digits'
        )

    def test_record_level_diagnostic(self):
        """Test that a diagnostic without a tag renders only its message."""
        assert str(Diagnostic.of(None, 'Pub. Dates: mismatch')) == 'Pub. Dates: mismatch'

    def test_parts_are_normalized_to_tuple(self):
        """Test construction from a string or a list."""
        assert Diagnostic('300', 'one').parts == ('one',)
        assert Diagnostic('300', ['one', 'two']).parts == ('one', 'two')
        assert Diagnostic('300', ['one']) == Diagnostic.of('300', 'one')

    def test_render_all(self):
        """Test rendering a list in order."""
        diagnostics = [Diagnostic.of('500', 'a'), Diagnostic.of('010', 'b')]
        assert render_all(diagnostics) == ['500: a', '010: b']
