"""
Pytest configuration and shared fixtures for marcchecks tests.

Records are built with pymarc so the tests exercise the same adapter path as
real callers.
"""

import pytest
from pymarc import Field, Record, Subfield

BOOK_LEADER = "00000nam a2200000 a 4500"
CIP_LEADER = "00000nam a22000008a 4500"
VIDEO_LEADER = "00000ngm a2200000 a 4500"

# 008 for a 2004 New York book with illustrations, bibliography and index
BOOK_008 = "040520s2004    nyua     b    001 0 eng d"


def control_field(tag, data):
    """Helper to create a control field."""
    return Field(tag=tag, data=data)


def data_field(tag, ind1=' ', ind2=' ', subfields=()):
    """Helper to create a data field from (code, value) pairs."""
    return Field(
        tag=tag,
        indicators=[ind1, ind2],
        subfields=[Subfield(code=code, value=value) for code, value in subfields],
    )


def build_record(*fields, leader=BOOK_LEADER):
    """Helper to create a record with the given fields."""
    record = Record(leader=leader)
    record.add_field(*fields)
    return record


def clean_book_fields(field008=BOOK_008):
    """Fields of a book record that passes every check."""
    return [
        control_field('001', '12345'),
        control_field('008', field008),
        data_field('010', subfields=[('a', '  2004012345')]),
        data_field('040', subfields=[('a', 'DLC'), ('c', 'DLC')]),
        data_field('050', '0', '0', [('a', 'PS3552.A1'), ('b', 'B3 2004')]),
        data_field('100', '1', ' ', [('a', 'Author, A.')]),
        data_field('245', '1', '0', [('a', 'Title :'), ('b', 'subtitle /'), ('c', 'by A. Author.')]),
        data_field('260', subfields=[('a', 'New York :'), ('b', 'Pub,'), ('c', '2004.')]),
        data_field('300', subfields=[('a', 'xii, 240 p. :'), ('b', 'ill. ;'), ('c', '24 cm.')]),
        data_field('504', subfields=[('a', 'Includes bibliographical references (p. 230-238) and index.')]),
        data_field('650', ' ', '0', [('a', 'Authors, American.')]),
    ]


@pytest.fixture
def make_record():
    """Factory fixture: make_record(*fields, leader=BOOK_LEADER)."""
    return build_record


@pytest.fixture
def book_record():
    """A book record with no problems."""
    return build_record(*clean_book_fields())


@pytest.fixture
def cip_record():
    """A prepublication (CIP) book record."""
    return build_record(*clean_book_fields(), leader=CIP_LEADER)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "scenario: end-to-end check of a known record and its expected diagnostics"
    )
