import pytest

from schemas import ProjectUpdate, SiteCreate, load_payload
from utils.errors import ValidationError
from utils.helpers import parse_active, parse_flag, parse_leading_int, parse_technologies


@pytest.mark.parametrize('value, expected', [
    ('React, Node.js, MongoDB', ['React', 'Node.js', 'MongoDB']),
    ('["Flask", "SQLAlchemy"]', ['Flask', 'SQLAlchemy']),
    ('[{"name": "Docker"}, {"name": " "}]', ['Docker']),
    ('{"name": "Docker"}', ['{"name": "Docker"}']),
    (['Go', ' ', 'Rust '], ['Go', 'Rust']),
    ('', []),
    (None, None),
])
def test_parse_technologies(value, expected):
    assert parse_technologies(value) == expected


@pytest.mark.parametrize('value, expected', [
    (True, True), ('true', True), ('True', False), ('1', False), (False, False), (None, False),
])
def test_parse_flag(value, expected):
    assert parse_flag(value) is expected


@pytest.mark.parametrize('value, expected', [
    (False, False), ('false', False), (True, True), ('no', True), (None, True), ('', True),
])
def test_parse_active(value, expected):
    assert parse_active(value) is expected


@pytest.mark.parametrize('value, expected', [
    ('abc', 0), ('12abc', 12), (' 7 ', 7), ('-3', -3), (5, 5), (2.9, 2), (None, 0), ('', 0), (True, 0),
])
def test_parse_leading_int(value, expected):
    assert parse_leading_int(value) == expected


def test_update_schema_only_reports_supplied_fields():
    payload = load_payload(ProjectUpdate, {'title': '  New title  ', 'liveUrl': ''})

    assert payload.model_dump(exclude_unset=True, exclude={'image_url'}) == {
        'title': 'New title',
        'live_url': ''
    }


def test_empty_technologies_on_update_clears_list():
    payload = load_payload(ProjectUpdate, {'technologies': ''})

    assert payload.model_dump(exclude_unset=True) == {'technologies': []}


def test_load_payload_reports_missing_field():
    with pytest.raises(ValidationError) as excinfo:
        load_payload(SiteCreate, {'name': 'Blog'})

    assert excinfo.value.status_code == 400
    assert 'url' in excinfo.value.message
