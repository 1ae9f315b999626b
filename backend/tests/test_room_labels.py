"""Tests for room-label tables."""

import pytest

from planner.exceptions import MissingRoomLabelError, UnsupportedLanguageError
from planner.services.room_labels import (
    REQUIRED_ROOM_KEYS,
    SUPPORTED_LANGUAGES,
    get_document_labels,
    get_room_labels,
    merge_room_labels,
    require_room_labels,
)


@pytest.mark.parametrize("language", SUPPORTED_LANGUAGES)
def test_builtin_tables_are_complete(language):
    labels = get_room_labels(language)

    assert set(REQUIRED_ROOM_KEYS) <= set(labels)
    assert require_room_labels(labels) is labels


def test_language_lookup_is_case_insensitive():
    assert get_room_labels('EN')['kitchen'] == 'Kitchen'


def test_get_room_labels_returns_copy():
    labels = get_room_labels('en')
    labels['kitchen'] = 'Galley'

    assert get_room_labels('en')['kitchen'] == 'Kitchen'


def test_unsupported_language():
    with pytest.raises(UnsupportedLanguageError) as exc_info:
        get_room_labels('de')

    assert exc_info.value.details['language'] == 'de'


def test_unsupported_document_language():
    with pytest.raises(UnsupportedLanguageError):
        get_document_labels('fr')


def test_empty_label_counts_as_missing():
    labels = dict(get_room_labels('en'), media='')

    with pytest.raises(MissingRoomLabelError) as exc_info:
        require_room_labels(labels)

    assert exc_info.value.details == {'missing': 'media'}


def test_merge_applies_known_overrides_only():
    labels = merge_room_labels('en', {'kids': 'Kids room', 'garage': 'Garage'})

    assert labels['kids'] == 'Kids room'
    assert 'garage' not in labels
