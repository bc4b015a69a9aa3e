import pytest

from catalog.definitions import FieldDefinition
from mapper.errors import ConfigurationError
from mapper.resolver import build_sync_targets


def _field(variable, map_to, new_name=""):
    return FieldDefinition(uid=1, parent_dce=1, variable=variable,
                           map_to=map_to, new_column_name=new_name,
                           new_column_type="auto" if new_name else "")


def test_new_column_maps_to_its_name():
    targets = build_sync_targets([_field("headline", "*newcol", "my_headline")])
    assert targets == {"headline": "my_headline"}


def test_existing_column_maps_verbatim():
    targets = build_sync_targets([_field("title", "header")])
    assert targets == {"title": "header"}


def test_mixed_targets():
    targets = build_sync_targets([
        _field("headline", "*newcol", "my_headline"),
        _field("title", "header"),
        _field("intro", "header"),
    ])
    assert targets == {"headline": "my_headline", "title": "header", "intro": "header"}


def test_empty_definitions():
    assert build_sync_targets([]) == {}


def test_new_column_without_name_is_configuration_error():
    with pytest.raises(ConfigurationError, match="headline"):
        build_sync_targets([
            _field("title", "header"),
            _field("headline", "*newcol", ""),
        ])
