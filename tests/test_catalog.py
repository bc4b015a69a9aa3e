import pytest
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from catalog.definitions import FieldDefinition, widget_type_of
from catalog.errors import UnknownDceError
from catalog.reader import CatalogReader
from db.models import ContentElement, DceField
from tests.factories import DceFactory, DceFieldFactory


def test_widget_type_from_configuration():
    assert widget_type_of("<config><type>select</type></config>") == "select"
    assert widget_type_of("<config><size>30</size></config>") == ""
    assert widget_type_of("") == ""
    assert widget_type_of(None) == ""
    assert widget_type_of("<broken") == ""


def test_definition_from_row(session):
    row = DceFieldFactory(parent_dce=7, variable="headline", map_to="*newcol",
                          new_tca_field_name="my_headline", new_tca_field_type="auto",
                          widget="radio", hidden=1)
    d = FieldDefinition.from_row(row)
    assert d.parent_dce == 7
    assert d.variable == "headline"
    assert d.requests_new_column
    assert d.new_column_name == "my_headline"
    assert d.new_column_type == "auto"
    assert d.widget_type == "radio"
    assert d.hidden is True
    assert d.deleted is False


# ── list_new_column_fields ────────────────────────────────────────────

def test_new_column_fields_filters(session):
    keep = DceFieldFactory(parent_dce=1, map_to="*newcol",
                           new_tca_field_name="a", new_tca_field_type="auto")
    hidden = DceFieldFactory(parent_dce=1, map_to="*newcol", hidden=1,
                             new_tca_field_name="b", new_tca_field_type="text")
    DceFieldFactory(parent_dce=1, map_to="*newcol", deleted=1,
                    new_tca_field_name="c", new_tca_field_type="auto")
    DceFieldFactory(parent_dce=1, map_to="*newcol",
                    new_tca_field_name="", new_tca_field_type="auto")
    DceFieldFactory(parent_dce=1, map_to="*newcol",
                    new_tca_field_name="d", new_tca_field_type="")
    DceFieldFactory(parent_dce=1, map_to="*newcol", type=DceField.TYPE_SECTION,
                    new_tca_field_name="e", new_tca_field_type="auto")
    DceFieldFactory(parent_dce=1, map_to="header")

    fields = CatalogReader(session).list_new_column_fields()

    assert [f.uid for f in fields] == [keep.uid, hidden.uid]


def test_new_column_fields_storage_order(session):
    first = DceFieldFactory(parent_dce=2, map_to="*newcol",
                            new_tca_field_name="z", new_tca_field_type="auto")
    second = DceFieldFactory(parent_dce=1, map_to="*newcol",
                             new_tca_field_name="a", new_tca_field_type="auto")
    names = [f.new_column_name for f in CatalogReader(session).list_new_column_fields()]
    assert names == ["z", "a"]
    assert first.uid < second.uid


def test_new_column_fields_fail_soft(session):
    session.execute(text("DROP TABLE tx_dce_domain_model_dcefield"))
    assert CatalogReader(session).list_new_column_fields() == []


# ── list_mapped_fields ────────────────────────────────────────────────

def test_mapped_fields_of_one_dce(session):
    dce = DceFactory()
    new_col = DceFieldFactory(parent_dce=dce.uid, map_to="*newcol",
                              new_tca_field_name="a", new_tca_field_type="auto")
    existing = DceFieldFactory(parent_dce=dce.uid, map_to="header")
    DceFieldFactory(parent_dce=dce.uid, map_to="")
    DceFieldFactory(parent_dce=dce.uid, map_to="bodytext", deleted=1)
    DceFieldFactory(parent_dce=dce.uid, map_to="bodytext", hidden=1)
    DceFieldFactory(parent_dce=dce.uid + 1, map_to="header")

    fields = CatalogReader(session).list_mapped_fields(dce.uid)

    assert [f.uid for f in fields] == [new_col.uid, existing.uid]


def test_mapped_fields_propagates_storage_errors(session):
    session.execute(text("DROP TABLE tx_dce_domain_model_dcefield"))
    with pytest.raises(SQLAlchemyError):
        CatalogReader(session).list_mapped_fields(1)


# ── dce_uid_for_content ───────────────────────────────────────────────

def test_dce_uid_from_uid_ctype(session):
    row = ContentElement(uid=1, ctype="dce_dceuid12")
    assert CatalogReader(session).dce_uid_for_content(row) == 12


def test_dce_uid_from_identifier_ctype(session):
    dce = DceFactory(identifier="teaser")
    row = ContentElement(uid=1, ctype="dce_teaser")
    assert CatalogReader(session).dce_uid_for_content(row) == dce.uid


def test_dce_uid_ignores_deleted_dce(session):
    DceFactory(identifier="teaser", deleted=1)
    with pytest.raises(UnknownDceError):
        CatalogReader(session).dce_uid_for_content(ContentElement(uid=1, ctype="dce_teaser"))


@pytest.mark.parametrize("ctype", ["text", "", "dce_unknown"])
def test_dce_uid_unknown(session, ctype):
    with pytest.raises(UnknownDceError):
        CatalogReader(session).dce_uid_for_content(ContentElement(uid=1, ctype=ctype))
