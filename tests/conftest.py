import pytest
from sqlalchemy import text

import main
from db import init_db, get_session
from tests.factories import ALL_FACTORIES


FLEXFORM_TEMPLATE = """<?xml version="1.0" encoding="utf-8" standalone="yes" ?>
<T3FlexForms>
    <data>
        <sheet index="sDEF">
            <language index="lDEF">
{fields}
            </language>
        </sheet>
    </data>
</T3FlexForms>"""


def flexform_xml(**values) -> str:
    """Build a single-sheet flexform with settings.<name>/vDEF fields."""
    fields = "\n".join(
        f'<field index="settings.{name}"><value index="vDEF">{value}</value></field>'
        for name, value in values.items()
    )
    return FLEXFORM_TEMPLATE.format(fields=fields)


def section_flexform_xml(section: str, field: str, values: list[str]) -> str:
    """Flexform with one repeatable section holding one field per item."""
    items = "\n".join(
        f'<section index="{i}"><itm index="container_{section}"><el index="el">'
        f'<field index="settings.{field}"><value index="vDEF">{value}</value></field>'
        f'</el></itm></section>'
        for i, value in enumerate(values, start=1)
    )
    fields = f'<field index="settings.{section}"><el index="el">{items}</el></field>'
    return FLEXFORM_TEMPLATE.format(fields=fields)


@pytest.fixture
def database():
    """Fresh in-memory database per test."""
    return init_db("sqlite://")


@pytest.fixture
def session(database):
    """Session bound to the test database; factories write through it."""
    s = get_session()
    for f in ALL_FACTORIES:
        f._meta.sqlalchemy_session = s
    yield s
    s.close()


@pytest.fixture
def add_host_column(session):
    """Apply a new column to tt_content, as an administrator would."""
    def _add(name: str, sql_type: str = "text"):
        session.execute(text(f"ALTER TABLE tt_content ADD COLUMN {name} {sql_type}"))
        session.commit()
    return _add


@pytest.fixture
def app(database, monkeypatch):
    """Flask app sharing the test database."""
    monkeypatch.setattr(main, "init_db", lambda _url: database)
    app = main.create_app("sqlite://")
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    """Return a Flask test client."""
    return app.test_client()
