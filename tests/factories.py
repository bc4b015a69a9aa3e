import factory
from factory.alchemy import SQLAlchemyModelFactory

from db.models import ContentElement, Dce, DceField


class DceFactory(SQLAlchemyModelFactory):
    """Factory for creating Dce rows."""

    class Meta:
        model = Dce
        sqlalchemy_session_persistence = "flush"

    identifier = factory.Sequence(lambda n: f"dce{n}")
    title = factory.Faker("sentence", nb_words=3)


class DceFieldFactory(SQLAlchemyModelFactory):
    """Factory for creating DceField rows.  Pass widget="check" etc."""

    class Meta:
        model = DceField
        sqlalchemy_session_persistence = "flush"

    class Params:
        widget = "input"

    parent_dce = 0
    variable = factory.Sequence(lambda n: f"field{n}")
    title = factory.Faker("word")
    type = DceField.TYPE_ELEMENT
    map_to = ""
    new_tca_field_name = ""
    new_tca_field_type = ""
    configuration = factory.LazyAttribute(
        lambda o: f"<config><type>{o.widget}</type></config>"
    )


class ContentElementFactory(SQLAlchemyModelFactory):
    """Factory for creating tt_content rows."""

    class Meta:
        model = ContentElement
        sqlalchemy_session_persistence = "flush"

    pid = 1
    ctype = "dce_dce0"
    header = factory.Faker("sentence", nb_words=4)
    pi_flexform = ""


ALL_FACTORIES = (DceFactory, DceFieldFactory, ContentElementFactory)
