from rdflib_dataobjects.adapters.base import Adapter, MultipleValuesInsertMixin


class Postgresql(MultipleValuesInsertMixin, Adapter):
    """PostgreSQL adapter for the psycopg2 and pg8000 drivers."""

    name = "postgresql"
    placeholder = "%s"
