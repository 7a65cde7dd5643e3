from rdflib_dataobjects.adapters.base import Adapter, MultipleValuesInsertMixin


class Sqlite(MultipleValuesInsertMixin, Adapter):
    """
    SQLite adapter.

    Batches are kept below SQLite's default limits of 999 bound parameters
    and 500 compound select terms.
    """

    name = "sqlite"
    placeholder = "?"
    max_rows_per_insert = 200
