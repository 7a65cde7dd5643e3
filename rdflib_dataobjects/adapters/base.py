"""Base class for the dialect adapters."""
import logging

from sqlalchemy import MetaData
from sqlalchemy.exc import SQLAlchemyError

from rdflib_dataobjects.constants import POSITIONS, TABLE_NAME
from rdflib_dataobjects.errors import SchemaError
from rdflib_dataobjects.tables import create_statements_table


_logger = logging.getLogger(__name__)


class Adapter(object):
    """
    SQL statement generator for one database dialect.

    The store encodes and decodes every term itself; an adapter only knows
    how its dialect spells each statement. Adding a backend means
    subclassing this and setting at least ``name`` and ``placeholder``.

    Class attributes:

    - ``name``: the SQLAlchemy dialect name the adapter is registered under
    - ``placeholder``: the driver's positional parameter marker
    - ``supports_multiple_insert``: whether :meth:`multiple_insert_sql` is
      available; the store inserts row by row otherwise
    - ``max_rows_per_insert``: how many rows one batched insert may carry
    """

    name = None
    placeholder = "?"
    table_kwargs = {}
    supports_multiple_insert = False
    max_rows_per_insert = None

    def __init__(self, table_name=TABLE_NAME):
        self.table_name = table_name

    def __repr__(self):
        return "<%s adapter for table %s>" % (self.__class__.__name__, self.table_name)

    # Schema

    def create_table_definition(self, metadata):
        return create_statements_table(metadata, self.table_name, **self.table_kwargs)

    def migrate(self, store):
        """Create the statements table unless it already exists (idempotent)."""
        metadata = MetaData()
        self.create_table_definition(metadata)
        try:
            metadata.create_all(store.connection, checkfirst=True)
        except SQLAlchemyError as e:
            raise SchemaError(
                "Could not create table %s: %s" % (self.table_name, e)) from e
        _logger.debug("migrate() - table %s is ready", self.table_name)

    # Statement text

    def columns_sql(self):
        return ", ".join(POSITIONS)

    def values_sql(self):
        """One parenthesized row of placeholders."""
        return "(%s)" % ", ".join([self.placeholder] * len(POSITIONS))

    def build_clause(self, columns):
        """Build an equality WHERE clause over the given columns."""
        if not columns:
            return ""
        conditions = ["%s = %s" % (column, self.placeholder) for column in columns]
        return " WHERE " + " AND ".join(conditions)

    def insert_sql(self):
        return "INSERT INTO %s (%s) VALUES %s" % (
            self.table_name, self.columns_sql(), self.values_sql())

    def multiple_insert_sql(self, count):
        """
        Insert ``count`` rows in one statement.

        Parameters are the 4 * count serialized terms in row-major order.
        Only available when ``supports_multiple_insert`` is set.
        """
        raise NotImplementedError(
            "%s does not support multiple row inserts" % self.__class__.__name__)

    def delete_sql(self):
        return "DELETE FROM %s%s" % (self.table_name, self.build_clause(POSITIONS))

    def each_sql(self):
        return self.query_sql(())

    def each_subject_sql(self):
        return self.distinct_sql("subject")

    def each_predicate_sql(self):
        return self.distinct_sql("predicate")

    def each_object_sql(self):
        return self.distinct_sql("object")

    def each_context_sql(self):
        return self.distinct_sql("context")

    def distinct_sql(self, column):
        return "SELECT DISTINCT %s FROM %s" % (column, self.table_name)

    def count_sql(self, columns=()):
        """Count rows, constrained by equality on ``columns`` when given."""
        return "SELECT COUNT(*) FROM %s%s" % (self.table_name, self.build_clause(columns))

    def query_sql(self, columns):
        """Select full rows constrained by equality on ``columns``."""
        return "SELECT %s FROM %s%s" % (
            self.columns_sql(), self.table_name, self.build_clause(columns))

    def query(self, store, pattern):
        """
        Run a pattern query against ``store``.

        ``pattern`` maps column names to terms; missing or ``None`` entries
        are left unconstrained. Returns the live result of the select.
        """
        columns, params = self._bind_pattern(store, pattern)
        return store.result(self.query_sql(columns), *params)

    def count(self, store, pattern):
        """Count the rows of ``store`` matching ``pattern`` in the backend."""
        columns, params = self._bind_pattern(store, pattern)
        return int(store.result(self.count_sql(columns), *params).scalar())

    def _bind_pattern(self, store, pattern):
        columns = []
        params = []
        for column in POSITIONS:
            value = pattern.get(column)
            if value is not None:
                columns.append(column)
                params.append(store.serialize(value))
        return columns, params


class MultipleValuesInsertMixin(object):
    """Batched insert using a multi-row ``VALUES`` list."""

    supports_multiple_insert = True
    max_rows_per_insert = 1000

    def multiple_insert_sql(self, count):
        if count < 1:
            raise ValueError("Cannot build an insert for %d rows" % count)
        return "INSERT INTO %s (%s) VALUES %s" % (
            self.table_name,
            self.columns_sql(),
            ", ".join([self.values_sql()] * count),
        )
