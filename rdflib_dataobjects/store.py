"""DataObjects-style RDF store on top of any SQLAlchemy database."""
import logging
from collections.abc import Mapping

import sqlalchemy
from rdflib.graph import Graph, QuotedGraph
from rdflib.store import VALID_STORE, Store
from sqlalchemy import MetaData, inspect
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError, SQLAlchemyError

from rdflib_dataobjects.adapters import ADAPTERS, get_adapter
from rdflib_dataobjects.constants import (
    DEFAULT_URL,
    POSITIONS,
    SCHEME_ALIASES,
    TABLE_NAME,
)
from rdflib_dataobjects.errors import (
    ConfigurationError,
    SchemaError,
    StoreClosedError,
)
from rdflib_dataobjects.termutils import serialize, term_identifier, unserialize
from rdflib_dataobjects.types import Statement, to_statement


_logger = logging.getLogger(__name__)

Any = None


def grouper(iterable, n):
    "Collect data into chunks of at most n elements"
    assert n > 0, 'Cannot group into chunks of zero elements'
    lst = []
    iterable = iter(iterable)
    while True:
        try:
            lst.append(next(iterable))
        except StopIteration:
            break

        if len(lst) == n:
            yield lst
            lst = []

    if lst:
        yield lst


def normalize_url(url):
    """
    Translate DataObjects-style connection URLs into SQLAlchemy URLs.

    >>> normalize_url("sqlite3://:memory:")
    'sqlite://'
    >>> normalize_url("postgres://user@localhost/test")
    'postgresql://user@localhost/test'
    >>> normalize_url("mysql+pymysql://localhost/test")
    'mysql+pymysql://localhost/test'
    """
    url = str(url)
    scheme, sep, rest = url.partition("://")
    if not sep:
        return url
    dialect, plus, driver = scheme.partition("+")
    dialect = SCHEME_ALIASES.get(dialect, dialect)
    if dialect == "sqlite" and rest == ":memory:":
        rest = ""
    return "{dialect}{plus}{driver}://{rest}".format(
        dialect=dialect, plus=plus, driver=driver, rest=rest)


def _hide_password(url):
    try:
        return make_url(url).render_as_string(hide_password=True)
    except ArgumentError:
        return url


def pattern_to_dict(pattern):
    """
    Turn a statement pattern into a dict keyed by column name.

    ``pattern`` is either a mapping using the keys ``subject``,
    ``predicate``, ``object`` and ``context``, or a triple/quad where
    ``None`` marks an unbound position.
    """
    if isinstance(pattern, Mapping):
        items = pattern.items()
    else:
        items = zip(POSITIONS, pattern)

    result = {}
    for key, value in items:
        if key not in POSITIONS:
            raise ValueError("Unknown pattern key %r" % (key,))
        result[key] = term_identifier(value)
    return result


class DataObjects(Store):
    """
    rdflib Store keeping its quads in one table of an SQL database.

    Every term is written as a text cell: N-Triples for most terms, ``nil``
    for the absent context, and ``prefix:rest`` for URIRefs under one of
    the configured ``prefixes``. SQL text comes from an adapter chosen by
    database dialect (see :mod:`rdflib_dataobjects.adapters`).

    All writes go straight to the database; there is nothing to flush.

    It is not recommended to change ``prefixes`` once statements have been
    stored: rows written under a prefix that is later removed will no longer
    decode, and queries will not match them. Read the old statements out,
    delete them, change the prefixes and insert them again instead.
    """

    context_aware = True
    formula_aware = False
    transaction_aware = False
    graph_aware = False

    def __init__(self, configuration=None, identifier=None):
        """
        Initialisation.

        Args:
            configuration: the database URL, a configuration dictionary (see
                `open`), or None for an in-memory SQLite database.
            identifier (rdflib.URIRef): URIRef of the Store.
        """
        self.identifier = identifier
        self.engine = None
        self.connection = None
        self.adapter = None
        self.prefixes = None
        super(DataObjects, self).__init__(
            configuration=configuration or DEFAULT_URL, identifier=identifier)

    def __repr__(self):
        if self.connection is None:
            return "<Unopened DataObjects Store>"
        return "<DataObjects Store on %s using %r>" % (
            self.engine.url.render_as_string(hide_password=True), self.adapter)

    def open(self, configuration, create=True):
        """
        Open the store specified by the configuration parameter.

        Args:
            configuration: if a string, use as the database URL. Both
                SQLAlchemy URLs and DataObjects-style URLs ("sqlite3://:memory:",
                "postgres://...") are accepted. If a dictionary, the URL is
                read from its "db" key and the optional keys are:

                - "adapter": name of a registered adapter, instead of the
                  one matching the URL's dialect
                - "prefixes": ordered mapping of prefix to namespace URI
                  used to shorten stored URIRefs
                - "table": name of the statements table

                Any other key is passed on to `sqlalchemy.create_engine`.
            create (bool): create the statements table if it does not exist.
                If False and the table is missing, SchemaError is raised.

        Returns:
            int: VALID_STORE
        """
        # Dispose of any existing engine
        self.dispose()

        url, adapter_name, table_name, kwargs = self._parse_configuration(configuration)
        kwargs.setdefault("isolation_level", "AUTOCOMMIT")

        try:
            self.engine = sqlalchemy.create_engine(url, **kwargs)
            self.connection = self.engine.connect()
        except (SQLAlchemyError, ImportError) as e:
            self.dispose()
            raise ConfigurationError(
                "Could not load a DataObjects adapter for %s. You may need to "
                "install the database driver, or you may be trying to use an "
                "unsupported adapter (currently supporting %s). The error "
                "message was: %s" % (
                    _hide_password(url), ", ".join(sorted(ADAPTERS)), e)) from e

        try:
            self.adapter = get_adapter(
                adapter_name or self.engine.dialect.name, table_name=table_name)
            if create:
                self.adapter.migrate(self)
            else:
                self._verify_store_exists()
        except (ConfigurationError, SchemaError):
            self.dispose()
            raise

        _logger.info("open() - %r", self)
        return VALID_STORE

    def close(self, commit_pending_transaction=False):
        """
        Close the connection if one is open.

        Statements are committed as they are written, so there is never a
        pending transaction. The store can be reopened with `open`.
        """
        if self.connection is not None:
            self.connection.close()
        self.connection = None
        self.adapter = None

    def dispose(self):
        """Close the connection and dispose of the engine's connection pool."""
        self.close()
        if self.engine is not None:
            self.engine.dispose()
        self.engine = None

    def destroy(self, configuration):
        """Drop the statements table and everything in it."""
        if self.connection is None:
            self.open(configuration, create=False)

        table = self.adapter.create_table_definition(MetaData())
        try:
            table.drop(self.connection, checkfirst=True)
        except SQLAlchemyError:
            _logger.exception("unable to drop table %s.", table.name)
            raise

    # Serialization

    def serialize(self, value):
        """Serialize a term using this store's prefixes."""
        return serialize(value, self.prefixes)

    def unserialize(self, value):
        """Unserialize a cell using this store's prefixes."""
        return unserialize(value, self.prefixes)

    # SQL execution

    def execute(self, sql, *args):
        """
        Execute non-query ``sql`` with the positional ``args``.

        Returns the number of affected rows as reported by the driver.
        """
        return self._execute(sql, args).rowcount

    def result(self, sql, *args):
        """Execute query ``sql`` with the positional ``args`` and return the live result."""
        return self._execute(sql, args)

    # Statement methods

    def insert(self, statements):
        """
        Insert statements (Statements, quads or triples).

        Uses the adapter's batched insert when it has one, and inserts one
        row at a time otherwise.
        """
        self._check_open()
        statements = [to_statement(statement) for statement in statements]
        if not statements:
            return

        if self.adapter.supports_multiple_insert:
            size = self.adapter.max_rows_per_insert or len(statements)
            for group in grouper(statements, size):
                args = []
                for statement in group:
                    args.extend(self._serialize_statement(statement))
                self.execute(self.adapter.multiple_insert_sql(len(group)), *args)
        else:
            query = self.adapter.insert_sql()
            for statement in statements:
                self.execute(query, *self._serialize_statement(statement))

    def delete(self, statements):
        """Delete statements; statements that are not stored are ignored."""
        self._check_open()
        query = self.adapter.delete_sql()
        for statement in statements:
            self.execute(query, *self._serialize_statement(to_statement(statement)))

    def insert_statement(self, statement):
        self.insert([statement])

    def delete_statement(self, statement):
        self.delete([statement])

    def each(self):
        """Iterate over all Statements in the store."""
        self._check_open()
        return self._statements(self.result(self.adapter.each_sql()))

    __iter__ = each

    def each_subject(self):
        """Iterate over the distinct subjects."""
        self._check_open()
        return self._terms(self.result(self.adapter.each_subject_sql()))

    def each_predicate(self):
        """Iterate over the distinct predicates."""
        self._check_open()
        return self._terms(self.result(self.adapter.each_predicate_sql()))

    def each_object(self):
        """Iterate over the distinct objects."""
        self._check_open()
        return self._terms(self.result(self.adapter.each_object_sql()))

    def each_context(self):
        """Iterate over the distinct contexts, leaving out the absent context."""
        self._check_open()
        contexts = self._terms(self.result(self.adapter.each_context_sql()))
        return (context for context in contexts if context is not None)

    def query_pattern(self, pattern):
        """
        Iterate over the Statements matching ``pattern``.

        ``pattern`` is a mapping of any of "subject", "predicate", "object"
        and "context" to a term, or a triple/quad. Missing keys and None
        values match anything.
        """
        self._check_open()
        return self._statements(self.adapter.query(self, pattern_to_dict(pattern)))

    def count(self):
        """Number of statements in the store."""
        self._check_open()
        return int(self.result(self.adapter.count_sql()).scalar())

    def count_pattern(self, pattern):
        """Number of statements matching ``pattern`` (see `query_pattern`)."""
        self._check_open()
        return self.adapter.count(self, pattern_to_dict(pattern))

    def is_empty(self):
        return self.count() == 0

    # rdflib Store interface

    def add(self, triple, context, quoted=False):
        """
        Add a triple to the store of triples.

        Unlike `insert`, a quad that is already stored is not added again.
        """
        if quoted or isinstance(context, QuotedGraph):
            raise NotImplementedError("Quoted statements are not supported")
        super(DataObjects, self).add(triple, context, quoted)
        subject, predicate, obj = triple
        statement = Statement(subject, predicate, obj, context)
        if not self._is_stored(statement):
            self.insert([statement])

    def addN(self, quads):
        """Add a list of triples in quads form, skipping quads already stored."""
        statements = []
        seen = set()
        add_event = super(DataObjects, self).add
        for subject, predicate, obj, context in quads:
            if isinstance(context, QuotedGraph):
                raise NotImplementedError("Quoted statements are not supported")
            add_event((subject, predicate, obj), context)
            statement = Statement(subject, predicate, obj, context)
            if statement in seen or self._is_stored(statement):
                continue
            seen.add(statement)
            statements.append(statement)
        self.insert(statements)

    def remove(self, triple, context=None):
        """Remove the triples matching a pattern."""
        super(DataObjects, self).remove(triple, context)
        subject, predicate, obj = triple
        matches = set(self.query_pattern((subject, predicate, obj, context)))
        self.delete(matches)

    def triples(self, triple, context=None):
        """A generator over all the triples matching a pattern."""
        subject, predicate, obj = triple
        tripleCoverage = {}
        for statement in self.query_pattern((subject, predicate, obj, context)):
            contexts = tripleCoverage.setdefault(statement.triple, [])
            if statement.context is not None:
                contexts.append(statement.context)

        for (s, p, o), contexts in tripleCoverage.items():
            yield (s, p, o), (Graph(self, identifier) for identifier in contexts)

    def __len__(self, context=None):
        """Number of statements in the store, or in one context."""
        context = term_identifier(context)
        if context is None:
            return self.count()
        return self.count_pattern({"context": context})

    def contexts(self, triple=None):
        if triple is None:
            for context in self.each_context():
                yield context
            return

        subject, predicate, obj = triple
        contexts = set(
            statement.context
            for statement in self.query_pattern((subject, predicate, obj, Any)))
        contexts.discard(None)
        for context in contexts:
            yield context

    # Private methods

    def _parse_configuration(self, configuration):
        self.prefixes = None
        adapter_name = None
        table_name = TABLE_NAME
        kwargs = {}
        if isinstance(configuration, Mapping):
            kwargs = dict(configuration)
            url = kwargs.pop("db", None)
            if not url:
                raise ConfigurationError('Configuration dict is missing the required "db" key')
            adapter_name = kwargs.pop("adapter", None)
            table_name = kwargs.pop("table", TABLE_NAME)
            prefixes = kwargs.pop("prefixes", None)
            if prefixes is not None:
                self.prefixes = dict(prefixes)
        else:
            url = configuration or DEFAULT_URL
        return normalize_url(url), adapter_name, table_name, kwargs

    def _check_open(self):
        if self.connection is None:
            raise StoreClosedError("The store is closed")

    def _execute(self, sql, args):
        self._check_open()
        _logger.debug("%s %r", sql, args)
        if args:
            return self.connection.exec_driver_sql(sql, tuple(args))
        return self.connection.exec_driver_sql(sql)

    def _serialize_statement(self, statement):
        return [self.serialize(term) for term in statement]

    def _is_stored(self, statement):
        # matches the absent context exactly, unlike a pattern query
        query = self.adapter.count_sql(POSITIONS)
        return self.result(query, *self._serialize_statement(statement)).scalar() > 0

    def _statements(self, result):
        for row in result:
            yield Statement(*[self.unserialize(value) for value in row])

    def _terms(self, result):
        for row in result:
            yield self.unserialize(row[0])

    def _verify_store_exists(self):
        """Verify the statements table exists."""
        if not inspect(self.connection).has_table(self.adapter.table_name):
            _logger.critical("open() - table %s is not known", self.adapter.table_name)
            raise SchemaError(
                "open() - create flag was set to False, but table %s was not "
                "created previously." % self.adapter.table_name)
