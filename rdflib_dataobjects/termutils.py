"""Convenience functions for storing Terms as text cells."""
from rdflib import URIRef
from rdflib.graph import Graph
from rdflib.util import from_n3

from rdflib_dataobjects.constants import NO_VALUE

__all__ = ["serialize", "unserialize"]


def term_identifier(term):
    """
    Return the identifier of a ``Graph``, or the term itself.

    >>> from rdflib import Graph, URIRef
    >>> from rdflib_dataobjects.termutils import term_identifier
    >>> term_identifier(Graph(identifier=URIRef("http://example.org/g")))
    rdflib.term.URIRef('http://example.org/g')
    >>> term_identifier(None) is None
    True
    """
    if isinstance(term, Graph):
        return term.identifier
    return term


def serialize(value, prefixes=None):
    """
    Serialize a term into its N-Triples form.

    ``None`` is written as the ``nil`` token. When ``prefixes`` (an ordered
    mapping of prefix to namespace URI) is given, a URIRef starting with one
    of the namespaces is shortened to ``prefix:rest``; the first matching
    namespace wins.

    >>> from rdflib import Literal, URIRef
    >>> from rdflib_dataobjects.termutils import serialize
    >>> serialize(None)
    'nil'
    >>> serialize(URIRef("http://example.org/Alice"))
    '<http://example.org/Alice>'
    >>> serialize(URIRef("http://example.org/Alice"), {"ex": "http://example.org/"})
    'ex:Alice'
    >>> serialize(Literal("chat", lang="fr"))
    '"chat"@fr'
    """
    value = term_identifier(value)
    if value is None:
        return NO_VALUE
    if prefixes and isinstance(value, URIRef):
        text = str(value)
        for prefix, uri in prefixes.items():
            if text.startswith(uri):
                return "%s:%s" % (prefix, text[len(uri):])
    return value.n3()


def unserialize(value, prefixes=None):
    """
    Unserialize a term from its N-Triples form.

    Inverse of :func:`serialize` for the same ``prefixes``. A cell that
    starts with ``prefix:`` for a configured prefix is always read back as a
    URIRef under that prefix's namespace.

    >>> from rdflib_dataobjects.termutils import unserialize
    >>> unserialize("nil") is None
    True
    >>> unserialize("ex:Alice", {"ex": "http://example.org/"})
    rdflib.term.URIRef('http://example.org/Alice')
    >>> unserialize("<http://example.org/Alice>")
    rdflib.term.URIRef('http://example.org/Alice')
    """
    if value == NO_VALUE:
        return None
    if prefixes:
        for prefix, uri in prefixes.items():
            label = prefix + ":"
            if value.startswith(label):
                return URIRef(uri + value[len(label):])
    return from_n3(value)
