from collections import namedtuple

from rdflib.graph import Graph


class Statement(namedtuple("Statement", "subject predicate object context")):
    """
    An immutable subject/predicate/object/context quad.

    The context defaults to ``None``, the absent context.
    """

    __slots__ = ()

    def __new__(cls, subject, predicate, object, context=None):
        if isinstance(context, Graph):
            context = context.identifier
        return super(Statement, cls).__new__(cls, subject, predicate, object, context)

    @property
    def triple(self):
        return self.subject, self.predicate, self.object


def to_statement(value):
    """Coerce a Statement, a triple or a quad into a Statement."""
    if isinstance(value, Statement):
        return value
    if len(value) in (3, 4):
        return Statement(*value)
    raise ValueError(
        "Expected a triple or a quad, got %d terms: %r" % (len(value), value))
