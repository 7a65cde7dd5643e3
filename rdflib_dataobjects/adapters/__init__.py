"""
Registry of dialect adapters.

Adapters are looked up by SQLAlchemy dialect name (``engine.dialect.name``)
or by the ``adapter`` key of a store configuration. Third-party adapters can
be added with :func:`register_adapter`.
"""
from rdflib_dataobjects.adapters.base import Adapter, MultipleValuesInsertMixin
from rdflib_dataobjects.adapters.mysql import Mysql
from rdflib_dataobjects.adapters.postgresql import Postgresql
from rdflib_dataobjects.adapters.sqlite import Sqlite
from rdflib_dataobjects.errors import ConfigurationError

__all__ = [
    "ADAPTERS",
    "Adapter",
    "MultipleValuesInsertMixin",
    "get_adapter",
    "register_adapter",
]


ADAPTERS = dict((adapter.name, adapter) for adapter in [Sqlite, Postgresql, Mysql])


def register_adapter(name, adapter_class):
    """Register ``adapter_class`` for the dialect ``name``, replacing any previous one."""
    if not issubclass(adapter_class, Adapter):
        raise TypeError("%r is not an Adapter subclass" % (adapter_class,))
    ADAPTERS[name] = adapter_class


def get_adapter(name, **kwargs):
    """Instantiate the adapter registered for ``name``."""
    try:
        adapter_class = ADAPTERS[name]
    except KeyError:
        raise ConfigurationError(
            "No DataObjects adapter is registered for %r (currently supporting %s)"
            % (name, ", ".join(sorted(ADAPTERS)))) from None
    return adapter_class(**kwargs)
