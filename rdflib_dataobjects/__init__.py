# -*- coding: utf-8 -*-
"""DataObjects Store plugin for RDFLib."""
import logging
from importlib.metadata import version

from rdflib_dataobjects.errors import (
    BackendExecutionError,
    ConfigurationError,
    DataObjectsError,
    SchemaError,
    StoreClosedError,
)
from rdflib_dataobjects.types import Statement


__version__ = version("rdflib-dataobjects")

__all__ = [
    "BackendExecutionError",
    "ConfigurationError",
    "DataObjectsError",
    "SchemaError",
    "Statement",
    "StoreClosedError",
    "registerplugins",
]


# c.f. http://docs.python.org/howto/logging.html#library-config
logging.getLogger(__name__).addHandler(logging.NullHandler())


def registerplugins():
    """
    Register plugins.

    If setuptools is used to install rdflib-dataobjects, the Store plugin is
    registered through entry_points. This is strongly recommended.

    Otherwise the plugin must be registered manually with this method.

    """
    from rdflib.store import Store
    from rdflib import plugin

    try:
        plugin.get("DataObjects", Store)
        return
    except plugin.PluginException:
        pass

    plugin.register(
        "DataObjects",
        Store,
        "rdflib_dataobjects.store",
        "DataObjects",
    )
