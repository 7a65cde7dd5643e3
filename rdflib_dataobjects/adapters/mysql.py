from rdflib_dataobjects.adapters.base import Adapter, MultipleValuesInsertMixin


class Mysql(MultipleValuesInsertMixin, Adapter):
    """
    MySQL adapter.

    Terms are compared with a binary collation; the default collations are
    case-insensitive and would match ``<http://example.org/a>`` against
    ``<http://example.org/A>``.
    """

    name = "mysql"
    placeholder = "%s"
    table_kwargs = {
        "mysql_charset": "utf8mb4",
        "mysql_collate": "utf8mb4_bin",
    }
