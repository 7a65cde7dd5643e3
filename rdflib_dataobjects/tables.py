from sqlalchemy import Column, Table, Index, types

from rdflib_dataobjects.constants import TABLE_NAME


MYSQL_MAX_INDEX_LENGTH = 200


def create_statements_table(metadata, table_name=TABLE_NAME, **kwargs):
    """
    Define the statements table.

    Four text columns holding serialized terms and no unique key, so
    inserting the same quad twice stores two rows.
    """
    return Table(
        table_name,
        metadata,
        Column("subject", types.Text, nullable=False),
        Column("predicate", types.Text, nullable=False),
        Column("object", types.Text, nullable=False),
        Column("context", types.Text, nullable=False),
        Index(
            "{table_name}_s_index".format(table_name=table_name),
            "subject",
            mysql_length=MYSQL_MAX_INDEX_LENGTH,
        ),
        Index(
            "{table_name}_p_index".format(table_name=table_name),
            "predicate",
            mysql_length=MYSQL_MAX_INDEX_LENGTH,
        ),
        Index(
            "{table_name}_o_index".format(table_name=table_name),
            "object",
            mysql_length=MYSQL_MAX_INDEX_LENGTH,
        ),
        Index(
            "{table_name}_c_index".format(table_name=table_name),
            "context",
            mysql_length=MYSQL_MAX_INDEX_LENGTH,
        ),
        **kwargs
    )
