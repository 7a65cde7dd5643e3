"""Constant definitions"""


NO_VALUE = "nil"
''' Cell stored for an absent value (the default context).

SQL NULLs never compare equal to each other, so the absent context is stored
as this token instead.
'''

DEFAULT_URL = "sqlite://"
''' In-memory SQLite database used when no configuration is given '''

TABLE_NAME = "quads"
''' Default name of the statements table '''

POSITIONS = ("subject", "predicate", "object", "context")
''' Column order of every statement row '''

SCHEME_ALIASES = {
    "sqlite3": "sqlite",
    "postgres": "postgresql",
}
''' DataObjects-style URL schemes and their SQLAlchemy dialect names '''
