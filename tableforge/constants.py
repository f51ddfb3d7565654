"""
TableForge SQL Constants

Centralized definitions for the MySQL keywords the grammar and the
resolvers dispatch on, to reduce magic strings throughout the codebase.
"""

from enum import Enum, IntEnum
from typing import Dict, FrozenSet


class TypeToken(IntEnum):
    """
    Token identifiers of the data type keywords.

    Synonyms keep distinct identifiers (``INT`` vs ``INTEGER``) so that
    callers can tell them apart after the name has been canonicalized.
    """

    # String family
    CHAR = 1
    CHARACTER = 2
    VARCHAR = 3
    TINYTEXT = 4
    TEXT = 5
    MEDIUMTEXT = 6
    LONGTEXT = 7
    NCHAR = 8
    NVARCHAR = 9
    LONG = 10

    # Integer family
    TINYINT = 20
    SMALLINT = 21
    MEDIUMINT = 22
    INT = 23
    INTEGER = 24
    BIGINT = 25
    MIDDLEINT = 26
    INT1 = 27
    INT2 = 28
    INT3 = 29
    INT4 = 30
    INT8 = 31

    # Fixed and floating point
    REAL = 40
    DOUBLE = 41
    DECIMAL = 42
    DEC = 43
    FIXED = 44
    NUMERIC = 45
    FLOAT = 46
    FLOAT4 = 47
    FLOAT8 = 48

    # Simple
    DATE = 60
    TINYBLOB = 61
    MEDIUMBLOB = 62
    LONGBLOB = 63
    BOOL = 64
    BOOLEAN = 65
    SERIAL = 66

    # Single optional length, no modifiers
    BIT = 80
    TIME = 81
    TIMESTAMP = 82
    DATETIME = 83
    BINARY = 84
    VARBINARY = 85
    BLOB = 86
    YEAR = 87
    VECTOR = 88

    # Collections
    ENUM = 100
    SET = 101

    # Spatial
    GEOMETRYCOLLECTION = 120
    GEOMCOLLECTION = 121
    LINESTRING = 122
    MULTILINESTRING = 123
    MULTIPOINT = 124
    MULTIPOLYGON = 125
    POINT = 126
    POLYGON = 127
    JSON = 128
    GEOMETRY = 129


def type_token(word: str) -> TypeToken:
    """Looks up the token identifier of a data type keyword (any case)."""
    return TypeToken[word.upper()]


# Data type keyword groups, one per grammar alternative family
STRING_TYPES: FrozenSet[str] = frozenset({
    "CHAR", "CHARACTER", "VARCHAR", "TINYTEXT", "TEXT", "MEDIUMTEXT",
    "LONGTEXT", "NCHAR", "NVARCHAR",
})
INTEGER_TYPES: FrozenSet[str] = frozenset({
    "TINYINT", "SMALLINT", "MEDIUMINT", "INT", "INTEGER", "BIGINT",
    "MIDDLEINT", "INT1", "INT2", "INT3", "INT4", "INT8",
})
TWO_DIMENSION_TYPES: FrozenSet[str] = frozenset({"REAL", "DOUBLE"})
OPTIONAL_TWO_DIMENSION_TYPES: FrozenSet[str] = frozenset({
    "DECIMAL", "DEC", "FIXED", "NUMERIC", "FLOAT", "FLOAT4", "FLOAT8",
})
SIMPLE_TYPES: FrozenSet[str] = frozenset({
    "DATE", "TINYBLOB", "MEDIUMBLOB", "LONGBLOB", "BOOL", "BOOLEAN", "SERIAL",
})
ONE_DIMENSION_TYPES: FrozenSet[str] = frozenset({
    "BIT", "TIME", "TIMESTAMP", "DATETIME", "BINARY", "VARBINARY", "BLOB",
    "YEAR", "VECTOR",
})
COLLECTION_TYPES: FrozenSet[str] = frozenset({"ENUM", "SET"})
SPATIAL_TYPES: FrozenSet[str] = frozenset({
    "GEOMETRYCOLLECTION", "GEOMCOLLECTION", "LINESTRING", "MULTILINESTRING",
    "MULTIPOINT", "MULTIPOLYGON", "POINT", "POLYGON", "JSON", "GEOMETRY",
})
NUMERIC_MODIFIERS: FrozenSet[str] = frozenset({"SIGNED", "UNSIGNED", "ZEROFILL"})

# Functions accepted as a DEFAULT / ON UPDATE timestamp
CURRENT_TIMESTAMP_WORDS: FrozenSet[str] = frozenset({
    "CURRENT_TIMESTAMP", "LOCALTIME", "LOCALTIMESTAMP", "NOW",
    "CURRENT_DATE", "CURRENT_TIME", "UTC_TIMESTAMP",
})

# Words that open a table-level definition instead of a column declaration
INDEX_DECLARATION_WORDS: FrozenSet[str] = frozenset({"INDEX", "KEY", "FULLTEXT", "SPATIAL"})
TABLE_CONSTRAINT_WORDS: FrozenSet[str] = frozenset({
    "CONSTRAINT", "PRIMARY", "UNIQUE", "FOREIGN", "CHECK",
})

# Words after the definitions list that turn a CREATE TABLE into CREATE ... SELECT
QUERY_CREATE_WORDS: FrozenSet[str] = frozenset({"SELECT", "AS", "IGNORE", "REPLACE", "WITH"})

# Table options of the form ``NAME [=] value``
TABLE_OPTION_WORDS: FrozenSet[str] = frozenset({
    "ENGINE", "ENGINE_ATTRIBUTE", "SECONDARY_ENGINE_ATTRIBUTE", "AUTOEXTEND_SIZE",
    "AUTO_INCREMENT", "AVG_ROW_LENGTH", "CHECKSUM", "PAGE_CHECKSUM", "COMMENT",
    "COMPRESSION", "CONNECTION", "DELAY_KEY_WRITE", "ENCRYPTION", "ENCRYPTED",
    "ENCRYPTION_KEY_ID", "INSERT_METHOD", "KEY_BLOCK_SIZE", "MAX_ROWS", "MIN_ROWS",
    "PACK_KEYS", "PASSWORD", "ROW_FORMAT", "STATS_AUTO_RECALC", "STATS_PERSISTENT",
    "STATS_SAMPLE_PAGES", "TABLE_TYPE", "TRANSACTIONAL", "PAGE_COMPRESSED",
    "PAGE_COMPRESSION_LEVEL",
})

# Stored programs whose single-statement body may itself be a CREATE TABLE
ROUTINE_OBJECTS: FrozenSet[str] = frozenset({"PROCEDURE", "FUNCTION", "TRIGGER", "EVENT"})


class StatementKind(str, Enum):
    """Top level statement categories of the MySQL grammar."""

    DDL = "DDL"
    DML = "DML"
    TRANSACTION = "TRANSACTION"
    REPLICATION = "REPLICATION"
    PREPARED = "PREPARED"
    ADMINISTRATION = "ADMINISTRATION"
    UTILITY = "UTILITY"


# Leading keyword -> statement category. Ambiguous leaders (CREATE USER,
# START SLAVE, SET TRANSACTION, ...) are refined by the parser.
STATEMENT_LEADERS: Dict[str, StatementKind] = {
    # DDL
    "CREATE": StatementKind.DDL,
    "ALTER": StatementKind.DDL,
    "DROP": StatementKind.DDL,
    "RENAME": StatementKind.DDL,
    "TRUNCATE": StatementKind.DDL,
    # DML
    "SELECT": StatementKind.DML,
    "INSERT": StatementKind.DML,
    "UPDATE": StatementKind.DML,
    "DELETE": StatementKind.DML,
    "REPLACE": StatementKind.DML,
    "CALL": StatementKind.DML,
    "LOAD": StatementKind.DML,
    "DO": StatementKind.DML,
    "HANDLER": StatementKind.DML,
    "WITH": StatementKind.DML,
    "VALUES": StatementKind.DML,
    "TABLE": StatementKind.DML,
    "IMPORT": StatementKind.DML,
    # Transaction
    "START": StatementKind.TRANSACTION,
    "BEGIN": StatementKind.TRANSACTION,
    "COMMIT": StatementKind.TRANSACTION,
    "ROLLBACK": StatementKind.TRANSACTION,
    "SAVEPOINT": StatementKind.TRANSACTION,
    "RELEASE": StatementKind.TRANSACTION,
    "LOCK": StatementKind.TRANSACTION,
    "UNLOCK": StatementKind.TRANSACTION,
    # Replication
    "CHANGE": StatementKind.REPLICATION,
    "PURGE": StatementKind.REPLICATION,
    "RESET": StatementKind.REPLICATION,
    "STOP": StatementKind.REPLICATION,
    "XA": StatementKind.REPLICATION,
    # Prepared
    "PREPARE": StatementKind.PREPARED,
    "EXECUTE": StatementKind.PREPARED,
    "DEALLOCATE": StatementKind.PREPARED,
    # Administration
    "GRANT": StatementKind.ADMINISTRATION,
    "REVOKE": StatementKind.ADMINISTRATION,
    "SET": StatementKind.ADMINISTRATION,
    "SHOW": StatementKind.ADMINISTRATION,
    "ANALYZE": StatementKind.ADMINISTRATION,
    "CHECK": StatementKind.ADMINISTRATION,
    "CHECKSUM": StatementKind.ADMINISTRATION,
    "OPTIMIZE": StatementKind.ADMINISTRATION,
    "REPAIR": StatementKind.ADMINISTRATION,
    "INSTALL": StatementKind.ADMINISTRATION,
    "UNINSTALL": StatementKind.ADMINISTRATION,
    "BINLOG": StatementKind.ADMINISTRATION,
    "CACHE": StatementKind.ADMINISTRATION,
    "FLUSH": StatementKind.ADMINISTRATION,
    "KILL": StatementKind.ADMINISTRATION,
    "SHUTDOWN": StatementKind.ADMINISTRATION,
    # Utility
    "USE": StatementKind.UTILITY,
    "DESCRIBE": StatementKind.UTILITY,
    "DESC": StatementKind.UTILITY,
    "EXPLAIN": StatementKind.UTILITY,
    "HELP": StatementKind.UTILITY,
    "SIGNAL": StatementKind.UTILITY,
    "RESIGNAL": StatementKind.UTILITY,
    "GET": StatementKind.UTILITY,
}

# CREATE/ALTER/DROP of these objects are administration statements
ACCOUNT_OBJECTS: FrozenSet[str] = frozenset({"USER", "ROLE"})
# START followed by one of these is a replication statement
REPLICATION_START_OBJECTS: FrozenSet[str] = frozenset({"SLAVE", "REPLICA", "GROUP_REPLICATION"})
# SET followed by one of these is a transaction statement
TRANSACTION_SET_WORDS: FrozenSet[str] = frozenset({"AUTOCOMMIT", "TRANSACTION"})
