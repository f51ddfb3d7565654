from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

# Separator the grammar leaves between a quoted qualifier and the table name
QUALIFIER_SEPARATOR = "`.`"


class KeyKind(Enum):
    """What a column-level ``[PRIMARY] KEY`` clause declared."""
    NONE = "none"
    KEY = "key"
    PRIMARY = "primary"


@dataclass
class DataType:
    name: str = ""
    number: int = 0  # TypeToken of the keyword
    source: str = ""  # canonical re-rendering, e.g. "VARCHAR(255)"

    has_length: bool = False
    length: int = 0
    is_national: bool = False
    is_binary: bool = False
    is_nchar: bool = False
    is_varying: bool = False

    is_signed: bool = False
    is_unsigned: bool = False
    is_zero_fill: bool = False

    # (precision, scale)
    has_two_length: bool = False
    len1: int = 0
    len2: int = 0

    # LONG VARCHAR and charset clauses
    is_varchar: bool = False
    is_char: bool = False
    is_charset: bool = False
    is_character: bool = False
    charset_name: str = ""

    collection_options: Optional[List[str]] = None  # ENUM / SET members

    def __str__(self):
        return self.source

    def to_dict(self):
        return {
            "name": self.name,
            "number": int(self.number),
            "source": self.source,
            "has_length": self.has_length,
            "length": self.length,
            "is_national": self.is_national,
            "is_binary": self.is_binary,
            "is_nchar": self.is_nchar,
            "is_varying": self.is_varying,
            "is_signed": self.is_signed,
            "is_unsigned": self.is_unsigned,
            "is_zero_fill": self.is_zero_fill,
            "has_two_length": self.has_two_length,
            "len1": self.len1,
            "len2": self.len2,
            "is_varchar": self.is_varchar,
            "is_char": self.is_char,
            "is_charset": self.is_charset,
            "is_character": self.is_character,
            "charset_name": self.charset_name,
            "collection_options": self.collection_options,
        }


@dataclass
class DefaultValue:
    """
    Value of a ``DEFAULT`` clause.

    ``DEFAULT NULL`` is ``DefaultValue("", False)``; a column without any
    ``DEFAULT`` clause has no ``DefaultValue`` at all.
    """
    value: str = ""
    is_: bool = False

    def to_dict(self):
        return {"value": self.value, "is": self.is_}


@dataclass
class ColumnConstraint:
    not_null: bool = False
    default_value: Optional[DefaultValue] = None
    auto_increment: bool = False
    primary: bool = False
    key: bool = False
    unique: bool = False
    comment: str = ""

    @property
    def key_kind(self) -> KeyKind:
        if self.primary:
            return KeyKind.PRIMARY
        if self.key:
            return KeyKind.KEY
        return KeyKind.NONE

    def set_key_kind(self, kind: KeyKind):
        if kind is KeyKind.PRIMARY:
            self.primary = True
        elif kind is KeyKind.KEY:
            self.key = True

    def to_dict(self):
        return {
            "not_null": self.not_null,
            "default_value": self.default_value.to_dict() if self.default_value else None,
            "auto_increment": self.auto_increment,
            "primary": self.primary,
            "key": self.key,
            "unique": self.unique,
            "comment": self.comment,
        }


@dataclass
class TableConstraint:
    column_primary_key: Optional[List[str]] = None
    column_unique_key: Optional[List[str]] = None  # column names, not the index name
    column_foreign_key: Optional[List[str]] = None

    def to_dict(self):
        return {
            "column_primary_key": self.column_primary_key,
            "column_unique_key": self.column_unique_key,
            "column_foreign_key": self.column_foreign_key,
        }


@dataclass
class Column:
    name: str
    data_type: Optional[DataType] = None
    constraint: Optional[ColumnConstraint] = None

    def __repr__(self):
        source = self.data_type.source if self.data_type else None
        return f"Column(name='{self.name}', type='{source}')"

    def to_dict(self):
        return {
            "name": self.name,
            "data_type": self.data_type.to_dict() if self.data_type else None,
            "constraint": self.constraint.to_dict() if self.constraint else None,
        }


@dataclass
class Table:
    name: str
    columns: List[Column] = field(default_factory=list)
    constraints: List[TableConstraint] = field(default_factory=list)

    def get_column(self, name: str) -> Optional[Column]:
        for column in self.columns:
            if column.name == name:
                return column
        return None

    def __str__(self):
        lines = [f"table name: {self.name}"]
        for col in self.columns:
            source = col.data_type.source if col.data_type else ""
            line = f"col {col.name}\t\t{source}\t\t"
            if col.constraint and col.constraint.comment:
                line += f"comment {col.constraint.comment}"
            lines.append(line)
        for cons in self.constraints:
            if cons.column_primary_key is not None:
                lines.append("primary key: " + ", ".join(cons.column_primary_key))
            if cons.column_unique_key is not None:
                lines.append("unique key: " + ", ".join(cons.column_unique_key))
            if cons.column_foreign_key is not None:
                lines.append("foreign key: " + ", ".join(cons.column_foreign_key))
        return "\n".join(lines) + "\n"

    def to_dict(self):
        return {
            "name": self.name,
            "columns": [c.to_dict() for c in self.columns],
            "constraints": [c.to_dict() for c in self.constraints],
        }


# Intermediate model, built while walking one CREATE TABLE statement

@dataclass
class ColumnDefinition:
    data_type: Optional[DataType] = None
    column_constraint: Optional[ColumnConstraint] = None


@dataclass
class ColumnDeclaration:
    name: str = ""
    column_definition: Optional[ColumnDefinition] = None


@dataclass
class CreateDefinitions:
    column_declarations: List[ColumnDeclaration] = field(default_factory=list)
    table_constraints: List[TableConstraint] = field(default_factory=list)


@dataclass
class CreateTable:
    name: str = ""
    columns: List[ColumnDeclaration] = field(default_factory=list)
    constraints: List[TableConstraint] = field(default_factory=list)

    def convert(self) -> Table:
        """Builds the exported ``Table`` from this walk result."""
        table = Table(name=only_table_name(self.name))
        for declaration in self.columns:
            column = Column(name=declaration.name)
            definition = declaration.column_definition
            if definition is not None:
                column.data_type = definition.data_type
                column.constraint = definition.column_constraint
            table.columns.append(column)
        table.constraints = list(self.constraints)
        return table


def only_table_name(name: str) -> str:
    """
    Drops a database qualifier from a table name.

    The grammar keeps a qualified name as one text, so after quote trimming
    `` `db`.`tbl` `` arrives as ``db`.`tbl``. Only that shape is handled.
    """
    return name.split(QUALIFIER_SEPARATOR)[-1]
