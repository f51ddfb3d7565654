"""
Concrete syntax tree produced by ``MySQLParser``.

One class per grammar alternative. Every node keeps the span of tokens it
was built from, so ``get_text()`` reproduces the matched input with layout
removed (``VARCHAR ( 255 )`` -> ``VARCHAR(255)``), which is the text the
resolvers canonicalize.

Each grammar category is a closed family of classes; the resolvers dispatch
on the concrete class.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from tableforge.constants import StatementKind
from tableforge.parsers.lexer import Token


@dataclass
class Node:
    tokens: List[Token] = field(default_factory=list, repr=False, compare=False)

    def get_text(self) -> str:
        return "".join(t.value for t in self.tokens)


# --- identifiers

@dataclass
class Uid(Node):
    pass


@dataclass
class FullColumnName(Node):
    uid: Optional[Uid] = None
    dotted: List[Uid] = field(default_factory=list)


@dataclass
class TableName(Node):
    pass


@dataclass
class CharSet(Node):
    """``CHARACTER SET`` | ``CHARSET`` | ``CHAR SET``"""
    char: Optional[Token] = None
    character: Optional[Token] = None
    charset: Optional[Token] = None


@dataclass
class CharsetName(Node):
    pass


@dataclass
class CollationName(Node):
    pass


# --- lengths

@dataclass
class LengthOneDimension(Node):
    value: Optional[Token] = None


@dataclass
class LengthTwoDimension(Node):
    first: Optional[Token] = None
    second: Optional[Token] = None


@dataclass
class LengthTwoOptionalDimension(Node):
    first: Optional[Token] = None
    second: Optional[Token] = None


# --- data types

@dataclass
class DataTypeNode(Node):
    type_name: Optional[Token] = None


@dataclass
class StringDataType(DataTypeNode):
    varying: Optional[Token] = None
    length: Optional[LengthOneDimension] = None
    binary: Optional[Token] = None
    char_set: Optional[CharSet] = None
    charset_name: Optional[CharsetName] = None
    collation: Optional[CollationName] = None


@dataclass
class NationalVaryingStringDataType(DataTypeNode):
    national: Optional[Token] = None
    varying: Optional[Token] = None
    length: Optional[LengthOneDimension] = None
    binary: Optional[Token] = None


@dataclass
class NationalStringDataType(DataTypeNode):
    national: Optional[Token] = None
    nchar: Optional[Token] = None
    length: Optional[LengthOneDimension] = None
    binary: Optional[Token] = None


@dataclass
class DimensionDataType(DataTypeNode):
    length_one: Optional[LengthOneDimension] = None
    length_two: Optional[LengthTwoDimension] = None
    length_two_optional: Optional[LengthTwoOptionalDimension] = None
    precision: Optional[Token] = None
    signed: List[Token] = field(default_factory=list)
    unsigned: List[Token] = field(default_factory=list)
    zerofill: List[Token] = field(default_factory=list)


@dataclass
class SimpleDataType(DataTypeNode):
    pass


@dataclass
class CollectionOptions(Node):
    literals: List[Token] = field(default_factory=list)


@dataclass
class CollectionDataType(DataTypeNode):
    options: Optional[CollectionOptions] = None
    binary: Optional[Token] = None
    char_set: Optional[CharSet] = None
    charset_name: Optional[CharsetName] = None


@dataclass
class SpatialDataType(DataTypeNode):
    srid: Optional[Token] = None


@dataclass
class LongVarcharDataType(DataTypeNode):
    varchar: Optional[Token] = None
    binary: Optional[Token] = None
    char_set: Optional[CharSet] = None
    charset_name: Optional[CharsetName] = None
    collation: Optional[CollationName] = None


@dataclass
class LongVarbinaryDataType(DataTypeNode):
    long: Optional[Token] = None
    varbinary: Optional[Token] = None


# --- index columns

@dataclass
class IndexColumnName(Node):
    uid: Optional[Uid] = None
    string_literal: Optional[Token] = None
    expression: Optional[Node] = None  # functional key part
    length: Optional[LengthOneDimension] = None
    sort: Optional[Token] = None


@dataclass
class IndexColumnNames(Node):
    columns: List[IndexColumnName] = field(default_factory=list)


@dataclass
class ReferenceDefinition(Node):
    table_name: Optional[TableName] = None
    columns: Optional[IndexColumnNames] = None
    on_delete: Optional[str] = None
    on_update: Optional[str] = None


# --- column constraints

@dataclass
class ColumnConstraintNode(Node):
    pass


@dataclass
class NullNotnull(Node):
    not_: Optional[Token] = None
    null: Optional[Token] = None


@dataclass
class NullColumnConstraint(ColumnConstraintNode):
    null_notnull: Optional[NullNotnull] = None


@dataclass
class DefaultValueNode(Node):
    pass


@dataclass
class DefaultColumnConstraint(ColumnConstraintNode):
    default_value: Optional[DefaultValueNode] = None


@dataclass
class AutoIncrementColumnConstraint(ColumnConstraintNode):
    pass


@dataclass
class OnUpdateColumnConstraint(ColumnConstraintNode):
    pass


@dataclass
class PrimaryKeyColumnConstraint(ColumnConstraintNode):
    primary: Optional[Token] = None
    key: Optional[Token] = None


@dataclass
class UniqueKeyColumnConstraint(ColumnConstraintNode):
    unique: Optional[Token] = None
    key: Optional[Token] = None


@dataclass
class CommentColumnConstraint(ColumnConstraintNode):
    string_literal: Optional[Token] = None


@dataclass
class FormatColumnConstraint(ColumnConstraintNode):
    pass


@dataclass
class StorageColumnConstraint(ColumnConstraintNode):
    pass


@dataclass
class VisibilityColumnConstraint(ColumnConstraintNode):
    pass


@dataclass
class InvisibilityColumnConstraint(ColumnConstraintNode):
    pass


@dataclass
class ReferenceColumnConstraint(ColumnConstraintNode):
    reference: Optional[ReferenceDefinition] = None


@dataclass
class CollateColumnConstraint(ColumnConstraintNode):
    collation: Optional[CollationName] = None


@dataclass
class GeneratedColumnConstraint(ColumnConstraintNode):
    pass


@dataclass
class SerialDefaultColumnConstraint(ColumnConstraintNode):
    pass


@dataclass
class CheckColumnConstraint(ColumnConstraintNode):
    pass


@dataclass
class ColumnDefinitionNode(Node):
    data_type: Optional[DataTypeNode] = None
    constraints: List[ColumnConstraintNode] = field(default_factory=list)


# --- table constraints and indexes

@dataclass
class TableConstraintNode(Node):
    name: Optional[Uid] = None


@dataclass
class PrimaryKeyTableConstraint(TableConstraintNode):
    index: Optional[Uid] = None
    index_columns: Optional[IndexColumnNames] = None


@dataclass
class UniqueKeyTableConstraint(TableConstraintNode):
    index_format: Optional[Token] = None
    index: Optional[Uid] = None
    index_columns: Optional[IndexColumnNames] = None

    def all_uids(self) -> List[Uid]:
        return [uid for uid in (self.name, self.index) if uid is not None]


@dataclass
class ForeignKeyTableConstraint(TableConstraintNode):
    index: Optional[Uid] = None
    index_columns: Optional[IndexColumnNames] = None
    reference: Optional[ReferenceDefinition] = None


@dataclass
class CheckTableConstraint(TableConstraintNode):
    pass


@dataclass
class IndexColumnDefinition(Node):
    index_format: Optional[Token] = None
    index: Optional[Uid] = None
    index_columns: Optional[IndexColumnNames] = None


@dataclass
class SimpleIndexDeclaration(IndexColumnDefinition):
    pass


@dataclass
class SpecialIndexDeclaration(IndexColumnDefinition):
    kind: Optional[Token] = None  # FULLTEXT | SPATIAL


# --- create definitions

@dataclass
class CreateDefinition(Node):
    pass


@dataclass
class ColumnDeclarationNode(CreateDefinition):
    column_name: Optional[FullColumnName] = None
    column_definition: Optional[ColumnDefinitionNode] = None


@dataclass
class ConstraintDeclaration(CreateDefinition):
    table_constraint: Optional[TableConstraintNode] = None


@dataclass
class IndexDeclaration(CreateDefinition):
    index_column_definition: Optional[IndexColumnDefinition] = None


@dataclass
class CreateDefinitionsNode(Node):
    definitions: List[CreateDefinition] = field(default_factory=list)


# --- CREATE TABLE variants

@dataclass
class CreateTableNode(Node):
    temporary: bool = False
    if_not_exists: bool = False
    table_name: Optional[TableName] = None


@dataclass
class CopyCreateTable(CreateTableNode):
    like_table: Optional[TableName] = None


@dataclass
class QueryCreateTable(CreateTableNode):
    definitions: Optional[CreateDefinitionsNode] = None
    query: Optional[Node] = None


@dataclass
class ColumnCreateTable(CreateTableNode):
    definitions: Optional[CreateDefinitionsNode] = None
    options: Optional[Node] = None


# --- statements

@dataclass
class SqlStatement(Node):
    kind: StatementKind = StatementKind.DDL


@dataclass
class DdlStatement(SqlStatement):
    create_table: Optional[CreateTableNode] = None


@dataclass
class DmlStatement(SqlStatement):
    kind: StatementKind = StatementKind.DML


@dataclass
class TransactionStatement(SqlStatement):
    kind: StatementKind = StatementKind.TRANSACTION


@dataclass
class ReplicationStatement(SqlStatement):
    kind: StatementKind = StatementKind.REPLICATION


@dataclass
class PreparedStatement(SqlStatement):
    kind: StatementKind = StatementKind.PREPARED


@dataclass
class AdministrationStatement(SqlStatement):
    kind: StatementKind = StatementKind.ADMINISTRATION


@dataclass
class UtilityStatement(SqlStatement):
    kind: StatementKind = StatementKind.UTILITY


@dataclass
class Root(Node):
    statements: List[SqlStatement] = field(default_factory=list)
