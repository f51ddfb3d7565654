"""
Statement walker.

Visits the statements of a parsed script and builds one ``CreateTable``
per column-definition ``CREATE TABLE``. Everything else is recognized,
reported as unsupported and skipped.
"""

from typing import List, Optional

from tableforge.diagnostics import Diagnostics
from tableforge.logging_config import get_logger
from tableforge.models import (
    ColumnDeclaration,
    ColumnDefinition,
    CreateDefinitions,
    CreateTable,
)
from tableforge.parsers import tree
from tableforge.parsers.utils import strip_control, trim_quote
from tableforge.resolvers.constraints import ConstraintResolver, uid_text
from tableforge.resolvers.datatype import DataTypeResolver

logger = get_logger("walker")


class StatementWalker:
    def __init__(self, diagnostics: Optional[Diagnostics] = None):
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.datatypes = DataTypeResolver(self.diagnostics)
        self.constraints = ConstraintResolver(self.diagnostics)

    def walk(self, root: tree.Root) -> List[CreateTable]:
        """Returns the resolved tables of ``root`` in statement order."""
        tables = []
        for statement in root.statements:
            table = self.visit_statement(statement)
            if table is not None:
                tables.append(table)
        logger.info(f"Resolved {len(tables)} table(s) from {len(root.statements)} statement(s)")
        return tables

    def visit_statement(self, statement: tree.SqlStatement) -> Optional[CreateTable]:
        if not isinstance(statement, tree.DdlStatement):
            self.diagnostics.unsupported(f"unsupported {statement.kind.value} statement",
                                         construct=_excerpt(statement), component="walker")
            return None
        if statement.create_table is None:
            self.diagnostics.unsupported("unsupported DDL statement",
                                         construct=_excerpt(statement), component="walker")
            return None
        return self.visit_create_table(statement.create_table)

    def visit_create_table(self, node: tree.CreateTableNode) -> Optional[CreateTable]:
        """
        Resolves the column-definition form. ``LIKE`` copies and
        ``CREATE ... SELECT`` give ``None``.
        """
        if isinstance(node, tree.CopyCreateTable):
            self.diagnostics.unsupported("unsupported copy create table",
                                         construct=_excerpt(node), component="walker")
            return None
        if isinstance(node, tree.QueryCreateTable):
            self.diagnostics.unsupported("unsupported query create table",
                                         construct=_excerpt(node), component="walker")
            return None
        if not isinstance(node, tree.ColumnCreateTable):
            self.diagnostics.unexpected(f"unknown create table node {type(node).__name__}",
                                        construct=_excerpt(node), component="walker")
            return None

        name = strip_control(trim_quote(node.table_name.get_text()))
        definitions = self.visit_create_definitions(node.definitions)
        logger.debug(f"Walked table {name}: {len(definitions.column_declarations)} column(s)")
        return CreateTable(
            name=name,
            columns=definitions.column_declarations,
            constraints=definitions.table_constraints,
        )

    def visit_create_definitions(self, node: Optional[tree.CreateDefinitionsNode]) -> CreateDefinitions:
        result = CreateDefinitions()
        if node is None:
            return result
        for definition in node.definitions:
            if isinstance(definition, tree.ColumnDeclarationNode):
                result.column_declarations.append(self.visit_column_declaration(definition))
            elif isinstance(definition, tree.ConstraintDeclaration):
                constraint = self.constraints.resolve_table_constraint(definition.table_constraint)
                if constraint is not None:
                    result.table_constraints.append(constraint)
            elif isinstance(definition, tree.IndexDeclaration):
                self.diagnostics.unsupported("unsupported index declaration",
                                             construct=definition.get_text(), component="walker")
            else:
                self.diagnostics.unexpected(f"unknown create definition node {type(definition).__name__}",
                                            construct=definition.get_text(), component="walker")
        return result

    def visit_column_declaration(self, node: tree.ColumnDeclarationNode) -> ColumnDeclaration:
        declaration = ColumnDeclaration(name=uid_text(node.column_name.uid))
        if node.column_definition is not None:
            declaration.column_definition = self.visit_column_definition(node.column_definition)
        return declaration

    def visit_column_definition(self, node: tree.ColumnDefinitionNode) -> ColumnDefinition:
        return ColumnDefinition(
            data_type=self.datatypes.resolve(node.data_type),
            column_constraint=self.constraints.resolve_column_constraint(node.constraints),
        )


def _excerpt(node: tree.Node, limit: int = 60) -> str:
    text = " ".join(t.value for t in node.tokens)
    return text if len(text) <= limit else text[:limit] + "..."
