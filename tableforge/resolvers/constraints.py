"""
Column and table constraint resolution.
"""

from typing import Iterable, List, Optional

from tableforge.diagnostics import Diagnostics
from tableforge.logging_config import get_logger
from tableforge.models import ColumnConstraint, DefaultValue, KeyKind, TableConstraint
from tableforge.parsers import tree
from tableforge.parsers.utils import replace_all, strip_control, trim_quote

logger = get_logger("resolver.constraints")

# Column clauses that are recognized but not carried by the schema model
UNSUPPORTED_COLUMN_CLAUSES = {
    tree.ReferenceColumnConstraint: "reference",
    tree.StorageColumnConstraint: "storage",
    tree.VisibilityColumnConstraint: "visibility",
    tree.InvisibilityColumnConstraint: "invisibility",
    tree.SerialDefaultColumnConstraint: "serial default",
    tree.GeneratedColumnConstraint: "generated column",
    tree.FormatColumnConstraint: "column format",
    tree.CollateColumnConstraint: "collate",
    tree.CheckColumnConstraint: "check",
    tree.OnUpdateColumnConstraint: "on update",
}


def uid_text(node: tree.Node) -> str:
    """Normalized identifier text: quotes trimmed, control characters removed."""
    return strip_control(trim_quote(node.get_text()))


class ConstraintResolver:
    def __init__(self, diagnostics: Optional[Diagnostics] = None):
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self._column_handlers = {
            tree.NullColumnConstraint: self._apply_null,
            tree.DefaultColumnConstraint: self._apply_default,
            tree.AutoIncrementColumnConstraint: self._apply_auto_increment,
            tree.PrimaryKeyColumnConstraint: self._apply_primary_key,
            tree.UniqueKeyColumnConstraint: self._apply_unique,
            tree.CommentColumnConstraint: self._apply_comment,
        }
        self._table_handlers = {
            tree.PrimaryKeyTableConstraint: "column_primary_key",
            tree.UniqueKeyTableConstraint: "column_unique_key",
            tree.ForeignKeyTableConstraint: "column_foreign_key",
        }

    # ------------------------------------------------------------------
    # column constraints

    def resolve_column_constraint(self, clauses: Iterable[tree.ColumnConstraintNode]) -> ColumnConstraint:
        """
        Folds the clauses of one column definition into a ``ColumnConstraint``.

        Each clause sets its own fields only. Clauses without a model
        counterpart are skipped with an ``unsupported`` diagnostic.
        """
        constraint = ColumnConstraint()
        for clause in clauses:
            handler = self._column_handlers.get(type(clause))
            if handler is not None:
                handler(constraint, clause)
                continue

            label = UNSUPPORTED_COLUMN_CLAUSES.get(type(clause))
            if label is not None:
                self.diagnostics.unsupported(f"unsupported {label} column constraint",
                                             construct=clause.get_text())
            else:
                self.diagnostics.unexpected(f"unknown column constraint node {type(clause).__name__}",
                                            construct=clause.get_text())
        return constraint

    def _apply_null(self, constraint: ColumnConstraint, clause: tree.NullColumnConstraint):
        if clause.null_notnull is not None and clause.null_notnull.not_ is not None:
            constraint.not_null = True

    def _apply_default(self, constraint: ColumnConstraint, clause: tree.DefaultColumnConstraint):
        constraint.default_value = default_value(clause.default_value)

    def _apply_auto_increment(self, constraint: ColumnConstraint, clause):
        constraint.auto_increment = True

    def _apply_primary_key(self, constraint: ColumnConstraint, clause: tree.PrimaryKeyColumnConstraint):
        kind = KeyKind.PRIMARY if clause.primary is not None else KeyKind.KEY
        constraint.set_key_kind(kind)

    def _apply_unique(self, constraint: ColumnConstraint, clause):
        constraint.unique = True

    def _apply_comment(self, constraint: ColumnConstraint, clause: tree.CommentColumnConstraint):
        text = trim_quote(clause.string_literal.value)
        constraint.comment = replace_all(text, "\r", "", "\n", "")

    # ------------------------------------------------------------------
    # table constraints

    def resolve_table_constraint(self, node: tree.TableConstraintNode) -> Optional[TableConstraint]:
        """
        Extracts the column list of a PRIMARY KEY, UNIQUE or FOREIGN KEY
        constraint. Returns ``None`` for a constraint the model does not carry.
        """
        field_name = self._table_handlers.get(type(node))
        if field_name is None:
            if isinstance(node, tree.CheckTableConstraint):
                self.diagnostics.unsupported("unsupported check table constraint",
                                             construct=node.get_text())
            else:
                self.diagnostics.unexpected(f"unknown table constraint node {type(node).__name__}",
                                            construct=node.get_text())
            return None

        if isinstance(node, tree.UniqueKeyTableConstraint):
            for uid in node.all_uids():
                logger.debug(f"Unique key index name {uid_text(uid)}")

        result = TableConstraint()
        setattr(result, field_name, self.index_column_names(node.index_columns))
        return result

    def index_column_names(self, node: Optional[tree.IndexColumnNames]) -> List[str]:
        """Column names of an index column list, in declaration order."""
        names = []
        if node is None:
            return names
        for column in node.columns:
            if column.uid is not None:
                names.append(uid_text(column.uid))
            elif column.string_literal is not None:
                names.append(strip_control(trim_quote(column.string_literal.value)))
            else:
                self.diagnostics.unsupported("unsupported functional key part",
                                             construct=column.get_text())
        logger.debug(f"Index column names {names}")
        return names


def default_value(node: Optional[tree.DefaultValueNode]) -> DefaultValue:
    """
    Reads a ``DEFAULT`` value.

    The value text is the clause tokens joined without layout, quotes
    trimmed. Anything reading as ``NULL...`` is an explicit null default.
    """
    text = node.get_text() if node is not None else ""
    text = strip_control(trim_quote(text))
    if text.upper().startswith("NULL"):
        return DefaultValue()
    return DefaultValue(value=text, is_=True)
