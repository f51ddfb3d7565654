"""
MySQL grammar for the statements TableForge reads.

``CREATE TABLE`` is parsed down to every data type, column constraint and
table constraint alternative. Every other statement is classified by its
leading keywords and kept as an opaque token span. Parsing is fail-fast:
the first token that fits no alternative raises ``SQLSyntaxError``.
"""

from typing import Callable, List, Optional, TypeVar

from tableforge.constants import (
    ACCOUNT_OBJECTS,
    COLLECTION_TYPES,
    CURRENT_TIMESTAMP_WORDS,
    INDEX_DECLARATION_WORDS,
    INTEGER_TYPES,
    NUMERIC_MODIFIERS,
    ONE_DIMENSION_TYPES,
    OPTIONAL_TWO_DIMENSION_TYPES,
    QUERY_CREATE_WORDS,
    REPLICATION_START_OBJECTS,
    ROUTINE_OBJECTS,
    SIMPLE_TYPES,
    SPATIAL_TYPES,
    STATEMENT_LEADERS,
    STRING_TYPES,
    TABLE_CONSTRAINT_WORDS,
    TABLE_OPTION_WORDS,
    TRANSACTION_SET_WORDS,
    TWO_DIMENSION_TYPES,
    StatementKind,
)
from tableforge.exceptions import SQLSyntaxError
from tableforge.logging_config import get_logger
from tableforge.parsers.base import BaseParser
from tableforge.parsers.lexer import Token, TokenKind, tokenize
from tableforge.parsers import tree

N = TypeVar("N")

STATEMENT_CLASSES = {
    StatementKind.DML: tree.DmlStatement,
    StatementKind.TRANSACTION: tree.TransactionStatement,
    StatementKind.REPLICATION: tree.ReplicationStatement,
    StatementKind.PREPARED: tree.PreparedStatement,
    StatementKind.ADMINISTRATION: tree.AdministrationStatement,
    StatementKind.UTILITY: tree.UtilityStatement,
}

UNARY_OPERATORS = ("-", "+", "~", "!")
REFERENCE_CONTROL_WORDS = ("RESTRICT", "CASCADE", "SET", "NO")
END_BLOCK_QUALIFIERS = ("IF", "LOOP", "WHILE", "REPEAT")


class MySQLParser(BaseParser):
    """
    Recursive descent parser over the token stream of ``lexer.tokenize``.

    An instance keeps the position of the parse in progress, so it must not
    be shared between threads; create one per input.
    """

    def __init__(self):
        self.logger = get_logger("parser")
        self._tokens: List[Token] = []
        self._pos = 0
        self._statement_start = 0

    # ------------------------------------------------------------------
    # entry points

    def parse(self, sql_content: str) -> tree.Root:
        """Parses a whole script into a ``Root`` of statements."""
        self._reset(sql_content)
        return self._root()

    def parse_create_table(self, text: str) -> tree.CreateTableNode:
        return self._fragment(text, self._create_table)

    def parse_create_definition(self, text: str) -> tree.CreateDefinition:
        return self._fragment(text, self._create_definition)

    def parse_column_definition(self, text: str) -> tree.ColumnDefinitionNode:
        return self._fragment(text, self._column_definition)

    def parse_data_type(self, text: str) -> tree.DataTypeNode:
        return self._fragment(text, self._data_type)

    def parse_table_constraint(self, text: str) -> tree.TableConstraintNode:
        return self._fragment(text, self._table_constraint)

    def _reset(self, text: str):
        self._tokens = tokenize(text)
        self._pos = 0
        self._statement_start = 0

    def _fragment(self, text: str, rule: Callable[[], N]) -> N:
        self._reset(text)
        node = rule()
        self._accept_punct(";")
        if not self._at_eof():
            self._error("extraneous input", "<EOF>")
        return node

    # ------------------------------------------------------------------
    # token helpers

    def _peek(self, offset: int = 0) -> Token:
        index = min(self._pos + offset, len(self._tokens) - 1)
        return self._tokens[index]

    def _next(self) -> Token:
        token = self._peek()
        if token.kind is not TokenKind.EOF:
            self._pos += 1
        return token

    def _at_eof(self) -> bool:
        return self._peek().kind is TokenKind.EOF

    def _at_statement_end(self) -> bool:
        return self._at_eof() or self._peek().is_punct(";")

    def _at_word(self, *words: str, offset: int = 0) -> bool:
        return self._peek(offset).is_word(*words)

    def _accept_word(self, *words: str) -> Optional[Token]:
        if self._at_word(*words):
            return self._next()
        return None

    def _expect_word(self, *words: str) -> Token:
        if not self._at_word(*words):
            self._error("mismatched input", " or ".join(words))
        return self._next()

    def _accept_punct(self, value: str) -> Optional[Token]:
        if self._peek().is_punct(value):
            return self._next()
        return None

    def _expect_punct(self, value: str) -> Token:
        if not self._peek().is_punct(value):
            self._error("mismatched input", f"'{value}'")
        return self._next()

    def _accept_operator(self, value: str) -> Optional[Token]:
        token = self._peek()
        if token.kind is TokenKind.OPERATOR and token.value == value:
            return self._next()
        return None

    def _expect_kind(self, kind: TokenKind, expecting: str) -> Token:
        if self._peek().kind is not kind:
            self._error("mismatched input", expecting)
        return self._next()

    def _span(self, start: int) -> List[Token]:
        return self._tokens[start:self._pos]

    def _error(self, reason: str, expecting: str = ""):
        token = self._peek()
        message = f"{reason} '{token}'"
        if expecting:
            message += f" expecting {expecting}"
        raise SQLSyntaxError(message, token.line, token.column, statement=self._statement_text())

    def _statement_text(self) -> str:
        """Text of the statement in progress, up to and including the current token."""
        end = min(self._pos + 1, len(self._tokens) - 1)
        return " ".join(t.value for t in self._tokens[self._statement_start:end])

    def _balanced(self) -> tree.Node:
        """Consumes one parenthesized group, nested groups included."""
        start = self._pos
        self._expect_punct("(")
        depth = 1
        while depth:
            token = self._next()
            if token.kind is TokenKind.EOF:
                self._error("missing ')' at", "')'")
            if token.is_punct("("):
                depth += 1
            elif token.is_punct(")"):
                depth -= 1
        return tree.Node(tokens=self._span(start))

    def _skip_statement(self, blocks: bool = False):
        """
        Consumes tokens up to the end of the current statement.

        A statement ends at ``;`` or where a ``CREATE TABLE`` starts at
        nesting depth 0, unless it creates a stored program. With ``blocks``
        set, ``;`` inside ``BEGIN ... END`` and ``CASE ... END`` bodies of
        stored programs does not end the statement.
        """
        creates = self._at_word("CREATE")
        routine = False
        depth = 0
        block_depth = 0
        while not self._at_eof():
            token = self._peek()
            if depth == 0 and block_depth == 0:
                if token.is_punct(";"):
                    return
                if not routine and self._is_create_table():
                    return
            self._next()
            if creates and token.is_word(*ROUTINE_OBJECTS):
                routine = True
            if token.is_punct("("):
                depth += 1
            elif token.is_punct(")"):
                if depth == 0:
                    self._pos -= 1
                    self._error("extraneous input")
                depth -= 1
            elif blocks and token.is_word("BEGIN", "CASE"):
                block_depth += 1
            elif blocks and token.is_word("END") and block_depth:
                if not self._at_word(*END_BLOCK_QUALIFIERS):
                    block_depth -= 1

    # ------------------------------------------------------------------
    # statements

    def _root(self) -> tree.Root:
        statements = []
        while not self._at_eof():
            if self._accept_punct(";"):
                continue
            statements.append(self._sql_statement())
        return tree.Root(statements=statements, tokens=list(self._tokens[:-1]))

    def _statement_kind(self) -> StatementKind:
        leader = self._peek()
        kind = STATEMENT_LEADERS.get(leader.upper) if leader.kind is TokenKind.WORD else None
        if kind is None:
            self._error("no viable alternative at input")

        if kind is StatementKind.DDL and leader.is_word("CREATE", "ALTER", "DROP"):
            if self._at_word(*ACCOUNT_OBJECTS, offset=1):
                return StatementKind.ADMINISTRATION
        elif leader.is_word("START") and self._at_word(*REPLICATION_START_OBJECTS, offset=1):
            return StatementKind.REPLICATION
        elif leader.is_word("SET"):
            offset = 1
            while self._at_word("GLOBAL", "SESSION", "LOCAL", offset=offset):
                offset += 1
            if self._at_word(*TRANSACTION_SET_WORDS, offset=offset):
                return StatementKind.TRANSACTION
        return kind

    def _sql_statement(self) -> tree.SqlStatement:
        start = self._statement_start = self._pos
        kind = self._statement_kind()
        if kind is StatementKind.DDL:
            statement = self._ddl_statement()
        else:
            self._skip_statement()
            statement = STATEMENT_CLASSES[kind](tokens=self._span(start))
        self.logger.debug(f"Classified {kind.value} statement",
                          extra={"statement": " ".join(t.value for t in statement.tokens)[:50]})
        return statement

    def _ddl_statement(self) -> tree.DdlStatement:
        start = self._pos
        create_table = None
        if self._is_create_table():
            create_table = self._create_table()
        else:
            self._skip_statement(blocks=True)
        return tree.DdlStatement(create_table=create_table, tokens=self._span(start))

    def _is_create_table(self) -> bool:
        if not self._at_word("CREATE"):
            return False
        offset = 2 if self._at_word("TEMPORARY", offset=1) else 1
        return self._at_word("TABLE", offset=offset)

    # ------------------------------------------------------------------
    # CREATE TABLE

    def _create_table(self) -> tree.CreateTableNode:
        start = self._pos
        self._expect_word("CREATE")
        temporary = self._accept_word("TEMPORARY") is not None
        self._expect_word("TABLE")
        if_not_exists = False
        if self._accept_word("IF"):
            self._expect_word("NOT")
            self._expect_word("EXISTS")
            if_not_exists = True
        table_name = self._table_name()
        header = dict(temporary=temporary, if_not_exists=if_not_exists, table_name=table_name)

        # CREATE TABLE t LIKE other | CREATE TABLE t (LIKE other)
        if self._accept_word("LIKE"):
            like_table = self._table_name()
            return tree.CopyCreateTable(like_table=like_table, tokens=self._span(start), **header)
        if self._peek().is_punct("(") and self._at_word("LIKE", offset=1):
            self._next()
            self._next()
            like_table = self._table_name()
            self._expect_punct(")")
            return tree.CopyCreateTable(like_table=like_table, tokens=self._span(start), **header)

        definitions = None
        if self._peek().is_punct("(") and not self._at_word("SELECT", "WITH", offset=1):
            definitions = self._create_definitions()

        options_start = self._pos
        self._table_options()
        if self._at_word("PARTITION"):
            self._partition_definitions()

        if self._at_query_start():
            query_start = self._pos
            self._skip_statement()
            query = tree.Node(tokens=self._tokens[query_start:self._pos])
            return tree.QueryCreateTable(definitions=definitions, query=query,
                                         tokens=self._span(start), **header)

        if definitions is None:
            self._error("mismatched input", "'('")
        options = tree.Node(tokens=self._span(options_start))
        self._expect_statement_end()
        return tree.ColumnCreateTable(definitions=definitions, options=options,
                                      tokens=self._span(start), **header)

    def _at_query_start(self) -> bool:
        if self._at_word(*QUERY_CREATE_WORDS):
            return True
        return self._peek().is_punct("(") and self._at_word("SELECT", "WITH", offset=1)

    def _expect_statement_end(self):
        """
        The statement must end here: at ``;``, at the end of input, or at
        the leading keyword of the next statement when the ``;`` is omitted.
        """
        token = self._peek()
        if self._at_statement_end():
            return
        if token.kind is TokenKind.WORD and token.upper in STATEMENT_LEADERS:
            return
        self._error("mismatched input", "table option or ';'")

    def _table_options(self):
        """``tableOption (','? tableOption)*``, possibly empty."""
        if not self._table_option():
            return
        while True:
            comma = self._accept_punct(",")
            if not self._table_option():
                if comma:
                    self._error("mismatched input", "table option")
                return

    def _table_option(self) -> bool:
        if self._at_word("DEFAULT") and self._at_word("CHARACTER", "CHAR", "CHARSET", "COLLATE", offset=1):
            self._next()

        if self._at_word("CHARACTER", "CHAR") and self._at_word("SET", offset=1):
            self._next()
            self._next()
        elif self._accept_word("CHARSET", "COLLATE"):
            pass
        elif self._at_word("DATA", "INDEX") and self._at_word("DIRECTORY", offset=1):
            self._next()
            self._next()
        elif self._at_word("START") and self._at_word("TRANSACTION", offset=1):
            self._next()
            self._next()
            return True
        elif self._accept_word("TABLESPACE"):
            self._uid()
            if self._accept_word("STORAGE"):
                self._expect_word("DISK", "MEMORY", "DEFAULT")
            return True
        elif self._accept_word("UNION"):
            self._accept_operator("=")
            self._balanced()
            return True
        elif not self._accept_word(*TABLE_OPTION_WORDS):
            return False

        self._accept_operator("=")
        if self._peek().kind not in (TokenKind.WORD, TokenKind.QUOTED_NAME,
                                     TokenKind.STRING, TokenKind.NUMBER):
            self._error("mismatched input", "table option value")
        self._next()
        return True

    def _partition_definitions(self):
        """``PARTITION BY`` function, partition counts and the partition list."""
        self._expect_word("PARTITION")
        self._expect_word("BY")
        self._partition_function()
        if self._accept_word("PARTITIONS"):
            self._expect_kind(TokenKind.NUMBER, "number")
        if self._accept_word("SUBPARTITION"):
            self._expect_word("BY")
            self._partition_function()
            if self._accept_word("SUBPARTITIONS"):
                self._expect_kind(TokenKind.NUMBER, "number")
        if self._peek().is_punct("("):
            self._balanced()

    def _partition_function(self):
        self._accept_word("LINEAR")
        if self._accept_word("HASH"):
            self._balanced()
        elif self._accept_word("KEY"):
            if self._accept_word("ALGORITHM"):
                self._accept_operator("=")
                self._expect_kind(TokenKind.NUMBER, "number")
            self._balanced()
        else:
            self._expect_word("RANGE", "LIST")
            self._accept_word("COLUMNS")
            self._balanced()

    def _uid(self) -> tree.Uid:
        token = self._peek()
        if token.kind not in (TokenKind.WORD, TokenKind.QUOTED_NAME, TokenKind.STRING):
            self._error("mismatched input", "identifier")
        return tree.Uid(tokens=[self._next()])

    def _at_uid(self) -> bool:
        return self._peek().kind in (TokenKind.WORD, TokenKind.QUOTED_NAME, TokenKind.STRING)

    def _table_name(self) -> tree.TableName:
        start = self._pos
        self._uid()
        if self._accept_punct("."):
            self._uid()
        return tree.TableName(tokens=self._span(start))

    def _full_column_name(self) -> tree.FullColumnName:
        start = self._pos
        uid = self._uid()
        dotted = []
        while len(dotted) < 2 and self._accept_punct("."):
            dotted.append(self._uid())
        return tree.FullColumnName(uid=uid, dotted=dotted, tokens=self._span(start))

    def _create_definitions(self) -> tree.CreateDefinitionsNode:
        start = self._pos
        self._expect_punct("(")
        definitions = [self._create_definition()]
        while self._accept_punct(","):
            definitions.append(self._create_definition())
        self._expect_punct(")")
        return tree.CreateDefinitionsNode(definitions=definitions, tokens=self._span(start))

    def _create_definition(self) -> tree.CreateDefinition:
        start = self._pos
        if self._at_word(*TABLE_CONSTRAINT_WORDS):
            constraint = self._table_constraint()
            return tree.ConstraintDeclaration(table_constraint=constraint, tokens=self._span(start))
        if self._at_word(*INDEX_DECLARATION_WORDS):
            index = self._index_column_definition()
            return tree.IndexDeclaration(index_column_definition=index, tokens=self._span(start))

        column_name = self._full_column_name()
        definition = self._column_definition()
        return tree.ColumnDeclarationNode(column_name=column_name, column_definition=definition,
                                          tokens=self._span(start))

    # ------------------------------------------------------------------
    # table constraints and indexes

    def _table_constraint(self) -> tree.TableConstraintNode:
        start = self._pos
        name = None
        if self._accept_word("CONSTRAINT"):
            if self._at_uid() and not self._at_word("PRIMARY", "UNIQUE", "FOREIGN", "CHECK"):
                name = self._uid()

        if self._accept_word("PRIMARY"):
            self._expect_word("KEY")
            index = self._optional_index_name()
            self._index_type()
            columns = self._index_column_names()
            self._index_options()
            return tree.PrimaryKeyTableConstraint(name=name, index=index, index_columns=columns,
                                                  tokens=self._span(start))
        if self._accept_word("UNIQUE"):
            index_format = self._accept_word("INDEX", "KEY")
            index = self._optional_index_name()
            self._index_type()
            columns = self._index_column_names()
            self._index_options()
            return tree.UniqueKeyTableConstraint(name=name, index_format=index_format, index=index,
                                                 index_columns=columns, tokens=self._span(start))
        if self._accept_word("FOREIGN"):
            self._expect_word("KEY")
            index = self._optional_index_name()
            columns = self._index_column_names()
            reference = self._reference_definition()
            return tree.ForeignKeyTableConstraint(name=name, index=index, index_columns=columns,
                                                  reference=reference, tokens=self._span(start))
        if self._accept_word("CHECK"):
            self._balanced()
            self._enforcement()
            return tree.CheckTableConstraint(name=name, tokens=self._span(start))

        self._error("no viable alternative at input")

    def _enforcement(self):
        if self._at_word("NOT") and self._at_word("ENFORCED", offset=1):
            self._next()
        self._accept_word("ENFORCED")

    def _optional_index_name(self) -> Optional[tree.Uid]:
        if self._at_uid() and not self._at_word("USING"):
            return self._uid()
        return None

    def _index_type(self):
        if self._accept_word("USING"):
            self._expect_word("BTREE", "HASH")

    def _index_options(self):
        while True:
            if self._accept_word("KEY_BLOCK_SIZE"):
                self._accept_operator("=")
                self._expect_kind(TokenKind.NUMBER, "number")
            elif self._at_word("USING"):
                self._index_type()
            elif self._accept_word("WITH"):
                self._expect_word("PARSER")
                self._uid()
            elif self._accept_word("COMMENT"):
                self._expect_kind(TokenKind.STRING, "string literal")
            elif self._accept_word("VISIBLE", "INVISIBLE"):
                pass
            elif self._accept_word("ENGINE_ATTRIBUTE", "SECONDARY_ENGINE_ATTRIBUTE"):
                self._accept_operator("=")
                self._expect_kind(TokenKind.STRING, "string literal")
            else:
                return

    def _index_column_names(self) -> tree.IndexColumnNames:
        start = self._pos
        self._expect_punct("(")
        columns = [self._index_column_name()]
        while self._accept_punct(","):
            columns.append(self._index_column_name())
        self._expect_punct(")")
        return tree.IndexColumnNames(columns=columns, tokens=self._span(start))

    def _index_column_name(self) -> tree.IndexColumnName:
        start = self._pos
        node = tree.IndexColumnName()
        if self._peek().is_punct("("):
            node.expression = self._balanced()
        elif self._peek().kind is TokenKind.STRING:
            node.string_literal = self._next()
        else:
            node.uid = self._uid()
        if node.expression is None and self._peek().is_punct("("):
            node.length = self._length_one()
        node.sort = self._accept_word("ASC", "DESC")
        node.tokens = self._span(start)
        return node

    def _index_column_definition(self) -> tree.IndexColumnDefinition:
        start = self._pos
        kind = self._accept_word("FULLTEXT", "SPATIAL")
        if kind is not None:
            index_format = self._accept_word("INDEX", "KEY")
            index = self._optional_index_name()
            columns = self._index_column_names()
            self._index_options()
            return tree.SpecialIndexDeclaration(kind=kind, index_format=index_format, index=index,
                                                index_columns=columns, tokens=self._span(start))
        index_format = self._expect_word("INDEX", "KEY")
        index = self._optional_index_name()
        self._index_type()
        columns = self._index_column_names()
        self._index_options()
        return tree.SimpleIndexDeclaration(index_format=index_format, index=index,
                                           index_columns=columns, tokens=self._span(start))

    def _reference_definition(self) -> tree.ReferenceDefinition:
        start = self._pos
        self._expect_word("REFERENCES")
        node = tree.ReferenceDefinition(table_name=self._table_name())
        if self._peek().is_punct("("):
            node.columns = self._index_column_names()
        if self._accept_word("MATCH"):
            self._expect_word("FULL", "PARTIAL", "SIMPLE")
        while self._at_word("ON") and self._at_word("DELETE", "UPDATE", offset=1) \
                and self._at_word(*REFERENCE_CONTROL_WORDS, offset=2):
            self._next()
            event = self._next().upper
            action = self._reference_control_type()
            if event == "DELETE":
                node.on_delete = action
            else:
                node.on_update = action
        node.tokens = self._span(start)
        return node

    def _reference_control_type(self) -> str:
        if self._accept_word("SET"):
            return "SET " + self._expect_word("NULL", "DEFAULT").upper
        if self._accept_word("NO"):
            self._expect_word("ACTION")
            return "NO ACTION"
        return self._expect_word("RESTRICT", "CASCADE").upper

    # ------------------------------------------------------------------
    # column definitions

    def _column_definition(self) -> tree.ColumnDefinitionNode:
        start = self._pos
        data_type = self._data_type()
        constraints = []
        while not (self._at_statement_end() or self._peek().is_punct(",") or self._peek().is_punct(")")):
            constraints.append(self._column_constraint())
        return tree.ColumnDefinitionNode(data_type=data_type, constraints=constraints,
                                         tokens=self._span(start))

    def _column_constraint(self) -> tree.ColumnConstraintNode:
        start = self._pos
        token = self._peek()
        if token.is_word("NOT", "NULL"):
            null_start = self._pos
            not_ = self._accept_word("NOT")
            null = self._expect_word("NULL")
            null_notnull = tree.NullNotnull(not_=not_, null=null, tokens=self._span(null_start))
            return tree.NullColumnConstraint(null_notnull=null_notnull, tokens=self._span(start))
        if self._accept_word("DEFAULT"):
            default_value = self._default_value()
            return tree.DefaultColumnConstraint(default_value=default_value, tokens=self._span(start))
        if self._accept_word("VISIBLE"):
            return tree.VisibilityColumnConstraint(tokens=self._span(start))
        if self._accept_word("INVISIBLE"):
            return tree.InvisibilityColumnConstraint(tokens=self._span(start))
        if self._accept_word("AUTO_INCREMENT"):
            return tree.AutoIncrementColumnConstraint(tokens=self._span(start))
        if self._accept_word("ON"):
            self._expect_word("UPDATE")
            self._current_timestamp()
            return tree.OnUpdateColumnConstraint(tokens=self._span(start))
        if token.is_word("PRIMARY", "KEY"):
            primary = self._accept_word("PRIMARY")
            key = self._expect_word("KEY")
            return tree.PrimaryKeyColumnConstraint(primary=primary, key=key, tokens=self._span(start))
        if token.is_word("UNIQUE"):
            unique = self._next()
            key = self._accept_word("KEY")
            return tree.UniqueKeyColumnConstraint(unique=unique, key=key, tokens=self._span(start))
        if self._accept_word("COMMENT"):
            literal = self._expect_kind(TokenKind.STRING, "string literal")
            return tree.CommentColumnConstraint(string_literal=literal, tokens=self._span(start))
        if self._accept_word("COLUMN_FORMAT"):
            self._expect_word("FIXED", "DYNAMIC", "DEFAULT")
            return tree.FormatColumnConstraint(tokens=self._span(start))
        if self._accept_word("STORAGE"):
            self._expect_word("DISK", "MEMORY", "DEFAULT")
            return tree.StorageColumnConstraint(tokens=self._span(start))
        if token.is_word("REFERENCES"):
            reference = self._reference_definition()
            return tree.ReferenceColumnConstraint(reference=reference, tokens=self._span(start))
        if self._accept_word("COLLATE"):
            collation = self._collation_name()
            return tree.CollateColumnConstraint(collation=collation, tokens=self._span(start))
        if token.is_word("GENERATED", "AS"):
            if self._accept_word("GENERATED"):
                self._expect_word("ALWAYS")
            self._expect_word("AS")
            self._balanced()
            self._accept_word("VIRTUAL", "STORED")
            return tree.GeneratedColumnConstraint(tokens=self._span(start))
        if self._accept_word("SERIAL"):
            self._expect_word("DEFAULT")
            self._expect_word("VALUE")
            return tree.SerialDefaultColumnConstraint(tokens=self._span(start))
        if token.is_word("CONSTRAINT", "CHECK"):
            if self._accept_word("CONSTRAINT") and not self._at_word("CHECK"):
                self._uid()
            self._expect_word("CHECK")
            self._balanced()
            self._enforcement()
            return tree.CheckColumnConstraint(tokens=self._span(start))

        self._error("no viable alternative at input")

    def _default_value(self) -> tree.DefaultValueNode:
        start = self._pos
        token = self._peek()
        if token.is_word("NULL") or token.value.upper() == "\\N":
            self._next()
        elif token.is_word("CAST") and self._peek(1).is_punct("("):
            self._next()
            self._balanced()
        elif token.is_punct("("):
            self._balanced()
        elif token.is_word(*CURRENT_TIMESTAMP_WORDS):
            self._current_timestamp()
            if self._at_word("ON") and self._at_word("UPDATE", offset=1):
                self._next()
                self._next()
                self._current_timestamp()
        else:
            if token.kind is TokenKind.OPERATOR and token.value in UNARY_OPERATORS:
                self._next()
            self._constant()
        return tree.DefaultValueNode(tokens=self._span(start))

    def _constant(self):
        token = self._peek()
        if token.kind is TokenKind.STRING:
            self._strings()
        elif token.kind is TokenKind.WORD and self._peek(1).kind is TokenKind.STRING \
                and (token.value.startswith("_") or token.upper in ("N", "X", "B")):
            # charset introducer or N/X/B prefixed literal
            self._next()
            self._strings()
        elif token.kind is TokenKind.NUMBER or token.is_word("TRUE", "FALSE"):
            self._next()
        else:
            self._error("mismatched input", "default value")

    def _strings(self):
        while self._peek().kind is TokenKind.STRING:
            self._next()

    def _current_timestamp(self):
        self._expect_word(*CURRENT_TIMESTAMP_WORDS)
        if self._accept_punct("("):
            if self._peek().kind is TokenKind.NUMBER:
                self._next()
            self._expect_punct(")")

    def _collation_name(self) -> tree.CollationName:
        start = self._pos
        if self._peek().kind is TokenKind.STRING:
            self._next()
        else:
            self._uid()
        return tree.CollationName(tokens=self._span(start))

    # ------------------------------------------------------------------
    # data types

    def _data_type(self) -> tree.DataTypeNode:
        token = self._peek()
        if token.kind is not TokenKind.WORD:
            self._error("mismatched input", "data type")
        word = token.upper

        if word == "NATIONAL":
            return self._national_data_type()
        if word == "NCHAR" and self._at_word("VARCHAR", offset=1):
            return self._nchar_data_type()
        if word == "LONG":
            if self._at_word("VARBINARY", offset=1):
                return self._long_varbinary_data_type()
            return self._long_varchar_data_type()
        if word in STRING_TYPES:
            return self._string_data_type()
        if word in INTEGER_TYPES or word in TWO_DIMENSION_TYPES or word in OPTIONAL_TWO_DIMENSION_TYPES:
            return self._dimension_data_type(modifiers=True)
        if word in ONE_DIMENSION_TYPES:
            return self._dimension_data_type(modifiers=False)
        if word in SIMPLE_TYPES:
            start = self._pos
            type_name = self._next()
            return tree.SimpleDataType(type_name=type_name, tokens=self._span(start))
        if word in COLLECTION_TYPES:
            return self._collection_data_type()
        if word in SPATIAL_TYPES:
            start = self._pos
            type_name = self._next()
            srid = None
            if self._accept_word("SRID"):
                srid = self._expect_kind(TokenKind.NUMBER, "number")
            return tree.SpatialDataType(type_name=type_name, srid=srid, tokens=self._span(start))

        self._error("no viable alternative at input")

    def _string_data_type(self) -> tree.StringDataType:
        start = self._pos
        node = tree.StringDataType(type_name=self._next())
        node.varying = self._accept_word("VARYING")
        if self._peek().is_punct("("):
            node.length = self._length_one()
        node.binary = self._accept_word("BINARY")
        node.char_set, node.charset_name = self._charset_clause()
        if self._accept_word("COLLATE"):
            node.collation = self._collation_name()
        elif node.binary is None:
            node.binary = self._accept_word("BINARY")
        node.tokens = self._span(start)
        return node

    def _national_data_type(self) -> tree.DataTypeNode:
        start = self._pos
        national = self._next()
        type_name = self._expect_word("CHAR", "CHARACTER", "VARCHAR")
        varying = self._accept_word("VARYING")
        length = self._length_one() if self._peek().is_punct("(") else None
        binary = self._accept_word("BINARY")
        if varying is None:
            # trailing form, as rendered in canonical sources
            varying = self._accept_word("VARYING")
        if varying is not None:
            if type_name.is_word("VARCHAR"):
                self._error("mismatched input", "CHAR or CHARACTER")
            return tree.NationalVaryingStringDataType(national=national, type_name=type_name,
                                                      varying=varying, length=length, binary=binary,
                                                      tokens=self._span(start))
        return tree.NationalStringDataType(national=national, type_name=type_name, length=length,
                                           binary=binary, tokens=self._span(start))

    def _nchar_data_type(self) -> tree.NationalStringDataType:
        start = self._pos
        nchar = self._next()
        type_name = self._expect_word("VARCHAR")
        length = self._length_one() if self._peek().is_punct("(") else None
        binary = self._accept_word("BINARY")
        return tree.NationalStringDataType(nchar=nchar, type_name=type_name, length=length,
                                           binary=binary, tokens=self._span(start))

    def _dimension_data_type(self, modifiers: bool) -> tree.DimensionDataType:
        start = self._pos
        node = tree.DimensionDataType(type_name=self._next())
        word = node.type_name.upper
        if word == "DOUBLE":
            node.precision = self._accept_word("PRECISION")

        if self._peek().is_punct("("):
            if word in TWO_DIMENSION_TYPES:
                node.length_two = self._length_two()
            elif word in OPTIONAL_TWO_DIMENSION_TYPES:
                node.length_two_optional = self._length_two_optional()
            else:
                node.length_one = self._length_one()

        while modifiers and self._at_word(*NUMERIC_MODIFIERS):
            modifier = self._next()
            if modifier.upper == "SIGNED":
                node.signed.append(modifier)
            elif modifier.upper == "UNSIGNED":
                node.unsigned.append(modifier)
            else:
                node.zerofill.append(modifier)
        node.tokens = self._span(start)
        return node

    def _collection_data_type(self) -> tree.CollectionDataType:
        start = self._pos
        node = tree.CollectionDataType(type_name=self._next())
        options_start = self._pos
        self._expect_punct("(")
        literals = [self._expect_kind(TokenKind.STRING, "string literal")]
        while self._accept_punct(","):
            literals.append(self._expect_kind(TokenKind.STRING, "string literal"))
        self._expect_punct(")")
        node.options = tree.CollectionOptions(literals=literals, tokens=self._span(options_start))
        node.binary = self._accept_word("BINARY")
        node.char_set, node.charset_name = self._charset_clause()
        node.tokens = self._span(start)
        return node

    def _long_varchar_data_type(self) -> tree.LongVarcharDataType:
        start = self._pos
        node = tree.LongVarcharDataType(type_name=self._next())
        node.varchar = self._accept_word("VARCHAR")
        node.binary = self._accept_word("BINARY")
        node.char_set, node.charset_name = self._charset_clause()
        if self._accept_word("COLLATE"):
            node.collation = self._collation_name()
        node.tokens = self._span(start)
        return node

    def _long_varbinary_data_type(self) -> tree.LongVarbinaryDataType:
        start = self._pos
        long = self._next()
        varbinary = self._next()
        return tree.LongVarbinaryDataType(type_name=long, long=long, varbinary=varbinary,
                                          tokens=self._span(start))

    def _charset_clause(self):
        """``charSet charsetName``, or ``(None, None)`` when absent."""
        start = self._pos
        char_set = None
        if self._at_word("CHARACTER", "CHAR") and self._at_word("SET", offset=1):
            first = self._next()
            self._next()
            if first.upper == "CHAR":
                char_set = tree.CharSet(char=first, tokens=self._span(start))
            else:
                char_set = tree.CharSet(character=first, tokens=self._span(start))
        elif self._at_word("CHARSET"):
            char_set = tree.CharSet(charset=self._next(), tokens=self._span(start))
        if char_set is None:
            return None, None

        name_start = self._pos
        if self._peek().kind not in (TokenKind.WORD, TokenKind.STRING, TokenKind.QUOTED_NAME):
            self._error("mismatched input", "charset name")
        self._next()
        return char_set, tree.CharsetName(tokens=self._span(name_start))

    def _length_one(self) -> tree.LengthOneDimension:
        start = self._pos
        self._expect_punct("(")
        value = self._expect_kind(TokenKind.NUMBER, "number")
        self._expect_punct(")")
        return tree.LengthOneDimension(value=value, tokens=self._span(start))

    def _length_two(self) -> tree.LengthTwoDimension:
        start = self._pos
        self._expect_punct("(")
        first = self._expect_kind(TokenKind.NUMBER, "number")
        self._expect_punct(",")
        second = self._expect_kind(TokenKind.NUMBER, "number")
        self._expect_punct(")")
        return tree.LengthTwoDimension(first=first, second=second, tokens=self._span(start))

    def _length_two_optional(self) -> tree.LengthTwoOptionalDimension:
        start = self._pos
        self._expect_punct("(")
        first = self._expect_kind(TokenKind.NUMBER, "number")
        second = None
        if self._accept_punct(","):
            second = self._expect_kind(TokenKind.NUMBER, "number")
        self._expect_punct(")")
        return tree.LengthTwoOptionalDimension(first=first, second=second, tokens=self._span(start))
