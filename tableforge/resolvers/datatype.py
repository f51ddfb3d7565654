"""
Data type resolution.

Turns one data type node of the syntax tree into a ``DataType``. The
``source`` of the result is a canonical re-rendering of the declaration:
keywords uppercased, layout removed, optional words in a fixed order, so
that resolving ``source`` again gives an equal ``DataType``.
"""

from typing import Optional

from tableforge.constants import TypeToken, type_token
from tableforge.diagnostics import Diagnostics
from tableforge.logging_config import get_logger
from tableforge.models import DataType
from tableforge.parsers import tree
from tableforge.parsers.lexer import Token
from tableforge.parsers.utils import trim_bracket, trim_quote

logger = get_logger("resolver.datatype")


class DataTypeResolver:
    def __init__(self, diagnostics: Optional[Diagnostics] = None):
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self._handlers = {
            tree.StringDataType: self._resolve_string,
            tree.NationalVaryingStringDataType: self._resolve_national_varying,
            tree.NationalStringDataType: self._resolve_national,
            tree.DimensionDataType: self._resolve_dimension,
            tree.SimpleDataType: self._resolve_simple,
            tree.CollectionDataType: self._resolve_collection,
            tree.SpatialDataType: self._resolve_simple,
            tree.LongVarcharDataType: self._resolve_long_varchar,
            tree.LongVarbinaryDataType: self._resolve_long_varbinary,
        }

    def resolve(self, node: tree.DataTypeNode) -> DataType:
        """
        Resolves a data type node.

        Never raises: an unknown node class or type keyword gives
        ``DataType()`` with an empty name and an ``unexpected`` diagnostic.
        """
        handler = self._handlers.get(type(node))
        if handler is None:
            text = node.get_text() if isinstance(node, tree.Node) else repr(node)
            self.diagnostics.unexpected(f"unknown data type node {type(node).__name__}",
                                        construct=text)
            return DataType()
        if node.type_name is None or node.type_name.upper not in TypeToken.__members__:
            self.diagnostics.unexpected("unknown data type keyword", construct=node.get_text())
            return DataType()
        result = handler(node)
        logger.debug(f"Resolved data type {result.source}")
        return result

    # ------------------------------------------------------------------

    def _base(self, type_name: Token) -> DataType:
        name = type_name.upper
        return DataType(name=name, number=type_token(name), source=name)

    def _to_int(self, text: str, what: str, construct: str) -> int:
        try:
            return int(text)
        except ValueError:
            self.diagnostics.conversion(f"parse {what} error", construct=construct, detail=text)
            return 0

    def _apply_length(self, result: DataType, length: Optional[tree.LengthOneDimension],
                      construct: str):
        if length is None:
            return
        text = length.get_text()
        result.source += text
        result.has_length = True
        result.length = self._to_int(trim_bracket(text), "length", construct)

    def _apply_two_length(self, result: DataType, length: tree.Node, construct: str):
        text = length.get_text()
        result.source += text
        parts = trim_bracket(text).split(",")
        if len(parts) == 1:
            result.has_length = True
            result.length = self._to_int(parts[0], "length", construct)
            return
        result.has_two_length = True
        result.len1 = self._to_int(parts[0], "precision", construct)
        result.len2 = self._to_int(parts[1], "scale", construct)

    def _apply_binary(self, result: DataType, binary: Optional[Token]):
        if binary is not None:
            result.is_binary = True
            result.source += " BINARY"

    def _apply_charset(self, result: DataType, char_set: Optional[tree.CharSet],
                       charset_name: Optional[tree.CharsetName]):
        if char_set is None:
            return
        if char_set.char is not None:
            result.is_char = True
            result.source += " CHAR SET "
        elif char_set.character is not None:
            result.is_character = True
            result.source += " CHARACTER SET "
        elif char_set.charset is not None:
            result.is_charset = True
            result.source += " CHARSET "
        if charset_name is not None:
            name = charset_name.get_text()
            result.charset_name = trim_quote(name)
            result.source += name

    # ------------------------------------------------------------------

    def _resolve_simple(self, node: tree.DataTypeNode) -> DataType:
        return self._base(node.type_name)

    def _resolve_string(self, node: tree.StringDataType) -> DataType:
        result = self._base(node.type_name)
        if node.varying is not None:
            result.is_varying = True
            result.source += " VARYING"
        self._apply_length(result, node.length, node.get_text())
        self._apply_binary(result, node.binary)
        self._apply_charset(result, node.char_set, node.charset_name)
        return result

    def _resolve_national_varying(self, node: tree.NationalVaryingStringDataType) -> DataType:
        result = self._base(node.type_name)
        self._apply_length(result, node.length, node.get_text())
        if node.national is not None:
            result.is_national = True
            result.source = "NATIONAL " + result.source
        self._apply_binary(result, node.binary)
        if node.varying is not None:
            result.is_varying = True
            result.source += " VARYING"
        return result

    def _resolve_national(self, node: tree.NationalStringDataType) -> DataType:
        result = self._base(node.type_name)
        self._apply_length(result, node.length, node.get_text())
        if node.national is not None:
            result.is_national = True
            result.source = "NATIONAL " + result.source
        self._apply_binary(result, node.binary)
        if node.nchar is not None:
            result.is_nchar = True
            result.source = "NCHAR " + result.source
        return result

    def _resolve_dimension(self, node: tree.DimensionDataType) -> DataType:
        result = self._base(node.type_name)
        construct = node.get_text()
        self._apply_length(result, node.length_one, construct)
        if node.length_two is not None:
            self._apply_two_length(result, node.length_two, construct)
        if node.length_two_optional is not None:
            self._apply_two_length(result, node.length_two_optional, construct)

        # repeated modifiers render once each
        if node.signed:
            result.is_signed = True
            result.source += " SIGNED"
        if node.unsigned:
            result.is_unsigned = True
            result.source += " UNSIGNED"
        if node.zerofill:
            result.is_zero_fill = True
            result.source += " ZEROFILL"
        return result

    def _resolve_collection(self, node: tree.CollectionDataType) -> DataType:
        result = self._base(node.type_name)
        result.collection_options = []
        if node.options is not None and node.options.literals:
            literals = [token.value for token in node.options.literals]
            result.source += "(" + ",".join(literals) + ")"
            result.collection_options = [trim_quote(literal) for literal in literals]
        self._apply_binary(result, node.binary)
        self._apply_charset(result, node.char_set, node.charset_name)
        return result

    def _resolve_long_varchar(self, node: tree.LongVarcharDataType) -> DataType:
        result = self._base(node.type_name)
        if node.varchar is not None:
            result.is_varchar = True
            result.source += " VARCHAR"
        self._apply_binary(result, node.binary)
        self._apply_charset(result, node.char_set, node.charset_name)
        return result

    def _resolve_long_varbinary(self, node: tree.LongVarbinaryDataType) -> DataType:
        keyword = node.long if node.long is not None else node.varbinary
        if keyword is None:
            return DataType()
        result = self._base(keyword)
        if node.long is not None and node.varbinary is not None:
            result.source += " VARBINARY"
        return result
