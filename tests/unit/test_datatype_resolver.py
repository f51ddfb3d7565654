"""
Tests for data type resolution, one class per grammar family.
"""
import pytest
from tableforge.constants import TypeToken
from tableforge.diagnostics import Diagnostics, DiagnosticKind
from tableforge.models import DataType
from tableforge.parsers import tree
from tableforge.parsers.lexer import Token, TokenKind
from tableforge.parsers.mysql import MySQLParser
from tableforge.resolvers.datatype import DataTypeResolver


@pytest.fixture
def diagnostics():
    return Diagnostics()


@pytest.fixture
def resolve(diagnostics):
    parser = MySQLParser()
    resolver = DataTypeResolver(diagnostics)

    def _resolve(text):
        return resolver.resolve(parser.parse_data_type(text))
    return _resolve


def dt(name, source, **fields):
    return DataType(name=name, number=TypeToken[name], source=source, **fields)


class TestStringTypes:

    @pytest.mark.parametrize("text,expected", [
        ("CHAR(10)", dt("CHAR", "CHAR(10)", has_length=True, length=10)),
        ("CHARACTER(10)", dt("CHARACTER", "CHARACTER(10)", has_length=True, length=10)),
        ("VARCHAR(10)", dt("VARCHAR", "VARCHAR(10)", has_length=True, length=10)),
        ("TINYTEXT", dt("TINYTEXT", "TINYTEXT")),
        ("TEXT", dt("TEXT", "TEXT")),
        ("MEDIUMTEXT", dt("MEDIUMTEXT", "MEDIUMTEXT")),
        ("LONGTEXT", dt("LONGTEXT", "LONGTEXT")),
        ("NCHAR(20)", dt("NCHAR", "NCHAR(20)", has_length=True, length=20)),
        ("NVARCHAR(20)", dt("NVARCHAR", "NVARCHAR(20)", has_length=True, length=20)),
        ("LONG", dt("LONG", "LONG")),
    ])
    def test_string_family(self, resolve, text, expected):
        assert resolve(text) == expected

    def test_case_and_layout_normalized(self, resolve):
        result = resolve("varchar ( 255 )")
        assert result.name == "VARCHAR"
        assert result.source == "VARCHAR(255)"
        assert result.length == 255

    def test_charset_clause(self, resolve):
        result = resolve("varchar(255) CHARACTER SET utf8mb4 COLLATE utf8mb4_0900_ai_ci")
        assert result.source == "VARCHAR(255) CHARACTER SET utf8mb4"
        assert result.is_character is True
        assert result.charset_name == "utf8mb4"

    def test_charset_shorthand(self, resolve):
        result = resolve("TEXT CHARSET latin1")
        assert result.source == "TEXT CHARSET latin1"
        assert result.is_charset is True
        assert result.charset_name == "latin1"

    def test_char_set(self, resolve):
        result = resolve("CHAR(1) CHAR SET 'ascii'")
        assert result.source == "CHAR(1) CHAR SET 'ascii'"
        assert result.is_char is True
        assert result.charset_name == "ascii"

    def test_varying_and_binary(self, resolve):
        result = resolve("CHAR VARYING(10) BINARY")
        assert result.source == "CHAR VARYING(10) BINARY"
        assert result.is_varying is True
        assert result.is_binary is True

    def test_trailing_binary(self, resolve):
        result = resolve("VARCHAR(10) CHARACTER SET utf8 BINARY")
        assert result.is_binary is True
        assert result.source == "VARCHAR(10) BINARY CHARACTER SET utf8"


class TestNationalTypes:

    @pytest.mark.parametrize("text,expected", [
        ("NATIONAL VARCHAR(255)",
         dt("VARCHAR", "NATIONAL VARCHAR(255)", has_length=True, length=255, is_national=True)),
        ("NATIONAL CHARACTER(255) BINARY",
         dt("CHARACTER", "NATIONAL CHARACTER(255) BINARY", has_length=True, length=255,
            is_national=True, is_binary=True)),
        ("NCHAR VARCHAR(255) BINARY",
         dt("VARCHAR", "NCHAR VARCHAR(255) BINARY", has_length=True, length=255,
            is_binary=True, is_nchar=True)),
        ("NCHAR VARCHAR(200)",
         dt("VARCHAR", "NCHAR VARCHAR(200)", has_length=True, length=200, is_nchar=True)),
        ("NATIONAL CHAR VARYING (255)",
         dt("CHAR", "NATIONAL CHAR(255) VARYING", has_length=True, length=255,
            is_national=True, is_varying=True)),
        ("NATIONAL CHAR VARYING (255) BINARY",
         dt("CHAR", "NATIONAL CHAR(255) BINARY VARYING", has_length=True, length=255,
            is_national=True, is_binary=True, is_varying=True)),
        ("NATIONAL CHARACTER VARYING (255)",
         dt("CHARACTER", "NATIONAL CHARACTER(255) VARYING", has_length=True, length=255,
            is_national=True, is_varying=True)),
        ("NATIONAL CHARACTER VARYING (255) BINARY",
         dt("CHARACTER", "NATIONAL CHARACTER(255) BINARY VARYING", has_length=True, length=255,
            is_national=True, is_binary=True, is_varying=True)),
    ])
    def test_national_family(self, resolve, text, expected):
        assert resolve(text) == expected


class TestDimensionTypes:

    @pytest.mark.parametrize("text,expected", [
        ("TINYINT(1)", dt("TINYINT", "TINYINT(1)", has_length=True, length=1)),
        ("TINYINT(1) SIGNED", dt("TINYINT", "TINYINT(1) SIGNED", has_length=True, length=1, is_signed=True)),
        ("TINYINT(1) UNSIGNED ZEROFILL",
         dt("TINYINT", "TINYINT(1) UNSIGNED ZEROFILL", has_length=True, length=1,
            is_unsigned=True, is_zero_fill=True)),
        ("SMALLINT(10) ZEROFILL", dt("SMALLINT", "SMALLINT(10) ZEROFILL", has_length=True, length=10,
                                     is_zero_fill=True)),
        ("MEDIUMINT(10) UNSIGNED", dt("MEDIUMINT", "MEDIUMINT(10) UNSIGNED", has_length=True, length=10,
                                      is_unsigned=True)),
        ("INT(10)", dt("INT", "INT(10)", has_length=True, length=10)),
        ("INTEGER(10) SIGNED", dt("INTEGER", "INTEGER(10) SIGNED", has_length=True, length=10,
                                  is_signed=True)),
        ("BIGINT", dt("BIGINT", "BIGINT")),
        ("BIT(1)", dt("BIT", "BIT(1)", has_length=True, length=1)),
        ("TIME", dt("TIME", "TIME")),
        ("DATETIME(6)", dt("DATETIME", "DATETIME(6)", has_length=True, length=6)),
        ("VARBINARY(16)", dt("VARBINARY", "VARBINARY(16)", has_length=True, length=16)),
    ])
    def test_single_length(self, resolve, text, expected):
        assert resolve(text) == expected

    @pytest.mark.parametrize("text,expected", [
        ("REAL(8,10) ZEROFILL",
         dt("REAL", "REAL(8,10) ZEROFILL", has_two_length=True, len1=8, len2=10, is_zero_fill=True)),
        ("DOUBLE PRECISION(8,10) ZEROFILL",
         dt("DOUBLE", "DOUBLE(8,10) ZEROFILL", has_two_length=True, len1=8, len2=10, is_zero_fill=True)),
        ("DECIMAL(10,2) UNSIGNED",
         dt("DECIMAL", "DECIMAL(10,2) UNSIGNED", has_two_length=True, len1=10, len2=2, is_unsigned=True)),
        ("FLOAT(7,4)", dt("FLOAT", "FLOAT(7,4)", has_two_length=True, len1=7, len2=4)),
        ("NUMERIC", dt("NUMERIC", "NUMERIC")),
    ])
    def test_two_part_length(self, resolve, text, expected):
        assert resolve(text) == expected

    def test_optional_two_part_with_one_part(self, resolve):
        result = resolve("DECIMAL(10)")
        assert result.has_length is True
        assert result.length == 10
        assert result.has_two_length is False
        assert result.source == "DECIMAL(10)"

    def test_length_flags_exclusive(self, resolve):
        for text in ("DECIMAL(10)", "DECIMAL(10,2)", "INT(11)", "DOUBLE(5,2)"):
            result = resolve(text)
            assert not (result.has_length and result.has_two_length)

    def test_repeated_modifier_renders_once(self, resolve):
        result = resolve("INT UNSIGNED UNSIGNED ZEROFILL")
        assert result.source == "INT UNSIGNED ZEROFILL"
        assert result.is_unsigned is True

    def test_modifier_order_is_canonical(self, resolve):
        assert resolve("INT ZEROFILL UNSIGNED").source == "INT UNSIGNED ZEROFILL"

    def test_synonyms_keep_their_token(self, resolve):
        assert resolve("INT").number == TypeToken.INT
        assert resolve("INTEGER").number == TypeToken.INTEGER


class TestConversionFailures:

    def test_fractional_length(self, resolve, diagnostics):
        result = resolve("VARCHAR(1.5)")
        assert result.has_length is True
        assert result.length == 0
        assert result.source == "VARCHAR(1.5)"
        records = diagnostics.of_kind(DiagnosticKind.CONVERSION)
        assert len(records) == 1
        assert records[0].detail == "1.5"

    def test_parts_fail_independently(self, resolve, diagnostics):
        result = resolve("DECIMAL(1.5,2)")
        assert result.len1 == 0
        assert result.len2 == 2
        assert len(diagnostics.of_kind(DiagnosticKind.CONVERSION)) == 1

    def test_hex_length(self, resolve, diagnostics):
        result = resolve("INT(0x10)")
        assert result.length == 0
        assert diagnostics.of_kind(DiagnosticKind.CONVERSION)[0].detail == "0x10"


class TestSimpleAndSpatialTypes:

    @pytest.mark.parametrize("word", ["DATE", "TINYBLOB", "MEDIUMBLOB", "LONGBLOB", "BOOL", "BOOLEAN", "SERIAL"])
    def test_simple(self, resolve, word):
        assert resolve(word.lower()) == dt(word, word)

    @pytest.mark.parametrize("word", ["GEOMETRY", "POINT", "LINESTRING", "POLYGON", "JSON", "MULTIPOINT"])
    def test_spatial(self, resolve, word):
        assert resolve(word) == dt(word, word)

    def test_spatial_srid_ignored(self, resolve):
        assert resolve("POINT SRID 4326") == dt("POINT", "POINT")


class TestCollectionTypes:

    def test_enum(self, resolve):
        result = resolve("ENUM('1','2')")
        assert result == dt("ENUM", "ENUM('1','2')", collection_options=["1", "2"])

    def test_set_binary(self, resolve):
        result = resolve("SET('A', 'B') BINARY")
        assert result.source == "SET('A','B') BINARY"
        assert result.collection_options == ["A", "B"]
        assert result.is_binary is True

    def test_enum_double_quoted(self, resolve):
        result = resolve('enum("x","y")')
        assert result.source == 'ENUM("x","y")'
        assert result.collection_options == ["x", "y"]

    def test_enum_charset(self, resolve):
        result = resolve("ENUM('a') CHARACTER SET utf8")
        assert result.source == "ENUM('a') CHARACTER SET utf8"
        assert result.charset_name == "utf8"

    def test_non_collection_has_no_options(self, resolve):
        assert resolve("INT").collection_options is None


class TestLongTypes:

    def test_long_varchar_charset(self, resolve):
        result = resolve("LONG VARCHAR BINARY CHARACTER SET 'utf8'")
        assert result == dt(
            "LONG", "LONG VARCHAR BINARY CHARACTER SET 'utf8'",
            is_varchar=True, is_binary=True, is_character=True, charset_name="utf8",
        )

    def test_long_varchar_charset_shorthand(self, resolve):
        result = resolve("LONG VARCHAR CHARSET utf8")
        assert result.source == "LONG VARCHAR CHARSET utf8"
        assert result.is_charset is True

    def test_long_varbinary(self, resolve):
        assert resolve("LONG VARBINARY") == dt("LONG", "LONG VARBINARY")


class TestRoundTrip:

    @pytest.mark.parametrize("text", [
        "varchar(255)",
        "CHAR VARYING (10) BINARY CHARACTER SET latin1 COLLATE latin1_bin",
        "NATIONAL CHAR VARYING (255) BINARY",
        "NCHAR VARCHAR(255) BINARY",
        "NATIONAL VARCHAR(20)",
        "DOUBLE PRECISION(8,10) ZEROFILL",
        "int(11) unsigned zerofill",
        "DECIMAL(10)",
        "DECIMAL(12, 4) SIGNED",
        "ENUM('a','b') BINARY CHARSET utf8",
        "LONG VARCHAR BINARY CHAR SET 'utf8'",
        "LONG VARBINARY",
        "GEOMETRY SRID 0",
        "BOOLEAN",
        "VARCHAR(1.5)",
    ])
    def test_source_reparses_to_equal_value(self, resolve, text):
        first = resolve(text)
        assert resolve(first.source) == first


class TestUnknownNode:

    def test_unknown_node_class(self, diagnostics):
        resolver = DataTypeResolver(diagnostics)
        result = resolver.resolve(tree.DataTypeNode())
        assert result == DataType()
        assert result.name == ""
        assert diagnostics.of_kind(DiagnosticKind.UNEXPECTED)

    def test_unknown_type_keyword(self, diagnostics):
        keyword = Token(TokenKind.WORD, "FROBINT")
        node = tree.SimpleDataType(type_name=keyword, tokens=[keyword])
        result = DataTypeResolver(diagnostics).resolve(node)
        assert result == DataType()
        records = diagnostics.of_kind(DiagnosticKind.UNEXPECTED)
        assert [(r.message, r.construct) for r in records] == [("unknown data type keyword", "FROBINT")]

    def test_missing_type_keyword(self, diagnostics):
        result = DataTypeResolver(diagnostics).resolve(tree.DimensionDataType())
        assert result == DataType()
        assert len(diagnostics) == 1
