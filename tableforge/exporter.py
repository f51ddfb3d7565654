"""
Extraction entry point: source text or file in, ``Table`` list out.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from tableforge.diagnostics import Diagnostics
from tableforge.exceptions import SourceReadError
from tableforge.logging_config import get_logger
from tableforge.models import Table
from tableforge.parsers.base import BaseParser
from tableforge.parsers.mysql import MySQLParser
from tableforge.resolvers.walker import StatementWalker

logger = get_logger("exporter")


@dataclass
class ExportResult:
    tables: List[Table] = field(default_factory=list)
    diagnostics: Diagnostics = field(default_factory=Diagnostics)

    def to_dict(self):
        return {
            "tables": [t.to_dict() for t in self.tables],
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }


def read_source(source: str) -> str:
    """
    Returns the SQL text of ``source``.

    ``source`` is read as a file when it names an existing regular file and
    used as SQL text otherwise.
    """
    if not os.path.isfile(source):
        return source
    try:
        with open(source, 'r', encoding='utf-8') as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(source, str(e)) from e
    logger.info(f"Read {len(content)} characters", extra={"file_path": source})
    return content


def export(source: str, parser: Optional[BaseParser] = None) -> ExportResult:
    """
    Extracts every column-definition ``CREATE TABLE`` of ``source``.

    Args:
        source: Path of a SQL file, or SQL text
        parser: Parser to use, a fresh ``MySQLParser`` by default

    Returns:
        The tables in statement order and the diagnostics of the run

    Raises:
        SQLSyntaxError: if the input does not parse; nothing is returned for it
        SourceReadError: if ``source`` names a file that cannot be read
    """
    sql = read_source(source)
    parser = parser or MySQLParser()
    root = parser.parse(sql)

    diagnostics = Diagnostics()
    walker = StatementWalker(diagnostics)
    tables = [create_table.convert() for create_table in walker.walk(root)]
    logger.info(f"Exported {len(tables)} table(s), {len(diagnostics)} diagnostic(s)")
    return ExportResult(tables=tables, diagnostics=diagnostics)


def from_source(source: str) -> List[Table]:
    """``export`` without the diagnostics."""
    return export(source).tables
