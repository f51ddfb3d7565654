"""
TableForge Custom Exceptions

This module defines the exception classes that escape the extraction API.
Everything that is not fatal for a whole input is reported through
``tableforge.diagnostics`` instead.
"""


class TableForgeError(Exception):
    """Base exception for all TableForge errors."""
    pass


class SQLSyntaxError(TableForgeError):
    """
    Raised when the input cannot be tokenized or parsed.

    A syntax error aborts the analysis of the whole input; no partial
    result is returned for it.

    Attributes:
        line: 1-based line of the offending token
        column: 0-based column of the offending token
        reason: Description of why parsing failed
        statement: The text of the statement being parsed, if known
    """
    def __init__(self, reason: str, line: int = 0, column: int = 0, statement: str = ""):
        self.reason = reason
        self.line = line
        self.column = column
        self.statement = statement
        message = f"line {line}:{column} {reason}"
        if statement:
            # Truncate long statements for readability
            display_stmt = statement[:100] + "..." if len(statement) > 100 else statement
            message = f"{message}: {display_stmt}"
        super().__init__(message)


class SourceReadError(TableForgeError):
    """Raised when the input names a file that cannot be read."""
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")
