"""
Structured collector for the non-fatal findings of an extraction run.

Resolvers never raise for unsupported or malformed-but-parseable input.
They record a ``Diagnostic`` here and carry on; each record is mirrored to
the component logger so the log and the collector always agree.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional

from tableforge.logging_config import get_logger


class DiagnosticKind(str, Enum):
    # Recognized construct that the schema model does not carry
    UNSUPPORTED = "unsupported"
    # Numeric literal that is valid syntax but not an integer
    CONVERSION = "conversion"
    # Node shape the resolver does not know about
    UNEXPECTED = "unexpected"


@dataclass
class Diagnostic:
    kind: DiagnosticKind
    message: str
    construct: str = ""
    detail: Optional[str] = None

    def __str__(self):
        text = f"{self.kind.value}: {self.message}"
        if self.detail:
            text += f" ({self.detail})"
        return text

    def to_dict(self):
        return {
            "kind": self.kind.value,
            "message": self.message,
            "construct": self.construct,
            "detail": self.detail,
        }


@dataclass
class Diagnostics:
    """Ordered list of diagnostics for a single extraction call."""
    records: List[Diagnostic] = field(default_factory=list)

    def add(self, kind: DiagnosticKind, message: str, construct: str = "",
            detail: Optional[str] = None, component: str = "resolver") -> Diagnostic:
        record = Diagnostic(kind=kind, message=message, construct=construct, detail=detail)
        self.records.append(record)
        get_logger(component).warning(str(record), extra={"construct": construct})
        return record

    def unsupported(self, message: str, construct: str = "", detail: Optional[str] = None,
                    component: str = "resolver") -> Diagnostic:
        return self.add(DiagnosticKind.UNSUPPORTED, message, construct, detail, component)

    def conversion(self, message: str, construct: str = "", detail: Optional[str] = None,
                   component: str = "resolver") -> Diagnostic:
        return self.add(DiagnosticKind.CONVERSION, message, construct, detail, component)

    def unexpected(self, message: str, construct: str = "", detail: Optional[str] = None,
                   component: str = "resolver") -> Diagnostic:
        return self.add(DiagnosticKind.UNEXPECTED, message, construct, detail, component)

    def of_kind(self, kind: DiagnosticKind) -> List[Diagnostic]:
        return [d for d in self.records if d.kind == kind]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.records)

    def __len__(self):
        return len(self.records)

    def __bool__(self):
        return bool(self.records)
