"""
Tests for the diagnostics collector.
"""
import logging
from tableforge.diagnostics import Diagnostic, Diagnostics, DiagnosticKind


class TestDiagnostics:

    def test_empty_is_falsy(self):
        diagnostics = Diagnostics()
        assert not diagnostics
        assert len(diagnostics) == 0

    def test_helpers_record_kind(self):
        diagnostics = Diagnostics()
        diagnostics.unsupported("a")
        diagnostics.conversion("b", detail="1.5")
        diagnostics.unexpected("c")
        assert [d.kind for d in diagnostics] == [
            DiagnosticKind.UNSUPPORTED, DiagnosticKind.CONVERSION, DiagnosticKind.UNEXPECTED,
        ]
        assert len(diagnostics.of_kind(DiagnosticKind.CONVERSION)) == 1

    def test_str(self):
        record = Diagnostic(DiagnosticKind.CONVERSION, "parse length error", detail="1.5")
        assert str(record) == "conversion: parse length error (1.5)"
        assert str(Diagnostic(DiagnosticKind.UNSUPPORTED, "x")) == "unsupported: x"

    def test_to_dict(self):
        record = Diagnostic(DiagnosticKind.UNSUPPORTED, "m", construct="VISIBLE")
        assert record.to_dict() == {
            "kind": "unsupported", "message": "m", "construct": "VISIBLE", "detail": None,
        }

    def test_mirrored_to_component_logger(self, caplog):
        diagnostics = Diagnostics()
        with caplog.at_level(logging.WARNING, logger="tableforge"):
            diagnostics.unsupported("unsupported DML statement", construct="SELECT 1", component="walker")
        assert any(r.name == "tableforge.walker" and "unsupported DML statement" in r.getMessage()
                   for r in caplog.records)
        assert caplog.records[-1].construct == "SELECT 1"
