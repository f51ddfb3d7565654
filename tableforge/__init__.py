from tableforge.exporter import ExportResult, export, from_source

__all__ = ["ExportResult", "export", "from_source"]
