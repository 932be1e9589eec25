"""Record I/O services."""

from .record_service import RecordService

__all__ = ["RecordService"]
