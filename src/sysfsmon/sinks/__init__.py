"""
Reporting sinks: the interface records are delivered through, plus a logging
sink and a local spool sink.
"""

from .base import ReportingSink, SinkConnector, StaticSinkConnector, report_record
from .factory import create_sink_connector
from .logging_sink import LoggingSink
from .spool_sink import SpoolSink

__all__ = [
    "ReportingSink",
    "SinkConnector",
    "StaticSinkConnector",
    "report_record",
    "create_sink_connector",
    "LoggingSink",
    "SpoolSink",
]
