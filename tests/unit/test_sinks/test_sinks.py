"""
Unit tests for reporting sinks and the sink factory.
"""

import logging
from pathlib import Path
from unittest.mock import Mock

import polars as pl
import pytest

from sysfsmon.models import AssembledRecord, AtomId, SinkConfig
from sysfsmon.sinks import (
    LoggingSink,
    SpoolSink,
    StaticSinkConnector,
    create_sink_connector,
    report_record,
)
from sysfsmon.storage import JsonLinesStorage, ParquetStorage, StorageConfig


@pytest.mark.unit
class TestLoggingSink:
    """Test cases for LoggingSink."""

    def test_logs_each_atom(self, caplog):
        sink = LoggingSink()
        with caplog.at_level(logging.INFO):
            assert sink.send("com.google.pixel", 105006, [1, 2, 3])

        assert sink.sent_count == 1
        assert "105006" in caplog.text
        assert "[1, 2, 3]" in caplog.text


@pytest.mark.unit
class TestSpoolSink:
    """Test cases for SpoolSink."""

    def test_appends_rows(self, temp_dir):
        path = temp_dir / "spool" / "records.parquet"
        sink = SpoolSink(ParquetStorage(), path, clock=lambda: 123.5)

        assert sink.send("com.google.pixel", 105006, [4, 5, 6])
        assert sink.send("com.google.pixel", 105014, [2])

        df = pl.read_parquet(path)
        assert df["atom_id"].to_list() == [105006, 105014]
        assert df["values"].to_list() == [[4, 5, 6], [2]]
        assert df["timestamp"].to_list() == [123.5, 123.5]
        assert df["reverse_domain_name"].to_list() == ["com.google.pixel"] * 2

    def test_ndjson_spool(self, temp_dir):
        path = temp_dir / "records.jsonl"
        sink = SpoolSink(JsonLinesStorage(), path)

        assert sink.send("com.google.pixel", 72, [2, 0, 1])
        assert pl.read_ndjson(path)["values"].to_list() == [[2, 0, 1]]

    def test_storage_failure_returns_false(self, temp_dir):
        storage = Mock()
        storage.append_dataframe.side_effect = OSError("disk full")
        sink = SpoolSink(storage, temp_dir / "records.parquet")

        assert sink.send("com.google.pixel", 72, [1]) is False

    def test_value_outside_int64_returns_false(self, temp_dir, caplog):
        path = temp_dir / "records.parquet"
        sink = SpoolSink(ParquetStorage(), path)

        with caplog.at_level(logging.ERROR):
            assert sink.send("com.google.pixel", 105015, [2**64 - 1]) is False

        assert "Failed to spool atom 105015" in caplog.text
        assert not path.exists()


@pytest.mark.unit
class TestReportRecord:
    """Test cases for report_record and connectors."""

    def test_report_record_passes_ordered_values(self, recording_sink):
        record = AssembledRecord.of(AtomId.UFS_RESET_COUNT, [9])
        assert report_record(recording_sink, record)
        assert recording_sink.sent == [("com.google.pixel", int(AtomId.UFS_RESET_COUNT), [9])]

    def test_report_record_logs_failure(self, sink_factory, caplog):
        record = AssembledRecord.of(AtomId.UFS_RESET_COUNT, [9])
        with caplog.at_level(logging.ERROR):
            assert report_record(sink_factory(ok=False), record) is False
        assert "Unable to report UFS_RESET_COUNT" in caplog.text

    def test_static_connector(self, recording_sink):
        connector = StaticSinkConnector(recording_sink, available=False)
        assert connector.connect() is None
        connector.available = True
        assert connector.connect() is recording_sink
        assert connector.connect_attempts == 2

    def test_factory_log_sink(self):
        connector = create_sink_connector(SinkConfig(type="log"))
        assert isinstance(connector.connect(), LoggingSink)

    def test_factory_spool_sink(self, temp_dir):
        config = SinkConfig(
            type="spool",
            spool_path=temp_dir / "records.jsonl",
            storage=StorageConfig(format="json"),
        )
        sink = create_sink_connector(config).connect()

        assert isinstance(sink, SpoolSink)
        assert isinstance(sink.storage, JsonLinesStorage)
        assert sink.path == Path(temp_dir / "records.jsonl")

    def test_factory_unknown_type(self):
        with pytest.raises(ValueError):
            create_sink_connector(SinkConfig(type="binder"))
