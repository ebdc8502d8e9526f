"""Unit tests for report row projection and ordering."""

from __future__ import annotations

from datetime import datetime

from recording_finder.report.rows import ReportRow, build_row, build_rows, sort_records


class TestSortRecords:
    """Tests for sort_records."""

    def test_ascending_by_creation(self, record_factory) -> None:
        late = record_factory(name="late.wav", created=datetime(2024, 6, 12, 9))
        early = record_factory(name="early.wav", created=datetime(2024, 6, 10, 9))

        assert sort_records([late, early]) == [early, late]

    def test_ties_keep_discovery_order(self, record_factory) -> None:
        moment = datetime(2024, 6, 10, 9)
        a = record_factory(name="A.wav", created=moment)
        b = record_factory(name="B.wav", created=moment)
        earlier = record_factory(name="0.wav", created=datetime(2024, 6, 9, 9))

        assert [r.name for r in sort_records([a, b, earlier])] == ["0.wav", "A.wav", "B.wav"]
        assert [r.name for r in sort_records([b, a])] == ["B.wav", "A.wav"]


class TestBuildRow:
    """Tests for build_row."""

    def test_projection(self, record_factory, english) -> None:
        record = record_factory(
            name="2024-06-14 Service.mp3",
            full_path="/srv/2024-06-14 Service.mp3",
            created=datetime(2024, 6, 10, 9, 30, 0),
            modified=datetime(2024, 6, 11, 10, 0, 0),
            accessed=datetime(2024, 6, 16, 23, 59, 59),
            derived_day="Friday",
        )

        row = build_row(record, english)

        assert row == ReportRow(
            day="Friday",
            name="2024-06-14 Service.mp3",
            created="2024-06-10T09:30:00 (Monday)",
            modified="2024-06-11T10:00:00 (Tuesday)",
            accessed="2024-06-16T23:59:59 (Sunday)",
            path="/srv/2024-06-14 Service.mp3",
        )

    def test_name_and_path_verbatim(self, record_factory, english) -> None:
        records = [
            record_factory(name="Kāposti, 2.wav", full_path="/a b/Kāposti, 2.wav"),
            record_factory(name="x.mp3", full_path="C:\\Rec\\x.mp3"),
        ]

        for record, row in zip(sort_records(records), build_rows(records, english)):
            assert row.name == record.name
            assert row.path == record.full_path

    def test_build_rows_sorted(self, record_factory, english) -> None:
        late = record_factory(name="late.wav", created=datetime(2024, 6, 12, 9))
        early = record_factory(name="early.wav", created=datetime(2024, 6, 10, 9))

        assert [row.name for row in build_rows([late, early], english)] == ["early.wav", "late.wav"]


class TestReportRowLine:
    """Tests for ReportRow.to_line."""

    def test_comma_joined(self) -> None:
        row = ReportRow(day="Unknown", name="a.wav", created="c", modified="m", accessed="x", path="/a.wav")
        assert row.to_line() == "Unknown,a.wav,c,m,x,/a.wav"

    def test_embedded_commas_and_quotes_are_not_escaped(self) -> None:
        """Known defect: fields containing the delimiter shift the columns."""
        row = ReportRow(day="Unknown", name='a, "b".wav', created="c", modified="m", accessed="x", path="/a, b")

        line = row.to_line()

        assert line == 'Unknown,a, "b".wav,c,m,x,/a, b'
        assert len(line.split(",")) == 8
