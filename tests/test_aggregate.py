import datetime as dt

from appointments.analytics.aggregate import aggregate, build_dashboard
from appointments.data.schemas import FilterCriteria


class TestAggregate:
    def test_three_rows_no_filter(self, three_rows):
        result = aggregate(three_rows)
        assert result["by_creator"] == [{"label": "a", "count": 2}, {"label": "b", "count": 1}]
        assert result["by_source"] == [{"label": "S1", "count": 2}, {"label": "S2", "count": 1}]
        assert result["by_date"] == [
            {"date": "01/01/2025", "count": 2},
            {"date": "02/01/2025", "count": 1},
        ]
        assert result["by_location"] == []

    def test_inclusion_set_gates_every_dimension(self, three_rows):
        result = aggregate(three_rows, included_creators={"a"})
        assert result["by_creator"] == [{"label": "a", "count": 2}]
        assert result["by_source"] == [{"label": "S1", "count": 1}, {"label": "S2", "count": 1}]
        assert result["by_date"] == [{"date": "01/01/2025", "count": 2}]

    def test_empty_inclusion_set_is_no_gate(self, three_rows):
        assert aggregate(three_rows, included_creators=set()) == aggregate(three_rows)

    def test_rows_without_creator_pass_inclusion_gate(self):
        rows = [{"Source": "S1"}, {"Creator": "z", "Source": "S2"}]
        result = aggregate(rows, included_creators={"a"})
        assert result["by_source"] == [{"label": "S1", "count": 1}]
        assert result["by_creator"] == []

    def test_idempotent(self, three_rows):
        assert aggregate(three_rows) == aggregate(three_rows)

    def test_dimensions_are_independent(self):
        rows = [
            {"Creator": "a", "Store": "Athens", "Date": "03/01/2025"},
            {"Creator": "b", "Date": "garbage"},
            {"Source": "S1", "Store": "Volos"},
        ]
        result = aggregate(rows)
        assert result["by_creator"] == [{"label": "a", "count": 1}, {"label": "b", "count": 1}]
        assert result["by_source"] == [{"label": "S1", "count": 1}]
        assert result["by_location"] == [{"label": "Athens", "count": 1}, {"label": "Volos", "count": 1}]
        assert result["by_date"] == [{"date": "03/01/2025", "count": 1}]

    def test_first_seen_order_not_count_order(self):
        rows = [{"Source": "rare"}, {"Source": "common"}, {"Source": "common"}]
        result = aggregate(rows)
        assert [s["label"] for s in result["by_source"]] == ["rare", "common"]

    def test_dates_sorted_chronologically_not_lexically(self):
        rows = [
            {"Date": "02/01/2025"},
            {"Date": "15/12/2024"},
            {"Date": 45658},           # 01/01/2025 as a spreadsheet serial
            {"Date": "01-01-2025"},
        ]
        result = aggregate(rows)
        assert result["by_date"] == [
            {"date": "15/12/2024", "count": 1},
            {"date": "01/01/2025", "count": 2},
            {"date": "02/01/2025", "count": 1},
        ]

    def test_counts_are_plain_ints(self, three_rows):
        for series in aggregate(three_rows).values():
            assert all(type(item["count"]) is int for item in series)

    def test_no_rows(self):
        assert aggregate([]) == {"by_creator": [], "by_source": [], "by_date": [], "by_location": []}

    def test_rows_are_not_mutated(self, three_rows):
        before = [dict(r) for r in three_rows]
        aggregate(three_rows, included_creators={"a"})
        assert three_rows == before


class TestDashboard:
    def test_date_range_reduces_to_single_row(self, three_rows):
        criteria = FilterCriteria(start_date=dt.date(2025, 1, 2), end_date=dt.date(2025, 1, 2))
        data = build_dashboard(three_rows, criteria)
        assert data["by_creator"] == [{"label": "b", "count": 1}]
        assert data["by_source"] == [{"label": "S1", "count": 1}]
        assert data["by_date"] == [{"date": "02/01/2025", "count": 1}]
        assert data["summary"]["matched_rows"] == 1

    def test_summary_block(self, sample_store):
        data = build_dashboard(sample_store.rows)
        assert data["filters"] == "All appointments"
        assert data["summary"] == {
            "total_rows": 8,
            "matched_rows": 8,
            "counted_rows": 8,
            "undated_rows": 0,
            "first_date": "01/08/2025",
            "last_date": "06/08/2025",
        }
        assert data["by_source"] == [{"label": "SP4", "count": 7}, {"label": "OnlineOSB", "count": 1}]

    def test_inclusion_counted_after_filter(self, sample_store):
        criteria = FilterCriteria.from_params(source="SP4", included_creators=["s_kouvari", "call_center_agent1"])
        data = build_dashboard(sample_store.rows, criteria)
        assert data["summary"]["matched_rows"] == 7
        assert data["summary"]["counted_rows"] == 1
        assert data["by_creator"] == [{"label": "s_kouvari", "count": 1}]

    def test_filter_matching_nothing_gives_empty_series(self, sample_store):
        data = build_dashboard(sample_store.rows, FilterCriteria(source="nope"))
        assert data["by_creator"] == data["by_date"] == []
        assert data["summary"]["first_date"] is None

    def test_undated_rows_counted(self):
        data = build_dashboard([{"Creator": "a"}, {"Creator": "b", "Date": "01/02/2025"}])
        assert data["summary"]["undated_rows"] == 1
        assert data["summary"]["first_date"] == "01/02/2025"
