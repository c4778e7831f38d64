"""
Tests for the scoring summary condenser.

Tests cover:
- Score re-derivation from text
- Merging touchdowns with their tries
- Hidden and empty summaries
- Quarter grouping
- Count-keyed memoization
- End-to-end with the play-by-play logger
"""

import pytest
from game_management.period_names import get_period_name, ordinal
from game_management.play_by_play_logger import TWO_POINT_FAILED_TEXT
from game_management.play_types import PlayType
from game_management.scoreboard import ScoringType
from game_management.scoring_summary import (
    CondensedRow, QuarterHeader, ScoringSummaryCache, ScoringSummaryEvent,
    get_count, group_by_quarter, process_events, quarter_header_text
)


def entry(side, text, quarter="Q1", time="10:00", hidden=False):
    return {"side": side, "text": text, "quarter": quarter, "time": time, "hidden": hidden}


class TestProcessEvents:
    """Tests for condensing scoring entries into rows"""

    def test_touchdown_and_extra_point_merge(self):
        rows = process_events([
            entry(0, "rushed for 5 yards"),
            entry(0, "rushed for 2 yards and a touchdown!"),
            entry(0, "made the extra point"),
        ])

        assert len(rows) == 1
        scoring_row = rows[0]
        assert scoring_row.side == 0
        assert scoring_row.score == [7, 0]
        assert scoring_row.score_type == ScoringType.TOUCHDOWN
        assert scoring_row.text == "rushed for 2 yards and a touchdown! (made the extra point)"

    def test_touchdown_then_extra_point_is_one_row(self):
        rows = process_events([
            entry(0, "rushed for 2 yards and a touchdown!"),
            entry(0, "made the extra point"),
        ])
        assert len(rows) == 1
        assert rows[0].score == [7, 0]
        assert "a touchdown!" in rows[0].text
        assert "made the extra point" in rows[0].text

    def test_missed_extra_point(self):
        rows = process_events([
            entry(1, "Jacobs rushed for 1 yards and a touchdown!"),
            entry(1, "Crosby missed the extra point"),
        ])
        assert len(rows) == 1
        assert rows[0].score == [0, 6]
        assert rows[0].text.endswith("(Crosby missed the extra point)")

    def test_extra_point_merges_regardless_of_side(self):
        rows = process_events([
            entry(0, "Gibbs rushed for 1 yards and a touchdown!"),
            entry(1, "Bates made the extra point"),
        ])
        assert len(rows) == 1
        assert rows[0].side == 0
        assert rows[0].score == [6, 1]

    def test_extra_point_first_starts_a_row(self):
        rows = process_events([entry(0, "Bates made the extra point")])
        assert len(rows) == 1
        assert rows[0].score_type == ScoringType.EXTRA_POINT
        assert rows[0].score == [1, 0]

    def test_field_goal(self):
        rows = process_events([entry(1, "Crosby made a 42 yard field goal")])
        assert rows[0].score_type == ScoringType.FIELD_GOAL
        assert rows[0].score == [0, 3]

    def test_converted_two_point_merges_for_same_side(self):
        rows = process_events([
            entry(1, "Jacobs rushed for 12 yards and a touchdown!"),
            entry(1, "Jacobs rushed for a two point conversion!"),
        ])
        assert len(rows) == 1
        assert rows[0].score == [0, 8]
        assert rows[0].score_type == ScoringType.TOUCHDOWN

    def test_failed_two_point_adds_nothing(self):
        rows = process_events([
            entry(0, "Goff completed a pass to LaPorta for 30 yards and a touchdown!"),
            entry(0, TWO_POINT_FAILED_TEXT),
        ])
        assert len(rows) == 1
        assert rows[0].score == [6, 0]
        assert rows[0].text.endswith(f"({TWO_POINT_FAILED_TEXT})")

    def test_defensive_two_points_is_its_own_row(self):
        rows = process_events([
            entry(0, "Gibbs rushed for 3 yards and a touchdown!"),
            entry(1, "Alexander intercepted the pass and returned it 98 yards for two points!"),
        ])
        assert len(rows) == 2
        assert rows[1].side == 1
        assert rows[1].score_type == ScoringType.TWO_POINT_CONVERSION
        assert rows[1].score == [6, 2]

    def test_two_point_phrase_is_case_insensitive(self):
        rows = process_events([entry(0, "TWO POINT CONVERSION GOOD")])
        assert rows[0].score_type == ScoringType.TWO_POINT_CONVERSION
        assert rows[0].score == [2, 0]

    def test_other_phrases_are_case_sensitive(self):
        assert process_events([entry(0, "Gibbs scored a TOUCHDOWN")]) == []

    def test_unrecognized_text_is_skipped(self):
        rows = process_events([
            entry(0, "Montgomery rushed for 5 yards"),
            entry(0, "Bates made a 30 yard field goal"),
        ])
        assert len(rows) == 1
        assert rows[0].score == [3, 0]

    def test_safety_gets_its_own_row(self):
        rows = process_events([
            entry(0, "Bates made a 30 yard field goal"),
            entry(1, "Goff was sacked by Gary for a safety!"),
        ])
        assert len(rows) == 2
        assert rows[1].side == 1
        assert rows[1].score_type is None
        assert rows[1].score_type_label == ""
        assert rows[1].score == [3, 0]

    def test_logged_safety_reaches_rows(self, silent_pbp):
        silent_pbp.log_event(PlayType.SACK, side=1, clock=7, names=["Goff", "Gary"],
                             yds=-8, safety=True)
        rows = process_events(silent_pbp.scoring_summary)

        assert [r.text for r in rows] == ["Goff was sacked by Gary for a safety!"]
        assert rows[0].score == [0, 0]

    def test_snapshots_are_independent(self):
        rows = process_events([
            entry(0, "Bates made a 30 yard field goal"),
            entry(1, "Crosby made a 44 yard field goal"),
        ])
        assert rows[0].score == [3, 0]
        assert rows[1].score == [3, 3]
        assert rows[0].score is not rows[1].score

    def test_hidden_events_are_skipped(self):
        rows = process_events([
            entry(0, "Bates made a 30 yard field goal", hidden=True),
            entry(1, "Crosby made a 44 yard field goal"),
        ])
        assert len(rows) == 1
        assert rows[0].score == [0, 3]

    @pytest.mark.parametrize("events", [
        [],
        [entry(0, "Bates made a 30 yard field goal", hidden=True)],
    ])
    def test_nothing_visible(self, events):
        assert process_events(events) == []

    def test_accepts_event_objects(self):
        rows = process_events([ScoringSummaryEvent(side=1, text="Crosby made a 20 yard field goal")])
        assert rows[0].score == [0, 3]

    def test_is_idempotent(self):
        events = [
            entry(0, "Gibbs rushed for 3 yards and a touchdown!"),
            entry(0, "Bates made the extra point"),
        ]
        assert process_events(events) == process_events(events)

    def test_missing_text_raises(self):
        with pytest.raises(KeyError):
            process_events([{"side": 0}])

    def test_scores_never_decrease(self):
        rows = process_events([
            entry(0, "a touchdown"),
            entry(0, "made the extra point"),
            entry(1, "made a 40 yard field goal"),
            entry(1, "a touchdown"),
            entry(1, TWO_POINT_FAILED_TEXT),
            entry(0, "made a 22 yard field goal"),
        ])
        for earlier, later in zip(rows, rows[1:]):
            assert later.score[0] >= earlier.score[0]
            assert later.score[1] >= earlier.score[1]
        assert rows[-1].score == [10, 9]


class TestGetCount:
    def test_counts_visible_events(self):
        events = [entry(0, "a"), entry(0, "b", hidden=True), entry(1, "c")]
        assert get_count(events) == 2


class TestGrouping:
    """Tests for quarter headers"""

    def test_headers_before_each_new_quarter(self):
        rows = [
            CondensedRow(0, [3, 0], ScoringType.FIELD_GOAL, "fg", "Q1", "10:00"),
            CondensedRow(1, [3, 3], ScoringType.FIELD_GOAL, "fg", "Q1", "2:00"),
            CondensedRow(0, [10, 3], ScoringType.TOUCHDOWN, "td", "Q2", "8:00"),
            CondensedRow(1, [10, 9], ScoringType.TOUCHDOWN, "td", "OT", "4:00"),
        ]
        grouped = group_by_quarter(rows)

        headers = [i for i, item in enumerate(grouped) if isinstance(item, QuarterHeader)]
        assert headers == [0, 3, 5]
        assert [grouped[i].text for i in headers] == ["1st quarter", "2nd quarter", "Overtime"]
        assert [item for item in grouped if isinstance(item, CondensedRow)] == rows

    def test_returning_quarter_label_gets_new_header(self):
        rows = [
            CondensedRow(0, [3, 0], None, "a", "Q1", ""),
            CondensedRow(0, [3, 0], None, "b", "Q2", ""),
            CondensedRow(0, [3, 0], None, "c", "Q1", ""),
        ]
        grouped = group_by_quarter(rows)
        assert sum(isinstance(item, QuarterHeader) for item in grouped) == 3

    def test_no_rows_no_headers(self):
        assert group_by_quarter([]) == []

    def test_period_name_uses_num_periods(self):
        assert quarter_header_text("Q2", num_periods=2) == "2nd half"
        assert quarter_header_text("Q3", num_periods=3) == "3rd period"

    def test_host_supplied_period_name(self):
        assert quarter_header_text("Q1", 4, lambda n: f"frame of {n}") == "1st frame of 4"

    def test_unparseable_quarter(self):
        assert quarter_header_text("SO") == "???"


class TestPeriodNames:
    @pytest.mark.parametrize("n,expected", [
        (1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"),
        (11, "11th"), (12, "12th"), (13, "13th"), (21, "21st"), (102, "102nd"),
    ])
    def test_ordinal(self, n, expected):
        assert ordinal(n) == expected

    def test_period_names(self):
        assert get_period_name(4) == "quarter"
        assert get_period_name(2) == "half"
        assert get_period_name(3) == "period"


class TestScoringSummaryCache:
    """Tests for count-keyed memoization"""

    def test_same_count_reuses_rows(self):
        cache = ScoringSummaryCache()
        events = [entry(0, "Bates made a 30 yard field goal")]

        first = cache.get_rows(events)
        second = cache.get_rows(list(events))
        assert first is second

    def test_appended_event_recomputes(self):
        cache = ScoringSummaryCache()
        events = [entry(0, "Gibbs rushed for 3 yards and a touchdown!")]
        cache.get_rows(events)

        events.append(entry(0, "Bates made the extra point"))
        rows = cache.get_rows(events)
        assert rows[0].score == [7, 0]

    def test_invalidate(self):
        cache = ScoringSummaryCache()
        events = [entry(0, "Bates made a 30 yard field goal")]
        first = cache.get_rows(events)
        cache.invalidate()
        assert cache.get_rows(events) is not first


class TestWithLogger:
    """End-to-end: logger scoring summary through the condenser"""

    def test_touchdown_drive(self, pbp, touchdown_drive):
        touchdown_drive(pbp)
        rows = process_events(pbp.scoring_summary)

        assert len(rows) == 1
        assert rows[0].score == [7, 0]
        assert rows[0].text == "Montgomery rushed for 2 yards and a touchdown! (Bates made the extra point)"
        assert rows[0].time == "13:15"

    def test_final_score_matches_points_scored(self, silent_pbp):
        log = silent_pbp.log_event
        log(PlayType.QUARTER, clock=15, quarter=1)
        log(PlayType.RUN, side=0, clock=12, names=["Gibbs"], yds=8, td=True)
        log(PlayType.EXTRA_POINT, side=0, clock=12, names=["Bates"], made=True)
        log(PlayType.QUARTER, clock=15, quarter=2)
        log(PlayType.FIELD_GOAL, side=1, clock=9, names=["Crosby"], yds=33, made=True)
        log(PlayType.PASS_COMPLETE, side=1, clock=1, names=["Love", "Reed"], yds=40, td=True)
        log(PlayType.DROPBACK, side=1, clock=1, names=["Love"], two_point_conversion_team=1)
        log(PlayType.PASS_COMPLETE, side=1, clock=1, names=["Love", "Reed"], yds=2, td=True,
            two_point_conversion_team=1)
        log(PlayType.QUARTER, clock=15, quarter=3)
        log(PlayType.PUNT_RETURN, side=0, clock=11, names=["Reynolds"], yds=65, td=True)
        log(PlayType.RUN, side=0, clock=11, names=["Gibbs"], yds=0, td=False,
            two_point_conversion_team=0)
        log(PlayType.KICKOFF, side=0, clock=11, names=["Bates"], yds=0, touchback=True)
        log(PlayType.OVERTIME, clock=10)
        log(PlayType.FIELD_GOAL, side=0, clock=2, names=["Bates"], yds=51, made=True)

        rows = process_events(silent_pbp.scoring_summary)

        # 6+1, 3, 6+2, 6+0, 3
        assert rows[-1].score == [16, 11]
        assert [r.score_type for r in rows] == [
            ScoringType.TOUCHDOWN, ScoringType.FIELD_GOAL, ScoringType.TOUCHDOWN,
            ScoringType.TOUCHDOWN, ScoringType.FIELD_GOAL,
        ]
        assert [r.quarter for r in rows] == ["Q1", "Q2", "Q2", "Q3", "OT"]
        assert rows[3].text.endswith(f"({TWO_POINT_FAILED_TEXT})")

        headers = [i for i in group_by_quarter(rows) if isinstance(i, QuarterHeader)]
        assert [h.quarter for h in headers] == ["Q1", "Q2", "Q3", "OT"]
