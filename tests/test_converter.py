"""Tests for record emission, conversion and output writing."""

from pathlib import Path

from structlog.testing import capture_logs

from jff2tcdf.config.settings import OutputConfig
from jff2tcdf.models import (
    JffDocument,
    SentinelRecord,
    StateDescriptor,
    StateRecord,
    TransitionDescriptor,
    TransitionRecord,
)
from jff2tcdf.pipeline import convert, emit_state, emit_transition, write_records


def _document(*transitions: TransitionDescriptor) -> JffDocument:
    return JffDocument(
        states=(
            StateDescriptor(id=0, is_initial=True),
            StateDescriptor(id=1, is_final=True),
        ),
        transitions=transitions,
    )


class TestStateRecords:
    def test_normal_state(self):
        assert emit_state(StateDescriptor(id=5)).render() == "def 5 normal"

    def test_final_state(self):
        assert emit_state(StateDescriptor(id=3, is_final=True)).render() == "def 3 final "

    def test_start_state(self):
        assert emit_state(StateDescriptor(id=0, is_initial=True)).render() == "def 0 start "

    def test_final_and_start_state(self):
        state = StateDescriptor(id=7, is_final=True, is_initial=True)

        assert emit_state(state).render() == "def 7 final start "


class TestTransitionRecords:
    def test_one_record_per_code_in_order(self):
        records, warning = emit_transition(TransitionDescriptor(2, 4, "x~z"))

        assert [r.render() for r in records] == [
            "trans 2 4 120",
            "trans 2 4 121",
            "trans 2 4 122",
        ]
        assert warning is None

    def test_empty_expansion_yields_no_records(self):
        records, warning = emit_transition(TransitionDescriptor(0, 1, "e~a"))

        assert records == []
        assert warning is None

    def test_unrecognized_label_returns_warning(self):
        records, warning = emit_transition(TransitionDescriptor(0, 1, "???"))

        assert records == []
        assert warning is not None and warning.label == "???"

    def test_endpoints_are_not_checked(self):
        records, _ = emit_transition(TransitionDescriptor(40, 41, "eof"))

        assert records == [TransitionRecord(source=40, target=41, code=-1)]


class TestConvert:
    def test_end_to_end_scenario(self):
        result = convert(_document(TransitionDescriptor(0, 1, "a~c")))

        assert result.lines == [
            "def 0 start ",
            "def 1 final ",
            "trans 0 1 97",
            "trans 0 1 98",
            "trans 0 1 99",
            "eof",
        ]

    def test_states_precede_transitions_and_sentinel_is_last(self):
        result = convert(_document(TransitionDescriptor(0, 1, "a")))

        assert isinstance(result.records[0], StateRecord)
        assert isinstance(result.records[1], StateRecord)
        assert isinstance(result.records[2], TransitionRecord)
        assert isinstance(result.records[-1], SentinelRecord)
        assert sum(isinstance(r, SentinelRecord) for r in result.records) == 1

    def test_empty_document_is_just_the_sentinel(self):
        assert convert(JffDocument()).lines == ["eof"]

    def test_bad_label_does_not_stop_later_transitions(self):
        result = convert(_document(
            TransitionDescriptor(0, 1, "???"),
            TransitionDescriptor(1, 0, "e~a"),
            TransitionDescriptor(1, 1, "z"),
        ))

        assert result.lines[2:] == ["trans 1 1 122", "eof"]
        assert result.transition_count == 3
        assert result.empty_transitions == 2
        assert [str(w) for w in result.warnings] == ["failed to parse: ???"]

    def test_unrecognized_label_is_logged_once(self):
        with capture_logs() as logs:
            convert(_document(TransitionDescriptor(0, 1, "???")))

        events = [entry for entry in logs if entry["event"] == "label_unrecognized"]
        assert len(events) == 1
        assert events[0]["label"] == "???"
        assert events[0]["log_level"] == "warning"

    def test_summary(self):
        summary = convert(_document(TransitionDescriptor(0, 1, "any"))).to_dict()

        assert summary == {
            "states": 2,
            "transitions": 1,
            "records": 2 + 94 + 1,
            "empty_transitions": 0,
            "warnings": [],
        }


class TestWriteRecords:
    EXPECTED = "def 0 start \ndef 1 final \ntrans 0 1 97\ntrans 0 1 98\ntrans 0 1 99\neof\n"

    def test_writes_one_line_per_record(self, tmp_path: Path):
        out = tmp_path / "out.tcdf"
        result = convert(_document(TransitionDescriptor(0, 1, "a~c")))

        count = write_records(out, result.records)

        assert count == 6
        assert out.read_text() == self.EXPECTED

    def test_truncates_existing_file(self, tmp_path: Path):
        out = tmp_path / "out.tcdf"
        out.write_text("stale content that is longer than the new file\n" * 20)

        write_records(out, convert(_document(TransitionDescriptor(0, 1, "a~c"))).records)

        assert out.read_text() == self.EXPECTED

    def test_truncates_without_temp_file(self, tmp_path: Path):
        out = tmp_path / "out.tcdf"
        out.write_text("stale\n")

        write_records(
            out,
            convert(_document(TransitionDescriptor(0, 1, "a~c"))).records,
            OutputConfig(atomic=False),
        )

        assert out.read_text() == self.EXPECTED

    def test_append_policy_keeps_existing_content(self, tmp_path: Path):
        out = tmp_path / "out.tcdf"
        out.write_text("previous\n")

        write_records(
            out,
            convert(_document(TransitionDescriptor(0, 1, "a~c"))).records,
            OutputConfig(existing_output="append"),
        )

        assert out.read_text() == "previous\n" + self.EXPECTED

    def test_atomic_write_leaves_no_temp_files(self, tmp_path: Path):
        out = tmp_path / "out.tcdf"

        write_records(out, convert(JffDocument()).records)

        assert sorted(p.name for p in tmp_path.iterdir()) == ["out.tcdf"]
