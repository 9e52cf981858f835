import pytest

from hash_verifier.models.session import ComparisonSession, ComparisonState


def test_happy_path_transitions(file_report):
    session = ComparisonSession.create()
    assert session.state is ComparisonState.IDLE

    generation = session.begin()
    assert session.busy
    session.advance(ComparisonState.COMPUTING)
    session.advance(ComparisonState.COMPARING)
    session.advance(ComparisonState.REPORTED, report=file_report)

    assert session.report is file_report
    assert not session.busy
    assert session.is_current(generation)


def test_new_request_discards_previous_report(file_report):
    session = ComparisonSession.create()
    session.begin()
    session.advance(ComparisonState.COMPUTING)
    session.advance(ComparisonState.COMPARING)
    session.advance(ComparisonState.REPORTED, report=file_report)

    session.begin()
    assert session.report is None
    assert session.state is ComparisonState.VALIDATING


def test_fail_records_error():
    session = ComparisonSession.create()
    session.begin()
    session.fail("Please select a source file.")
    assert session.state is ComparisonState.ERROR
    assert session.error == "Please select a source file."

    session.begin()
    assert session.error is None


def test_error_not_reachable_from_comparing():
    session = ComparisonSession.create()
    session.begin()
    session.advance(ComparisonState.COMPUTING)
    session.advance(ComparisonState.COMPARING)
    with pytest.raises(ValueError):
        session.fail("late")


def test_illegal_transition_rejected():
    session = ComparisonSession.create()
    with pytest.raises(ValueError):
        session.advance(ComparisonState.REPORTED)


def test_reset_from_any_state_orphans_generation():
    session = ComparisonSession.create()
    generation = session.begin()
    session.advance(ComparisonState.COMPUTING)

    session.reset()

    assert session.state is ComparisonState.IDLE
    assert session.report is None
    assert not session.is_current(generation)


def test_abort_uses_error_state_while_computing():
    session = ComparisonSession.create()
    session.begin()
    session.advance(ComparisonState.COMPUTING)
    session.abort("disk gone")
    assert session.state is ComparisonState.ERROR
    assert session.error == "disk gone"
    assert not session.busy


def test_abort_while_comparing_returns_to_idle():
    session = ComparisonSession.create()
    generation = session.begin()
    session.advance(ComparisonState.COMPUTING)
    session.advance(ComparisonState.COMPARING)
    session.abort("builder failed")
    assert session.state is ComparisonState.IDLE
    assert session.error == "builder failed"
    assert not session.is_current(generation)
