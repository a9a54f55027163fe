import pytest

from tinyarcade.timer import SectionTimer


def make_clock(values):
    it = iter(values)
    return lambda: next(it)


def test_switch_charges_previous_section():
    timer = SectionTimer(["a", "b"], clock=make_clock([10, 30, 50]), frequency=10)
    timer.switch("a")
    timer.switch("b")
    timer.switch("a")
    assert timer.times["a"] == 20
    assert timer.times["b"] == 20
    assert timer.times["uncounted"] == 0


def test_time_call_returns_result_and_charges():
    timer = SectionTimer(["work"], clock=make_clock([0, 5, 25]), frequency=10)
    timer.switch("work")
    result = timer.time_call("work", lambda x, y=1: x + y, 3, y=4)
    assert result == 7
    assert timer.times["work"] == 5 + 20
    assert timer.current == "uncounted"


def test_unknown_section_raises():
    timer = SectionTimer(["a"], clock=make_clock([0, 1]))
    with pytest.raises(KeyError):
        timer.switch("missing")
    with pytest.raises(KeyError):
        timer.time_call("missing", print)


def test_report_lines():
    timer = SectionTimer(["a", "b"], clock=make_clock([10, 30]), frequency=10)
    timer.switch("a")
    timer.switch("b")
    assert timer.report() == "   2.0  100%  a\n"


def test_report_empty_when_nothing_timed():
    timer = SectionTimer(["a"], clock=make_clock([]))
    assert timer.report(show_all=True) == ""


def test_report_show_all_includes_small_sections():
    clock = make_clock([0, 1, 100001])
    timer = SectionTimer(["tiny", "big"], clock=clock, frequency=1_000_000)
    timer.switch("tiny")
    timer.switch("big")
    timer.switch("tiny")
    assert "tiny" not in timer.report(show_all=False)
    assert "tiny" in timer.report(show_all=True)
    assert "big" in timer.report(show_all=False)