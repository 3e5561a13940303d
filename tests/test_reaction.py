from unittest import mock

from schoolkit.reaction import BOX, MAX_WAIT, main, measure_reaction


def test_measure_reaction_order_and_result(capsys):
    events = []
    times = iter([10.0, 10.25])

    def clock():
        events.append("clock")
        return next(times)

    elapsed = measure_reaction(
        lambda: events.append("wait"),
        lambda: events.append("read"),
        clock,
    )
    assert elapsed == 0.25
    assert events == ["wait", "clock", "read", "clock"]
    assert capsys.readouterr().out == BOX + "\n"


def test_box_has_four_rows():
    rows = BOX.split("\n")
    assert len(rows) == 4
    assert all(row == "\t\t\t<------------->" for row in rows)


def test_main_reports_time(capsys):
    with mock.patch("builtins.input", return_value=""), mock.patch(
        "time.sleep"
    ) as sleep, mock.patch("random.randrange", return_value=3) as rand, mock.patch(
        "time.perf_counter", side_effect=[10.0, 10.25]
    ):
        assert main([]) == 0
    rand.assert_called_once_with(MAX_WAIT)
    sleep.assert_called_once_with(3)
    assert capsys.readouterr().out.endswith("Your reaction time is: 250ms\n")


def test_main_seconds_format(capsys):
    with mock.patch("builtins.input", return_value=""), mock.patch(
        "time.sleep"
    ), mock.patch("random.randrange", return_value=0), mock.patch(
        "time.perf_counter", side_effect=[1.0, 2.5]
    ):
        assert main([]) == 0
    assert capsys.readouterr().out.endswith("Your reaction time is: 1.5s\n")


def test_main_stops_on_end_of_input():
    with mock.patch("builtins.input", side_effect=EOFError):
        assert main([]) == 1