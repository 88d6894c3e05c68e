import pytest

import aocutil
from aocutil.exceptions import RemoteStatusError


def test_get_from_server(pook):
    mock = pook.get(
        url="https://adventofcode.com/2018/day/1/input",
        response_body="fake data for year 2018 day 1\n",
    )
    data = aocutil.get_data(year=2018, day=1)
    assert data == "fake data for year 2018 day 1"
    assert mock.calls == 1


def test_get_from_server_has_error(pook):
    url = "https://adventofcode.com/2018/day/1/input"
    pook.get(url, reply=418, response_body="I'm a teapot")
    with pytest.raises(RemoteStatusError("I'm a teapot")):
        aocutil.get_data(year=2018, day=1, session="bogus")


def test_get_data_uses_current_date_if_unspecified(pook, freezer):
    mock = pook.get(
        url="https://adventofcode.com/2017/day/17/input",
        response_body="fake data for year 2017 day 17",
    )
    freezer.move_to("2017-12-17 12:00:00Z")
    data = aocutil.get_data()
    assert data == "fake data for year 2017 day 17"
    assert mock.calls == 1


def test_saved_data_is_reused_if_available(aocutil_data_dir, pook):
    mock = pook.get(
        url="https://adventofcode.com/2018/day/1/input",
        response_body="fake data for year 2018 day 1",
    )
    cached = aocutil_data_dir / "2018_1.txt"
    cached.write_text("saved data for year 2018 day 1")
    data = aocutil.get_data(year=2018, day=1)
    assert data == "saved data for year 2018 day 1"
    assert mock.calls == 0


def test_session_is_sent_as_cookie(pook):
    mock = pook.get(
        url="https://adventofcode.com/2018/day/1/input",
        headers={"Cookie": "session=thetesttoken"},
        response_body="ok",
    )
    aocutil.get_data(year=2018, day=1)
    assert mock.calls == 1


def test_data_is_cached_from_successful_request(aocutil_data_dir, pook):
    pook.get(
        url="https://adventofcode.com/2018/day/1/input",
        response_body="fake data for year 2018 day 1",
    )
    cached = aocutil_data_dir / "2018_1.txt"
    assert not cached.exists()
    aocutil.get_data(year=2018, day=1)
    assert cached.exists()
    assert cached.read_text() == "fake data for year 2018 day 1"
