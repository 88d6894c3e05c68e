import datetime
from logging import getLogger

from .exceptions import AocutilError
from .models import default_input
from .models import Input
from .utils import AOC_TZ


log = getLogger(__name__)


def get_data(session=None, day=None, year=None):
    """
    Get data for day (1-25) and year (2015+), as text.
    User's session cookie (str) is needed - puzzle inputs differ by user.
    """
    if session is None:
        inp = default_input()
    else:
        inp = Input(token=session)
    if day is None:
        day = current_day()
        log.info("current day=%s", day)
    if year is None:
        year = most_recent_year()
        log.info("most recent year=%s", year)
    return inp.text(year, day)


def most_recent_year():
    """
    This year, if it's December.
    The most recent year, otherwise.
    Note: Advent of Code started in 2015
    """
    aoc_now = datetime.datetime.now(tz=AOC_TZ)
    year = aoc_now.year
    if aoc_now.month < 12:
        year -= 1
    if year < 2015:
        raise AocutilError("Time travel not supported yet")
    return year


def current_day():
    """
    Most recent day, if it's during the Advent of Code. Happy Holidays!
    Day 1 is assumed, otherwise.
    """
    aoc_now = datetime.datetime.now(tz=AOC_TZ)
    if aoc_now.month != 12:
        log.warning("current_day is only available in December (EST)")
        return 1
    day = min(aoc_now.day, 25)
    return day
