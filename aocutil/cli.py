import argparse
import datetime
import logging
import sys
from importlib.metadata import version

from .exceptions import ParseError
from .get import most_recent_year
from .models import default_input
from .models import Input
from .utils import AOC_TZ


# choice on the command line -> Input method name
VIEWS = {
    "text": "text",
    "lines": "lines",
    "ints": "ints",
    "floats": "floats",
    "big-ints": "big_ints",
    "decimals": "decimals",
}
BASED_VIEWS = {"ints", "big-ints"}


def main():
    """Get your puzzle input data, caching it if necessary, and print it on stdout."""
    aoc_now = datetime.datetime.now(tz=AOC_TZ)
    days = range(1, 26)
    years = range(2015, aoc_now.year + int(aoc_now.month == 12))
    parser = argparse.ArgumentParser(
        description=f"aocutil v{version('aocutil')}",
        usage=f"aocutil [day 1-25] [year 2015-{years[-1]}]",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "day",
        nargs="?",
        type=int,
        default=min(aoc_now.day, 25) if aoc_now.month == 12 else 1,
        help="1-25 (default: %(default)s)",
    )
    parser.add_argument(
        "year",
        nargs="?",
        type=int,
        default=most_recent_year(),
        help=f"2015-{years[-1]} (default: %(default)s)",
    )
    parser.add_argument(
        "-a",
        "--as",
        dest="view",
        choices=VIEWS,
        default="text",
        help="how to parse the input, one value per line (default: %(default)s)",
    )
    parser.add_argument(
        "-b",
        "--base",
        type=int,
        default=10,
        help="numeric base for ints and big-ints (default: %(default)s)",
    )
    parser.add_argument(
        "-t",
        "--token-file",
        metavar="<path>",
        help="read the session token from this file",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s v{version('aocutil')}",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="enable debug logging",
    )
    args = parser.parse_args()
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
    if args.day in years and args.year in days:
        # be forgiving
        args.day, args.year = args.year, args.day
    if args.day not in days or args.year not in years:
        parser.print_usage()
        parser.exit(1)
    if args.token_file is None:
        inp = default_input()
    else:
        inp = Input.from_file(args.token_file)
    view = getattr(inp, VIEWS[args.view])
    kwargs = {"base": args.base} if args.view in BASED_VIEWS else {}
    try:
        result = view(args.year, args.day, **kwargs)
    except ParseError as err:
        for val in err.partial:
            print(val)
        sys.exit(f"aocutil: error: {err}")
    if args.view == "text":
        print(result)
    else:
        for val in result:
            print(val)
