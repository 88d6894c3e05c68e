import io
import logging
import os
import sys
from functools import partial
from pathlib import Path
from textwrap import dedent

from . import transforms
from .exceptions import AocutilError
from .exceptions import RemoteStatusError
from .utils import atomic_write_file
from .utils import colored
from .utils import http


log = logging.getLogger(__name__)


AOCUTIL_DATA_DIR = Path(os.environ.get("AOCUTIL_DIR", ".")).expanduser()
AOCUTIL_CONFIG_DIR = Path(
    os.environ.get("AOCUTIL_CONFIG_DIR", Path("~", ".config", "aocutil"))
).expanduser()
URL = "https://adventofcode.com/{year}/day/{day}/input"


class Input:
    """
    Keeps track of your session token so it can request puzzle inputs. Inputs are
    cached on the filesystem as {year}_{day}.txt the first time they are fetched,
    and served from there ever after.
    """

    def __init__(self, token, cache_dir=None):
        self._token = token
        if cache_dir is None:
            cache_dir = AOCUTIL_DATA_DIR
        self.cache_dir = Path(cache_dir)

    @classmethod
    def from_file(cls, path, cache_dir=None):
        """
        Make an Input using the entire contents of the file at `path` as the session
        token, minus any leading or trailing whitespace. Errors reading the file are
        not handled here.
        """
        token = Path(path).expanduser().read_text(encoding="utf-8").strip()
        return cls(token, cache_dir=cache_dir)

    @property
    def token(self):
        # this is a property to make it clear that it's read-only
        return self._token

    def __str__(self):
        return f"<{type(self).__name__} {self.cache_dir} (token=...{self.token[-4:]})>"

    def cache_path(self, year, day):
        return self.cache_dir / f"{year}_{day}.txt"

    def reader(self, year, day):
        """
        Binary stream of the input for the given year and day. It's a file object
        when the input was cached already, otherwise the input is requested from the
        server, saved to the cache, and returned from memory. The caller is
        responsible for closing the stream, so use it in a `with` statement.
        """
        path = self.cache_path(year, day)
        try:
            # use previously received data, if any existing
            f = path.open("rb")
        except FileNotFoundError:
            log.debug("input cache miss %s", path)
        else:
            log.debug("input cache hit %s", path)
            return f
        data = self._fetch(year, day)
        log.info("saving the puzzle input to %s", path)
        try:
            atomic_write_file(path, data)
        except OSError as err:
            # not fatal, we already have the data
            log.warning("could not save input to %s: %s", path, err)
        return io.BytesIO(data)

    def _fetch(self, year, day):
        url = URL.format(year=year, day=day)
        sanitized = "..." + self.token[-4:]
        log.info("getting data year=%s day=%s token=%s", year, day, sanitized)
        response = http.get(url, token=self.token)
        if response.status != 200:
            body = response.data.decode(errors="replace")
            log.error("got %s status code token=%s", response.status, sanitized)
            log.error(body)
            raise RemoteStatusError(body, status=response.status, url=url)
        return response.data

    def data(self, year, day):
        """The entire input as bytes."""
        with self.reader(year, day) as f:
            return f.read()

    def text(self, year, day):
        """The input decoded as text, with any trailing newlines removed."""
        return self.data(year, day).decode().rstrip("\r\n")

    def _scan(self, year, day, convert):
        with self.reader(year, day) as f:
            return transforms.scan(f, convert)

    def lines(self, year, day):
        """
        Each line of the input as a separate string. Bytes that aren't valid UTF-8
        are kept as lone surrogates (errors="surrogateescape") rather than failing.
        """
        with self.reader(year, day) as f:
            return transforms.lines(f)

    def ints(self, year, day, base=10):
        """
        Each line of the input as an integer which fits in 64 bits. Numbers in other
        bases can be read by passing `base`, which has the same meaning as in `int`
        (e.g. base=0 detects the 0x/0o/0b prefixes).
        """
        return self._scan(year, day, partial(transforms.int64, base=base))

    def floats(self, year, day):
        """Each line of the input as a floating point number."""
        return self._scan(year, day, transforms.float64)

    def big_ints(self, year, day, base=10):
        """Each line of the input as an integer of any size, in the given base."""
        return self._scan(year, day, partial(transforms.big_int, base=base))

    def decimals(self, year, day):
        """Each line of the input as an arbitrary-precision `decimal.Decimal`."""
        return self._scan(year, day, transforms.decimal)


def default_input():
    """
    Discover user's token from the environment or file, and exit with a diagnostic
    message if none can be found. This default is used whenever a token was
    otherwise unspecified.
    """
    # export your session id as AOC_SESSION env var
    cookie = os.getenv("AOC_SESSION")
    if cookie:
        return Input(token=cookie)

    # or chuck it in a plaintext file at ~/.config/aocutil/token
    path = AOCUTIL_CONFIG_DIR / "token"
    try:
        result = Input.from_file(path)
    except FileNotFoundError:
        pass
    else:
        if result.token:
            return result

    msg = dedent(
        f"""\
        ERROR: AoC session ID is needed to get your puzzle data!
        You can find it in your browser cookies after login.
            1) Save the cookie into a text file {path}, or
            2) Export the cookie in environment variable AOC_SESSION
        """
    )
    print(colored(msg, color="red"), file=sys.stderr)
    raise AocutilError("Missing session ID")
