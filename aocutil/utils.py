from __future__ import annotations

import logging
import os
import platform
import shutil
import typing as t
from importlib.metadata import version
from pathlib import Path
from tempfile import NamedTemporaryFile
from zoneinfo import ZoneInfo

import urllib3


log: logging.Logger = logging.getLogger(__name__)
AOC_TZ = ZoneInfo("America/New_York")
_v = version("aocutil")
USER_AGENT = f"aocutil v{_v}"


class HttpClient:
    # every request to adventofcode.com goes through this wrapper
    # so that we can put in user agent header, count requests, etc.
    # aocutil users should not need to use this class directly.

    pool_manager: urllib3.PoolManager
    req_count: dict[t.Literal["GET"], int]

    def __init__(self) -> None:
        proxy_url = os.environ.get("http_proxy") or os.environ.get("https_proxy")
        if proxy_url:
            self.pool_manager = urllib3.ProxyManager(proxy_url, headers={"User-Agent": USER_AGENT})
        else:
            self.pool_manager = urllib3.PoolManager(headers={"User-Agent": USER_AGENT})
        self.req_count = {"GET": 0}

    def get(self, url: str, token: str | None = None) -> urllib3.BaseHTTPResponse:
        # getting user inputs. retries are disabled, so that a failed connection
        # raises immediately and exactly one request hits the server per call
        if token is None:
            headers = self.pool_manager.headers
        else:
            headers = self.pool_manager.headers | {"Cookie": f"session={token}"}
        resp = self.pool_manager.request("GET", url, headers=headers, retries=False)
        self.req_count["GET"] += 1
        return resp


http: HttpClient = HttpClient()


def _ensure_intermediate_dirs(path: Path) -> None:
    path.expanduser().parent.mkdir(parents=True, exist_ok=True)


def atomic_write_file(path: Path, contents: bytes) -> None:
    """
    Atomically write bytes to a file by writing them to a temporary file, and then
    renaming it to the final destination name. This solves a race condition where
    existence of a file doesn't necessarily mean the content is valid yet.
    """
    _ensure_intermediate_dirs(path)
    with NamedTemporaryFile("wb", dir=path.parent, delete=False) as f:
        log.debug("writing to tempfile @ %s", f.name)
        try:
            f.write(contents)
        except BaseException:
            f.close()
            os.unlink(f.name)
            raise
    log.debug("moving %s -> %s", f.name, path)
    try:
        shutil.move(f.name, path)
    except BaseException:
        os.unlink(f.name)
        raise


_ANSIColor = t.Literal[
    "black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"
]
_ansi_colors = t.get_args(_ANSIColor)
if platform.system() == "Windows":
    os.system("color")  # hack - makes ANSI colors work in the windows cmd window


def colored(txt: str, color: _ANSIColor | None) -> str:
    if color is None:
        return txt
    code = _ansi_colors.index(color.casefold())
    reset = "\x1b[0m"
    return f"\x1b[{code + 30}m{txt}{reset}"
