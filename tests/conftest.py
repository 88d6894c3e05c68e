import pook as pook_mod
import pytest

from aocutil.utils import http


@pytest.fixture
def aocutil_data_dir(tmp_path):
    data_dir = tmp_path / "aocutil-data"
    data_dir.mkdir(parents=True)
    return data_dir


@pytest.fixture
def aocutil_config_dir(tmp_path):
    token_dir = tmp_path / ".config" / "aocutil"
    token_dir.mkdir(parents=True)
    return token_dir


@pytest.fixture(autouse=True)
def remove_user_env(aocutil_data_dir, monkeypatch, aocutil_config_dir):
    monkeypatch.setattr("aocutil.models.AOCUTIL_DATA_DIR", aocutil_data_dir)
    monkeypatch.setattr("aocutil.models.AOCUTIL_CONFIG_DIR", aocutil_config_dir)
    monkeypatch.delenv("AOC_SESSION", raising=False)


@pytest.fixture(autouse=True)
def test_token(aocutil_config_dir):
    token_file = aocutil_config_dir / "token"
    token_file.write_text("thetesttoken")
    return token_file


@pytest.fixture(autouse=True)
def req_count(monkeypatch):
    # fresh request counter per test
    counts = {"GET": 0}
    monkeypatch.setattr(http, "req_count", counts)
    return counts


@pytest.fixture
def pook():
    pook_mod.on()
    yield pook_mod
    pook_mod.off()
