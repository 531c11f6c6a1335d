import os
import pytest
import requests
from errors import FetchError
from schema_fetcher import SchemaFetcher, is_remote_address, split_address
from tests.test_utils import def_path

class FakeResponse:
    def __init__(self, status_code, content=b""):
        self.status_code = status_code
        self.content = content

@pytest.mark.parametrize("address,remote", [
    ("https://example.com/common.xml", True),
    ("http://example.com/common.xml", True),
    ("common.xml", False),
    ("/abs/path/common.xml", False),
    ("file:///abs/path/common.xml", False),
])
def test_is_remote_address(address, remote):
    assert is_remote_address(address) is remote

def test_split_address():
    assert split_address("https://example.com/v1.0/common.xml") == ("https://example.com/v1.0/", "common.xml")
    assert split_address("defs/../common.xml") == ("defs/../", "common.xml")
    assert split_address("common.xml") == ("", "common.xml")

def test_fetch_local_file():
    content = SchemaFetcher().fetch(def_path("icarous.xml"), remote=False)
    assert content.startswith(b"<?xml")

def test_fetch_missing_local_file(temp_dir):
    missing = os.path.join(temp_dir, "missing.xml")
    with pytest.raises(FetchError) as exc_info:
        SchemaFetcher().fetch(missing, remote=False)
    assert exc_info.value.address == missing
    assert "unable to open" in str(exc_info.value)

def test_fetch_url(monkeypatch):
    calls = []
    def fake_get(url, timeout=None):
        calls.append((url, timeout))
        return FakeResponse(200, b"<mavlink/>")
    monkeypatch.setattr(requests, "get", fake_get)
    content = SchemaFetcher(timeout=2.5).fetch("https://example.com/common.xml", remote=True)
    assert content == b"<mavlink/>"
    assert calls == [("https://example.com/common.xml", 2.5)]

def test_fetch_url_bad_status(monkeypatch):
    monkeypatch.setattr(requests, "get", lambda url, timeout=None: FakeResponse(404))
    with pytest.raises(FetchError) as exc_info:
        SchemaFetcher().fetch("https://example.com/missing.xml", remote=True)
    assert "bad return code: 404" in str(exc_info.value)

def test_fetch_url_connection_error(monkeypatch):
    def fake_get(url, timeout=None):
        raise requests.ConnectionError("connection refused")
    monkeypatch.setattr(requests, "get", fake_get)
    with pytest.raises(FetchError) as exc_info:
        SchemaFetcher().fetch("https://example.com/common.xml", remote=True)
    assert "unable to download" in str(exc_info.value)
