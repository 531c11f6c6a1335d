"""
schema_fetcher.py
Retrieves the raw bytes of a dialect definition from a local path or an http(s) url,
plus the small address helpers shared by the parser and the include resolver.
"""
import os
from typing import Optional, Tuple
from urllib.parse import urlparse

import requests

from errors import FetchError

REMOTE_SCHEMES = ("http", "https")


def is_remote_address(address: str) -> bool:
    return urlparse(address).scheme in REMOTE_SCHEMES


def split_address(address: str) -> Tuple[str, str]:
    """
    Split an address into (directory prefix, final segment).
    The prefix keeps its trailing separator so that prefix + include yields a sibling address.
    No '.' or '..' normalization is performed.
    """
    idx = address.rfind("/")
    if os.sep != "/":
        idx = max(idx, address.rfind(os.sep))
    return address[:idx + 1], address[idx + 1:]


class SchemaFetcher:
    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    def fetch(self, address: str, remote: bool) -> bytes:
        if remote:
            return self.fetch_url(address)
        return self.fetch_file(address)

    def fetch_file(self, path: str) -> bytes:
        try:
            with open(path, "rb") as f:
                return f.read()
        except OSError as e:
            raise FetchError(path, f"unable to open: {e}") from e

    def fetch_url(self, url: str) -> bytes:
        try:
            response = requests.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise FetchError(url, f"unable to download: {e}") from e
        if response.status_code != 200:
            raise FetchError(url, f"unable to download: bad return code: {response.status_code}")
        return response.content
