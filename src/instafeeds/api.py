"""
Async API wrapper around the two feed endpoints.

Provides raw payloads for:
- The cats feed (`fetch_cats`)
- The dogs feed (`fetch_dogs`)

Payloads are returned undecoded; `decoder.py` owns validation. Transport
errors (network, non-2xx, timeout) propagate as `httpx.HTTPError`.
`load_payload` reads the same payloads from local JSON files instead.
"""
from __future__ import annotations
from pathlib import Path
from typing import Union

from http_client import HttpClient

DEFAULT_CATS_PATH = "/bins/254uw"
DEFAULT_DOGS_PATH = "/bins/58n98"

class InstaFeedsAPI:

    def __init__(self, http: HttpClient, cats_path: str = DEFAULT_CATS_PATH, dogs_path: str = DEFAULT_DOGS_PATH):
        self.http = http
        self.cats_path = cats_path
        self.dogs_path = dogs_path

    async def fetch_cats(self) -> bytes:
        return await self.http.get_bytes(self.cats_path)

    async def fetch_dogs(self) -> bytes:
        return await self.http.get_bytes(self.dogs_path)

def load_payload(path: Union[str, Path]) -> bytes:
    """Read a JSON feed bundled on disk. Raises OSError if it can't be read."""
    return Path(path).read_bytes()
