from __future__ import annotations
import sys, asyncio
from pathlib import Path
from typing import Awaitable, Callable, List, Optional, Union

import httpx

from http_client import HttpClient

from .api import InstaFeedsAPI, load_payload
from .decoder import CATS, DOGS, FeedKind, decode_feed
from .models import CatRecord, DogRecord
from .presenter import FeedScreen

PathLike = Union[str, Path]

async def fetch_payload(
    kind: FeedKind,
    fetch: Optional[Callable[[], Awaitable[bytes]]],
    file: Optional[PathLike] = None,
) -> Optional[bytes]:
    """
    Get one raw payload, from `file` when given, else over HTTP.
    Transport/file errors are logged and turn into None; nothing is retried here.
    """
    if file is not None:
        try:
            return load_payload(file)
        except OSError as e:
            print(f"[error] could not read {kind.key} file {file}: {e}", file=sys.stderr)
            return None
    if fetch is None:
        print(f"[error] no source configured for {kind.key} feed", file=sys.stderr)
        return None
    try:
        return await fetch()
    except httpx.HTTPError as e:
        print(f"[error] fetching {kind.key} feed failed: {e}", file=sys.stderr)
        return None

def decode_with_report(payload: bytes, kind: FeedKind) -> list:
    """
    Decode a payload; malformed records are dropped by the decoder,
    here only their total is reported.
    """
    result = decode_feed(payload, kind)
    if result.dropped:
        print(f"[warn] Dropped {result.dropped} malformed {kind.key} record(s).", file=sys.stderr)
    return result.records

async def load_cats(api: Optional[InstaFeedsAPI], file: Optional[PathLike] = None) -> List[CatRecord]:
    payload = await fetch_payload(CATS, api.fetch_cats if api else None, file)
    # transport failure: decoder never runs, section stays empty
    return decode_with_report(payload, CATS) if payload is not None else []

async def load_dogs(api: Optional[InstaFeedsAPI], file: Optional[PathLike] = None) -> List[DogRecord]:
    payload = await fetch_payload(DOGS, api.fetch_dogs if api else None, file)
    return decode_with_report(payload, DOGS) if payload is not None else []

async def load_screen(
    api: Optional[InstaFeedsAPI],
    screen: FeedScreen,
    cats_file: Optional[PathLike] = None,
    dogs_file: Optional[PathLike] = None,
) -> FeedScreen:
    """
    Load both feeds concurrently, then swap them into the screen.
    The swap happens after the awaits, on the loop that owns `screen`.
    """
    cats, dogs = await asyncio.gather(
        load_cats(api, cats_file),
        load_dogs(api, dogs_file),
    )
    screen.replace_cats(cats)
    screen.replace_dogs(dogs)
    return screen

async def run_feeds(
    base_url: str,
    cats_path: str,
    dogs_path: str,
    retries: int,
    connect_timeout: float,
    read_timeout: float,
    cats_file: Optional[PathLike] = None,
    dogs_file: Optional[PathLike] = None,
    assets_dir: Optional[PathLike] = None,
) -> FeedScreen:
    """
    Orchestrate one start-up load:
        1. Fetch (or read) both payloads
        2. Decode each, dropping malformed records
        3. Replace both sections of a fresh screen
    """
    screen = FeedScreen(assets_dir=assets_dir)
    async with HttpClient(
        base_url=base_url,
        connect_timeout=connect_timeout,
        read_timeout=read_timeout,
        retries=retries,
    ) as http:
        api = InstaFeedsAPI(http, cats_path=cats_path, dogs_path=dogs_path)
        await load_screen(api, screen, cats_file=cats_file, dogs_file=dogs_file)
    return screen
