"""
Decoding of the cats/dogs feed payloads into records.

`decode_cats` / `decode_dogs` never raise. A payload that isn't JSON, isn't a
mapping, or lacks the expected array key decodes to no records and leaves one
diagnostic line on stderr. Each array element is validated all-or-nothing:
one bad field drops the whole record, silently, and decoding moves on.

`decode_feed` returns the full picture (records, per-element failures,
top-level error) for callers that want to report on what was dropped.
"""
from __future__ import annotations
import json, sys
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Union

from .models import CatRecord, DogRecord
from .utils import parse_count_text, parse_int_text, parse_url_text, require_text

Record = Union[CatRecord, DogRecord]

@dataclass(frozen=True)
class RecordOk:
    record: Record

@dataclass(frozen=True)
class RecordFailure:
    reason: str
    index: int = -1

RecordResult = Union[RecordOk, RecordFailure]

@dataclass
class FeedDecode:
    records: List[Record] = field(default_factory=list)
    failures: List[RecordFailure] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def dropped(self) -> int:
        return len(self.failures)


def parse_cat(obj: Any) -> RecordResult:
    if not isinstance(obj, dict):
        return RecordFailure(f"expected object, got {type(obj).__name__}")

    name = require_text(obj.get("name"), allow_empty=False)
    if name is None:
        return RecordFailure("name missing or not text")
    cat_id = parse_int_text(obj.get("cat_id"))
    if cat_id is None:
        return RecordFailure("cat_id missing or not an integer string")
    url = parse_url_text(obj.get("instagram"))
    if url is None:
        return RecordFailure("instagram missing or not a URL")

    return RecordOk(CatRecord(name=name, id=cat_id, profile_url=url))


def parse_dog(obj: Any) -> RecordResult:
    if not isinstance(obj, dict):
        return RecordFailure(f"expected object, got {type(obj).__name__}")

    name = require_text(obj.get("name"), allow_empty=False)
    if name is None:
        return RecordFailure("name missing or not text")
    dog_id = parse_int_text(obj.get("dog_id"))
    if dog_id is None:
        return RecordFailure("dog_id missing or not an integer string")
    url = parse_url_text(obj.get("instagram"))
    if url is None:
        return RecordFailure("instagram missing or not a URL")
    image_name = require_text(obj.get("imageName"))
    if image_name is None:
        return RecordFailure("imageName missing or not text")

    stats = obj.get("stats")
    if not isinstance(stats, dict):
        return RecordFailure("stats missing or not an object")
    if not all(isinstance(v, str) for v in stats.values()):
        return RecordFailure("stats values must all be text")
    counts = {}
    for key in ("followers", "following", "posts"):
        n = parse_count_text(stats.get(key))
        if n is None:
            return RecordFailure(f"stats.{key} missing or not a non-negative integer string")
        counts[key] = n

    return RecordOk(DogRecord(
        name=name,
        id=dog_id,
        profile_url=url,
        image_name=image_name,
        follower_count=counts["followers"],
        following_count=counts["following"],
        post_count=counts["posts"],
    ))


@dataclass(frozen=True)
class FeedKind:
    key: str                                  # top-level array key
    parse: Callable[[Any], RecordResult]

CATS = FeedKind("cats", parse_cat)
DOGS = FeedKind("dogs", parse_dog)


def decode_feed(payload: Union[bytes, str], kind: FeedKind) -> FeedDecode:
    result = FeedDecode()
    try:
        data = json.loads(payload)
    except (ValueError, TypeError, RecursionError) as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        result.error = f"payload is not valid JSON: {e}"
    else:
        if not isinstance(data, dict):
            result.error = f"top-level JSON is {type(data).__name__}, expected object"
        elif not isinstance(data.get(kind.key), list):
            result.error = f"key '{kind.key}' missing or not an array"
        else:
            for i, obj in enumerate(data[kind.key]):
                res = kind.parse(obj)
                if isinstance(res, RecordOk):
                    result.records.append(res.record)
                else:
                    result.failures.append(RecordFailure(res.reason, i))

    if result.error is not None:
        print(f"[error] could not decode {kind.key} feed: {result.error}", file=sys.stderr)
    return result


def decode_cats(payload: Union[bytes, str]) -> List[CatRecord]:
    return decode_feed(payload, CATS).records

def decode_dogs(payload: Union[bytes, str]) -> List[DogRecord]:
    return decode_feed(payload, DOGS).records
