"""
Models for the two feeds.

Wire shapes (TypedDict, as they arrive from the endpoints; numbers are strings):
- CatRaw / CatsPayload: {"cats": [...]}
- DogRaw / DogStatsRaw / DogsPayload: {"dogs": [...]}

Decoded records (frozen dataclasses, never mutated after decode):
- CatRecord: name, id, profile_url + derived description
- DogRecord: name, id, profile_url, image_name, stats counts + formatted_stats()
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TypedDict, List

# GET /bins/254uw (items)
class CatRaw(TypedDict):
    name: str
    cat_id: str        # integer as text
    instagram: str     # URL as text

# GET /bins/254uw
class CatsPayload(TypedDict):
    cats: List[CatRaw]

class DogStatsRaw(TypedDict):
    followers: str
    following: str
    posts: str

# GET /bins/58n98 (items)
class DogRaw(TypedDict):
    name: str
    dog_id: str
    instagram: str
    imageName: str
    stats: DogStatsRaw

# GET /bins/58n98
class DogsPayload(TypedDict):
    dogs: List[DogRaw]


@dataclass(frozen=True)
class CatRecord:
    name: str
    id: int
    profile_url: str

    @property
    def description(self) -> str:
        return f"Nice to meet you, I'm {self.name}"


@dataclass(frozen=True)
class DogRecord:
    name: str
    id: int
    profile_url: str
    image_name: str
    follower_count: int
    following_count: int
    post_count: int

    def formatted_stats(self) -> str:
        # spacing mirrors the row detail label exactly
        return f"Posts: {self.post_count}   Followers: {self.follower_count}   Following:{self.following_count}"
