import json
from pathlib import Path

import pytest
from instafeeds.decoder import (
    CATS, DOGS, RecordFailure, RecordOk,
    decode_cats, decode_dogs, decode_feed, parse_cat, parse_dog,
)
from instafeeds.models import CatRecord, DogRecord

DATA = Path(__file__).parent / "data"

def cat(name="Nala Cat", cat_id="001", instagram="https://www.instagram.com/nala_cat/"):
    return {"name": name, "cat_id": cat_id, "instagram": instagram}

def dog(name="Men's Wear Dog", dog_id="1", followers="100", following="10", posts="5", **overrides):
    d = {
        "name": name,
        "dog_id": dog_id,
        "instagram": "https://www.instagram.com/mensweardog/",
        "imageName": "mens_wear_dog.jpg",
        "stats": {"followers": followers, "following": following, "posts": posts},
    }
    d.update(overrides)
    return d

def payload(key, items) -> bytes:
    return json.dumps({key: items}).encode()

def test_mens_wear_dog_end_to_end():
    raw = (b'{"dogs":[{"name":"Men\'s Wear Dog","dog_id":"1","instagram":"https://www.instagram.com/mensweardog/",'
           b'"imageName":"mens_wear_dog.jpg","stats":{"followers":"100","following":"10","posts":"5"}}]}')
    dogs = decode_dogs(raw)
    assert len(dogs) == 1
    d = dogs[0]
    assert (d.id, d.follower_count, d.following_count, d.post_count) == (1, 100, 10, 5)
    assert d.image_name == "mens_wear_dog.jpg"
    assert d.profile_url == "https://www.instagram.com/mensweardog/"
    assert d.formatted_stats() == "Posts: 5   Followers: 100   Following:10"

def test_cats_fixture_file():
    cats = decode_cats((DATA / "instacats.json").read_bytes())
    assert [c.name for c in cats] == ["Nala Cat", "Lil Bub", "Grumpy Cat"]
    assert cats[1].id == 2
    assert cats[2].profile_url == "https://www.instagram.com/grump_cat_/?hl=en"

def test_dogs_fixture_file():
    dogs = decode_dogs((DATA / "instadogs.json").read_bytes())
    assert len(dogs) == 1
    assert dogs[0].name == "Men's Wear Dog"
    assert dogs[0].id == 1
    assert dogs[0].follower_count > 0 and dogs[0].following_count > 0 and dogs[0].post_count > 0

def test_malformed_records_are_dropped_in_order():
    items = [
        cat(name="A", cat_id="1"),
        cat(name="B", cat_id="abc"),        # non-numeric id
        {"name": "C", "cat_id": "3"},       # no instagram
        cat(name="D", cat_id="4"),
        cat(name="E", cat_id=5),            # JSON number, not text
        "not an object",
        cat(name="F", cat_id="6"),
    ]
    cats = decode_cats(payload("cats", items))
    assert [c.name for c in cats] == ["A", "D", "F"]
    assert [c.id for c in cats] == [1, 4, 6]

def test_decode_feed_reports_failures_with_indices():
    result = decode_feed(payload("dogs", [dog(), dog(dog_id="abc"), dog(posts="-1")]), DOGS)
    assert result.error is None
    assert len(result.records) == 1
    assert result.dropped == 2
    assert [f.index for f in result.failures] == [1, 2]
    assert "dog_id" in result.failures[0].reason
    assert "posts" in result.failures[1].reason

@pytest.mark.parametrize("overrides", [
    {"imageName": None},
    {"imageName": 7},
    {"stats": None},
    {"stats": ["100", "10", "5"]},
    {"stats": {"followers": "100", "following": "10"}},
    {"stats": {"followers": "100", "following": "ten", "posts": "5"}},
    {"instagram": "not a url"},
    {"instagram": ""},
    {"stats": {"followers": "1", "following": "2", "posts": "3", "likes": 4}},
    {"stats": {"followers": "1", "following": "2", "posts": "3", "extra": None}},
    {"name": ""},
])
def test_single_bad_dog_field_drops_whole_record(overrides):
    assert decode_dogs(payload("dogs", [dog(**overrides)])) == []

@pytest.mark.parametrize("raw", [
    b"",
    b"not json at all",
    b"\xff\xfe\x00garbage",
    b"[]",
    b'"cats"',
    b'{"dogs": []}',
    b'{"cats": {"name": "Nala Cat"}}',
    b'{"cats": null}',
])
def test_structural_problems_yield_no_records(raw, capsys):
    assert decode_cats(raw) == []
    assert "[error] could not decode cats feed" in capsys.readouterr().err

def test_structural_error_is_recorded():
    result = decode_feed(b'{"kittens": []}', CATS)
    assert result.records == []
    assert result.error == "key 'cats' missing or not an array"

def test_empty_array_yields_empty_list_without_diagnostics(capsys):
    assert decode_dogs(b'{"dogs": []}') == []
    assert capsys.readouterr().err == ""

def test_per_record_drops_are_silent(capsys):
    decode_cats(payload("cats", [cat(cat_id="x"), cat()]))
    assert capsys.readouterr().err == ""

def test_str_payload_is_accepted():
    assert decode_cats(json.dumps({"cats": [cat()]})) == [
        CatRecord(name="Nala Cat", id=1, profile_url="https://www.instagram.com/nala_cat/")
    ]

def test_parse_cat_and_dog_results():
    ok = parse_cat(cat())
    assert isinstance(ok, RecordOk) and isinstance(ok.record, CatRecord)
    bad = parse_cat({"name": "Nala Cat"})
    assert isinstance(bad, RecordFailure) and "cat_id" in bad.reason

    ok = parse_dog(dog())
    assert isinstance(ok, RecordOk) and isinstance(ok.record, DogRecord)
    assert isinstance(parse_dog(42), RecordFailure)

def test_duplicate_ids_are_kept():
    cats = decode_cats(payload("cats", [cat(name="A"), cat(name="B")]))
    assert [c.id for c in cats] == [1, 1]

def test_extra_keys_are_ignored():
    item = dict(cat(), color="orange")
    assert len(decode_cats(payload("cats", [item]))) == 1

def test_oversized_id_drops_only_its_record():
    items = [cat(name="A", cat_id="1" * 5000), cat(name="B", cat_id="2")]
    assert [c.name for c in decode_cats(payload("cats", items))] == ["B"]

def test_oversized_count_drops_only_its_record():
    items = [dog(name="A", followers="9" * 5000), dog(name="B")]
    assert [d.name for d in decode_dogs(payload("dogs", items))] == ["B"]

def test_non_http_and_relative_profile_urls_are_kept():
    items = [
        cat(name="A", instagram="ftp://example.com/a"),
        cat(name="B", instagram="instagram.com/b"),
    ]
    cats = decode_cats(payload("cats", items))
    assert [(c.name, c.profile_url) for c in cats] == [("A", "ftp://example.com/a"), ("B", "instagram.com/b")]

def test_all_string_stats_with_extra_key_are_kept():
    stats = {"followers": "1", "following": "2", "posts": "3", "likes": "4"}
    dogs = decode_dogs(payload("dogs", [dog(stats=stats)]))
    assert (dogs[0].follower_count, dogs[0].following_count, dogs[0].post_count) == (1, 2, 3)
