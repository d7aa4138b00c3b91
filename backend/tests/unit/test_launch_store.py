"""Unit tests for the in-memory launch store and the seed loader."""

import asyncio
import json
import threading
from datetime import date

import pytest

from launch_tracker.config import get_settings
from launch_tracker.domain.entities import Region
from launch_tracker.infrastructure.memory import (
    InMemoryLaunchRepository,
    SeedDataError,
    load_seed_records,
)


# ── InMemoryLaunchRepository ─────────────────────────────────────────


@pytest.mark.asyncio
async def test_seed_records_come_before_appended_records(make_launch):
    repo = InMemoryLaunchRepository(seed=[make_launch(record_id="seed-1")])

    await repo.append(make_launch(record_id="new-1"))

    assert repo.seed_count == 1
    assert [r.id for r in await repo.list_all()] == ["seed-1", "new-1"]
    assert await repo.count() == 2


@pytest.mark.asyncio
async def test_filters_by_region_and_base_product(make_launch):
    repo = InMemoryLaunchRepository(seed=[
        make_launch("Widget", Region.US, record_id="w-us"),
        make_launch("Widget", Region.JP, record_id="w-jp"),
        make_launch("Gadget", Region.JP, record_id="g-jp"),
    ])

    assert [r.id for r in await repo.list_by_region(Region.JP)] == ["w-jp", "g-jp"]
    assert [r.id for r in await repo.list_by_base_product("Widget")] == ["w-us", "w-jp"]
    assert [r.id for r in await repo.list_by_base_product("Widget", Region.JP)] == ["w-jp"]


@pytest.mark.asyncio
async def test_returned_lists_are_snapshots(make_launch):
    repo = InMemoryLaunchRepository(seed=[make_launch(record_id="seed-1")])

    snapshot = await repo.list_all()
    snapshot.clear()

    assert await repo.count() == 1


def test_concurrent_appends_are_all_kept(make_launch):
    repo = InMemoryLaunchRepository()
    records = [make_launch(record_id=f"r-{i}") for i in range(200)]

    def worker(chunk):
        for record in chunk:
            asyncio.run(repo.append(record))

    threads = [threading.Thread(target=worker, args=(records[i::4],)) for i in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    stored = asyncio.run(repo.list_all())
    assert sorted(r.id for r in stored) == sorted(r.id for r in records)


# ── Seed loader ──────────────────────────────────────────────────────


def _seed_entry(**overrides) -> dict:
    entry = {
        "id": "widget-us",
        "productName": "Widget US",
        "baseProductName": "Widget",
        "year": 2025,
        "month": 3,
        "day": 10,
        "region": "US",
        "category": "Devices",
        "strategyKickoffDate": "2025-01-01",
        "marketReadoutDate": "2025-06-01",
    }
    entry.update(overrides)
    return entry


def test_shipped_seed_file_is_valid():
    records = load_seed_records(get_settings().seed_data_file)

    assert len(records) > 0
    assert len({r.id for r in records}) == len(records)
    assert {r.region for r in records} == set(Region)


def test_load_seed_records_parses_entries(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text(json.dumps([_seed_entry(region="jp")]), encoding="utf-8")

    [record] = load_seed_records(path)

    assert record.id == "widget-us"
    assert record.region == Region.JP
    assert record.market_readout_date == date(2025, 6, 1)
    assert record.description == ""


def test_missing_seed_file_gives_empty_store(tmp_path):
    assert load_seed_records(tmp_path / "absent.json") == []


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        json.dumps({"id": "x"}),
        json.dumps([_seed_entry(strategyKickoffDate="soon")]),
        json.dumps([_seed_entry(region="MX")]),
        json.dumps([_seed_entry(id=None)]),
        json.dumps([_seed_entry(), _seed_entry()]),
    ],
)
def test_bad_seed_file_raises(tmp_path, content):
    path = tmp_path / "seed.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(SeedDataError):
        load_seed_records(path)
