"""Shared fixtures for newsfeed tests."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Callable

import pytest

from newsfeed.config import AppConfig, FeedConfig, set_config
from newsfeed.feed.loader import NewsLoader
from newsfeed.feed.scroll import SENTINEL_ID, VisibilityEntry
from newsfeed.models.news import NewsItem, normalize_items


class FakeObserver:
    """VisibilityObserver stand-in driven by the test."""

    def __init__(self) -> None:
        self.callbacks: dict = {}
        self.disconnects = 0

    def observe(self, target: str, callback: Callable) -> None:
        self.callbacks[target] = callback

    def disconnect(self) -> None:
        self.disconnects += 1
        self.callbacks.clear()

    def trigger(self, visible: bool = True, target: str = SENTINEL_ID) -> None:
        callback = self.callbacks.get(target)
        if callback is not None:
            callback([VisibilityEntry(target, visible)])


class StaticLoader:
    """Loader returning a fixed collection, counting calls."""

    def __init__(self, items: list[NewsItem]) -> None:
        self.items = items
        self.calls = 0

    async def load(self) -> list[NewsItem]:
        self.calls += 1
        return list(self.items)


class GatedLoader(StaticLoader):
    """Loader that blocks until released."""

    def __init__(self, items: list[NewsItem]) -> None:
        super().__init__(items)
        self.release = asyncio.Event()

    async def load(self) -> list[NewsItem]:
        self.calls += 1
        await self.release.wait()
        return list(self.items)


def make_raw_items(count: int) -> list[dict[str, Any]]:
    """Items with distinct, increasing publication dates."""
    return [
        {
            "id": i,
            "title": f"Article {i}",
            "summary": f"Summary {i}",
            "pubDate": f"2024-01-{i:02d}T00:00:00Z",
            "tags": ["team"],
        }
        for i in range(1, count + 1)
    ]


@pytest.fixture
def raw_collection() -> list[dict[str, Any]]:
    """The two-item collection used by the list scenarios."""
    return [
        {"id": 1, "title": "One", "summary": "", "pubDate": "2024-01-01", "tags": ["team"]},
        {"id": 2, "title": "Two", "summary": "", "pubDate": "2024-06-01", "tags": ["driver"]},
    ]


@pytest.fixture
def collection(raw_collection: list[dict[str, Any]]) -> list[NewsItem]:
    return normalize_items(raw_collection)


@pytest.fixture
def observer() -> FakeObserver:
    return FakeObserver()


@pytest.fixture
def public_dir(tmp_path: Path) -> Path:
    """Public root containing a five-item news.json."""
    path = tmp_path / "public"
    path.mkdir()
    items = make_raw_items(5)
    items[0]["cardType"] = "analysis"
    items[0]["tags"] = ["team", "tech", "reg"]
    items[0]["sourceClass"] = "official"
    items[0]["source"] = "FIA"
    (path / "news.json").write_text(json.dumps(items), encoding="utf-8")
    return path


@pytest.fixture
def feed_config(public_dir: Path) -> FeedConfig:
    return FeedConfig(location="news.json", public_dir=public_dir)


@pytest.fixture
def loader(feed_config: FeedConfig) -> NewsLoader:
    return NewsLoader(feed_config)


@pytest.fixture
def app_config(feed_config: FeedConfig):
    """Install a test config globally, reset afterwards."""
    config = AppConfig(feed=feed_config)
    set_config(config)
    yield config
    set_config(None)
