"""Tests for NewsLoader."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import MagicMock

import httpx
import pytest

from newsfeed.config import FeedConfig
from newsfeed.feed.loader import NO_CACHE_HEADERS, NewsLoader


class TestLocalLoad:
    """Loading from the public directory."""

    async def test_loads_and_normalizes(self, loader: NewsLoader) -> None:
        items = await loader.load()

        assert [i.id for i in items] == ["1", "2", "3", "4", "5"]
        assert items[0].source_class == "official"
        assert items[1].source_class == "media"

    async def test_leading_slash_is_public_relative(self, public_dir: Path) -> None:
        loader = NewsLoader(FeedConfig(location="/news.json", public_dir=public_dir))
        assert len(await loader.load()) == 5

    async def test_reads_fresh_content_each_time(self, loader: NewsLoader, public_dir: Path) -> None:
        assert len(await loader.load()) == 5
        (public_dir / "news.json").write_text(json.dumps([{"id": 9}]), encoding="utf-8")
        assert [i.id for i in await loader.load()] == ["9"]

    async def test_missing_file_is_empty(self, public_dir: Path) -> None:
        loader = NewsLoader(FeedConfig(location="nope.json", public_dir=public_dir))
        assert await loader.load() == []

    async def test_invalid_json_is_empty(self, loader: NewsLoader, public_dir: Path) -> None:
        (public_dir / "news.json").write_text("{not json", encoding="utf-8")
        assert await loader.load() == []

    async def test_non_array_is_empty(self, loader: NewsLoader, public_dir: Path) -> None:
        (public_dir / "news.json").write_text(json.dumps({"items": []}), encoding="utf-8")
        assert await loader.load() == []

    async def test_path_outside_public_dir_is_empty(self, public_dir: Path) -> None:
        (public_dir.parent / "secret.json").write_text("[]", encoding="utf-8")
        loader = NewsLoader(FeedConfig(location="../secret.json", public_dir=public_dir))
        assert await loader.load() == []


class TestRemoteLoad:
    """Loading over HTTP."""

    @pytest.fixture
    def remote(self) -> NewsLoader:
        return NewsLoader(FeedConfig(location="https://cdn.example.com/news.json"))

    def mock_response(self, payload=None, error: Exception | None = None) -> MagicMock:
        response = MagicMock()
        if isinstance(error, ValueError):
            response.json.side_effect = error
        else:
            response.json.return_value = payload
        response.raise_for_status = MagicMock(
            side_effect=error if isinstance(error, httpx.HTTPError) else None
        )
        return response

    async def test_fetch_bypasses_cache(self, remote: NewsLoader, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should send no-cache headers and normalize the payload."""
        captured: dict = {}
        response = self.mock_response([{"id": 1, "title": "T"}])

        async def mock_get(self, url, headers=None):
            captured["url"] = url
            captured["headers"] = headers
            return response

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        items = await remote.load()

        assert [i.title for i in items] == ["T"]
        assert captured["url"] == "https://cdn.example.com/news.json"
        assert captured["headers"] == NO_CACHE_HEADERS

    async def test_network_error_is_empty(self, remote: NewsLoader, monkeypatch: pytest.MonkeyPatch) -> None:
        async def mock_get(self, url, headers=None):
            raise httpx.ConnectError("connection refused")

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        assert await remote.load() == []

    async def test_http_status_error_is_empty(self, remote: NewsLoader, monkeypatch: pytest.MonkeyPatch) -> None:
        error = httpx.HTTPStatusError("404", request=MagicMock(), response=MagicMock())
        response = self.mock_response(error=error)

        async def mock_get(self, url, headers=None):
            return response

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        assert await remote.load() == []

    async def test_bad_json_is_empty(self, remote: NewsLoader, monkeypatch: pytest.MonkeyPatch) -> None:
        response = self.mock_response(error=ValueError("Expecting value"))

        async def mock_get(self, url, headers=None):
            return response

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        assert await remote.load() == []

    async def test_non_array_is_empty(self, remote: NewsLoader, monkeypatch: pytest.MonkeyPatch) -> None:
        response = self.mock_response({"news": []})

        async def mock_get(self, url, headers=None):
            return response

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        assert await remote.load() == []
