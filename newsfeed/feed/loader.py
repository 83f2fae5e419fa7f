"""
静态新闻数据加载
"""
import asyncio
import json
import logging
from pathlib import Path
from typing import Any, List, Optional
import httpx
from ..config import FeedConfig, get_config
from ..exceptions import NewsLoadError
from ..models.news import NewsItem, normalize_items


logger = logging.getLogger(__name__)

# 每次加载都必须拿到最新内容
NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
}


class NewsLoader:
    """从静态资源加载新闻集合

    location 为 http(s) URL 时通过 httpx 请求, 否则视为 public_dir 下的文件路径。
    任何失败都只会得到空列表, 不会向调用方抛出异常。
    """

    def __init__(self, config: Optional[FeedConfig] = None):
        self.config = config or get_config().feed

    @property
    def is_remote(self) -> bool:
        return self.config.location.startswith(("http://", "https://"))

    async def load(self) -> List[NewsItem]:
        """加载并规范化新闻集合

        Returns:
            NewsItem 列表, 失败或格式不对时为空列表
        """
        try:
            data = await self._fetch()
        except NewsLoadError as e:
            logger.warning("News load failed: %s", e)
            return []

        if not isinstance(data, list):
            logger.warning("News payload is %s, expected a list",
                           type(data).__name__)
            return []
        return normalize_items(data)

    async def _fetch(self) -> Any:
        if self.is_remote:
            return await self._fetch_remote()
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, self._read_local)

    async def _fetch_remote(self) -> Any:
        url = self.config.location
        try:
            async with httpx.AsyncClient(timeout=self.config.timeout) as client:
                response = await client.get(url, headers=NO_CACHE_HEADERS)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPError as e:
            raise NewsLoadError(f"{url}: {e}") from e
        except ValueError as e:
            raise NewsLoadError(f"{url}: invalid JSON ({e})") from e

    def _read_local(self) -> Any:
        """读取 public 目录下的静态文件 (同步, 在线程中执行)"""
        public_dir = Path(self.config.public_dir).resolve()
        path = (public_dir / self.config.location.lstrip("/")).resolve()
        if public_dir not in path.parents:
            raise NewsLoadError(f"{path} is outside {public_dir}")
        try:
            return json.loads(path.read_text(encoding='utf-8'))
        except OSError as e:
            raise NewsLoadError(f"{path}: {e}") from e
        except ValueError as e:
            raise NewsLoadError(f"{path}: invalid JSON ({e})") from e
