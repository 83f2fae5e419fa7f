"""
新闻详情视图
"""
import asyncio
import logging
from enum import Enum
from typing import Optional
from ..feed.detail import find_item
from ..feed.loader import NewsLoader
from ..models.news import NewsItem


logger = logging.getLogger(__name__)


class DetailStatus(str, Enum):
    """详情状态"""
    LOADING = "loading"
    FOUND = "found"
    NOT_FOUND = "not_found"


class NewsDetailView:
    """详情视图实例, 独立加载数据 (与列表视图不共享缓存)"""

    def __init__(self, news_id: str, loader: Optional[NewsLoader] = None):
        self.news_id = str(news_id)
        self.loader = loader or NewsLoader()
        self.item: Optional[NewsItem] = None
        self.loading = True
        self.mounted = False
        self._load_task: Optional[asyncio.Task] = None

    @property
    def status(self) -> DetailStatus:
        if self.loading:
            return DetailStatus.LOADING
        if self.item is None:
            return DetailStatus.NOT_FOUND
        return DetailStatus.FOUND

    def mount(self) -> asyncio.Task:
        if self._load_task is not None:
            return self._load_task
        self.mounted = True
        self._load_task = asyncio.ensure_future(self._load())
        return self._load_task

    def unmount(self):
        self.mounted = False
        if self._load_task and not self._load_task.done():
            self._load_task.cancel()

    async def loaded(self):
        if self._load_task is None:
            return
        try:
            await self._load_task
        except asyncio.CancelledError:
            if self.mounted:
                raise

    async def _load(self):
        items = await self.loader.load()
        if not self.mounted:
            logger.debug("Detail view %s unmounted before load settled", self.news_id)
            return
        self.item = find_item(items, self.news_id)
        self.loading = False
