"""
新闻列表视图
"""
import asyncio
import logging
from typing import List, Optional
from ..config import get_config
from ..feed.loader import NewsLoader
from ..feed.pipeline import FeedPage, FeedState, run_pipeline
from ..feed.scroll import InfiniteScrollController, VisibilityObserver
from ..models.news import Category, NewsItem, SourceFilter
from .cards import NewsCard, build_cards


logger = logging.getLogger(__name__)


class NewsListView:
    """列表视图实例

    持有本视图的集合与状态; 挂载时加载一次数据并开始观察滚动哨兵,
    卸载时释放观察器, 卸载后才返回的加载结果会被丢弃。
    """

    def __init__(self,
                 loader: Optional[NewsLoader] = None,
                 observer: Optional[VisibilityObserver] = None,
                 state: Optional[FeedState] = None,
                 page_size: Optional[int] = None):
        self.loader = loader or NewsLoader()
        self.state = state or FeedState()
        self.page_size = page_size or get_config().feed.page_size
        self.items: List[NewsItem] = []
        self.loading = True
        self.mounted = False
        self._load_task: Optional[asyncio.Task] = None
        self.scroll: Optional[InfiniteScrollController] = None
        if observer is not None:
            self.scroll = InfiniteScrollController(observer, self.advance_page)

    def mount(self) -> asyncio.Task:
        """挂载: 发起唯一一次加载"""
        if self._load_task is not None:
            return self._load_task
        self.mounted = True
        if self.scroll:
            self.scroll.start()
        self._load_task = asyncio.ensure_future(self._load())
        return self._load_task

    def unmount(self):
        """卸载: 停止观察, 取消未完成的加载"""
        self.mounted = False
        if self.scroll:
            self.scroll.stop()
        if self._load_task and not self._load_task.done():
            self._load_task.cancel()

    async def loaded(self):
        """等待加载结束"""
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
            logger.debug("List view unmounted before load settled, discarding %d items",
                         len(items))
            return
        self.items = items
        self.loading = False

    def select_category(self, category: Category):
        self.state = self.state.with_category(category)

    def select_source(self, source: SourceFilter):
        self.state = self.state.with_source(source)

    def advance_page(self):
        self.state = self.state.next_page()

    @property
    def page(self) -> FeedPage:
        return run_pipeline(self.items, self.state, self.page_size)

    @property
    def visible(self) -> List[NewsItem]:
        return self.page.items

    def cards(self, tz_name: Optional[str] = None) -> List[NewsCard]:
        return build_cards(self.visible, tz_name)
