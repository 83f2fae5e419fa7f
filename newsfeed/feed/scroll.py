"""
无限滚动控制器
"""
import logging
from typing import Callable, NamedTuple, Protocol, Sequence


logger = logging.getLogger(__name__)

SENTINEL_ID = "news-sentinel"


class VisibilityEntry(NamedTuple):
    """可见性变化通知"""
    target: str
    is_visible: bool


VisibilityCallback = Callable[[Sequence[VisibilityEntry]], None]


class VisibilityObserver(Protocol):
    """视口可见性观察能力 (浏览器中对应 IntersectionObserver)"""

    def observe(self, target: str, callback: VisibilityCallback) -> None:
        ...

    def disconnect(self) -> None:
        ...


class InfiniteScrollController:
    """哨兵元素进入视口时翻到下一页

    Args:
        observer: 可见性观察器
        on_advance: 翻页回调 (页数 + 1)
        sentinel: 哨兵元素ID
    """

    def __init__(self,
                 observer: VisibilityObserver,
                 on_advance: Callable[[], None],
                 sentinel: str = SENTINEL_ID):
        self.observer = observer
        self.on_advance = on_advance
        self.sentinel = sentinel
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def start(self):
        """开始观察哨兵 (视图挂载时)"""
        if self._active:
            return
        self._active = True
        self.observer.observe(self.sentinel, self._handle)

    def stop(self):
        """释放观察器 (视图卸载时), 可重复调用"""
        if not self._active:
            return
        self._active = False
        self.observer.disconnect()

    def _handle(self, entries: Sequence[VisibilityEntry]):
        if not self._active:
            logger.debug("Ignoring visibility change after teardown")
            return
        if entries and entries[0].is_visible:
            self.on_advance()

