"""
新闻数据管道模块
"""
from .loader import NewsLoader
from .pipeline import (
    PAGE_SIZE, FeedState, FeedPage, filter_by_category, filter_by_source,
    sort_by_recency, paginate, run_pipeline, visible_items,
)
from .scroll import InfiniteScrollController, VisibilityObserver, VisibilityEntry, SENTINEL_ID
from .detail import find_item

__all__ = [
    'NewsLoader', 'PAGE_SIZE', 'FeedState', 'FeedPage', 'filter_by_category',
    'filter_by_source', 'sort_by_recency', 'paginate', 'run_pipeline',
    'visible_items', 'InfiniteScrollController', 'VisibilityObserver',
    'VisibilityEntry', 'SENTINEL_ID', 'find_item',
]
