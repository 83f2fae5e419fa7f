"""
筛选 / 排序 / 分页

纯函数: (集合, FeedState) -> 有序的可见窗口, 无副作用。
"""
from typing import List, Sequence
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from ..models.news import Category, NewsItem, SourceFilter


PAGE_SIZE = 10


class FeedState(BaseModel):
    """列表视图状态 (分类, 来源, 页数)"""
    model_config = ConfigDict(frozen=True)

    category: Category = Category.ALL
    source: SourceFilter = SourceFilter.ALL
    page: int = Field(default=0, ge=0)

    def with_category(self, category: Category) -> "FeedState":
        """切换分类, 页数归零"""
        return FeedState(category=category, source=self.source, page=0)

    def with_source(self, source: SourceFilter) -> "FeedState":
        """切换来源, 页数归零"""
        return FeedState(category=self.category, source=source, page=0)

    def next_page(self) -> "FeedState":
        return FeedState(category=self.category, source=self.source, page=self.page + 1)


class FeedPage(BaseModel):
    """管道输出"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    items: List[NewsItem] = Field(default_factory=list)
    total: int = 0
    page: int = 0
    page_size: int = PAGE_SIZE
    has_more: bool = False


def filter_by_category(items: Sequence[NewsItem], category: Category) -> List[NewsItem]:
    if category == Category.ALL:
        return list(items)
    return [item for item in items if category.value in item.tags]


def filter_by_source(items: Sequence[NewsItem], source: SourceFilter) -> List[NewsItem]:
    if source == SourceFilter.ALL:
        return list(items)
    return [item for item in items if item.source_class == source.value]


def sort_by_recency(items: Sequence[NewsItem]) -> List[NewsItem]:
    """按发布时间倒序; sorted 是稳定排序, 时间相同保持原顺序"""
    return sorted(items, key=lambda item: item.timestamp, reverse=True)


def paginate(items: Sequence[NewsItem], page: int, page_size: int = PAGE_SIZE) -> List[NewsItem]:
    """前 (page + 1) * page_size 条, 超出长度时返回剩余全部"""
    return list(items[:(page + 1) * page_size])


def run_pipeline(items: Sequence[NewsItem],
                 state: FeedState,
                 page_size: int = PAGE_SIZE) -> FeedPage:
    """分类筛选 -> 来源筛选 -> 时间排序 -> 分页窗口"""
    filtered = filter_by_category(items, state.category)
    filtered = filter_by_source(filtered, state.source)
    ordered = sort_by_recency(filtered)
    window = paginate(ordered, state.page, page_size)
    return FeedPage(
        items=window,
        total=len(ordered),
        page=state.page,
        page_size=page_size,
        has_more=len(window) < len(ordered),
    )


def visible_items(items: Sequence[NewsItem],
                  state: FeedState,
                  page_size: int = PAGE_SIZE) -> List[NewsItem]:
    return run_pipeline(items, state, page_size).items
