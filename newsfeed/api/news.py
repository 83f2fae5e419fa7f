"""
新闻相关API
"""
from typing import List
from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel
from ..config import get_config
from ..feed.pipeline import FeedPage, FeedState
from ..models.news import (
    CATEGORY_LABELS, SOURCE_LABELS, Category, NewsItem, SourceFilter,
)
from ..views.detail_view import DetailStatus, NewsDetailView
from ..views.lifecycle import mounted
from ..views.list_view import NewsListView
from ..views.render import NOT_FOUND_TEXT


router = APIRouter(prefix="/api", tags=["news"])


class FilterOption(BaseModel):
    """筛选项"""
    value: str
    label: str


class FilterOptions(BaseModel):
    """分类标签页与来源选项"""
    categories: List[FilterOption]
    sources: List[FilterOption]


@router.get("/news", response_model=FeedPage)
async def get_news_page(category: Category = Category.ALL,
                        source: SourceFilter = SourceFilter.ALL,
                        page: int = Query(default=0, ge=0)):
    """筛选排序后的新闻窗口"""
    state = FeedState(category=category, source=source, page=page)
    view = NewsListView(state=state, page_size=get_config().feed.page_size)
    async with mounted(view):
        return view.page


@router.get("/news-filters", response_model=FilterOptions)
async def get_filters():
    """获取筛选项"""
    return FilterOptions(
        categories=[FilterOption(value=c.value, label=l) for c, l in CATEGORY_LABELS.items()],
        sources=[FilterOption(value=s.value, label=l) for s, l in SOURCE_LABELS.items()],
    )


@router.get("/news/{news_id}", response_model=NewsItem)
async def get_news_detail(news_id: str):
    """获取新闻详情"""
    view = NewsDetailView(news_id)
    async with mounted(view):
        if view.status != DetailStatus.FOUND:
            raise HTTPException(status_code=404, detail=NOT_FOUND_TEXT)
        return view.item
