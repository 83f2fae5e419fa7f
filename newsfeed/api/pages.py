"""
新闻页面 (服务端渲染HTML)
"""
from fastapi import APIRouter, Query
from fastapi.responses import HTMLResponse
from ..config import get_config
from ..feed.pipeline import FeedState
from ..models.news import Category, SourceFilter
from ..views.detail_view import NewsDetailView
from ..views.lifecycle import mounted
from ..views.list_view import NewsListView
from ..views.render import get_renderer


router = APIRouter(tags=["pages"])


def _list_view(category: Category, source: SourceFilter, page: int):
    config = get_config()
    state = FeedState(category=category, source=source, page=page)
    return NewsListView(state=state, page_size=config.feed.page_size), config.display.timezone


@router.get("/news", response_class=HTMLResponse)
async def news_list_page(category: Category = Category.ALL,
                         source: SourceFilter = SourceFilter.ALL,
                         page: int = Query(default=0, ge=0)):
    """新闻列表页"""
    view, tz_name = _list_view(category, source, page)
    async with mounted(view):
        return HTMLResponse(get_renderer().render_list(view, tz_name))


@router.get("/news-cards", response_class=HTMLResponse)
async def news_cards_fragment(category: Category = Category.ALL,
                              source: SourceFilter = SourceFilter.ALL,
                              page: int = Query(default=0, ge=0)):
    """卡片片段, 滚动到底部时请求"""
    view, tz_name = _list_view(category, source, page)
    async with mounted(view):
        return HTMLResponse(
            get_renderer().render_cards(view, tz_name),
            headers={"Cache-Control": "no-store"},
        )


@router.get("/news/{news_id}", response_class=HTMLResponse)
async def news_detail_page(news_id: str):
    """新闻详情页, 未找到时仍返回页面 (显示未找到状态)"""
    view = NewsDetailView(news_id)
    async with mounted(view):
        html = get_renderer().render_detail(view, get_config().display.timezone)
        return HTMLResponse(html)
