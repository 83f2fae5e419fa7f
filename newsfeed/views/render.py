"""
HTML渲染 (Jinja2, 自动转义)
"""
from pathlib import Path
from typing import Any, Dict, Optional
from urllib.parse import urlencode
from jinja2 import Environment, FileSystemLoader, select_autoescape
from ..feed.pipeline import FeedState
from ..feed.scroll import SENTINEL_ID
from ..models.news import CATEGORY_LABELS, SOURCE_LABELS
from .detail_view import NewsDetailView
from .formatting import meta_line
from .list_view import NewsListView


TEMPLATES_DIR = Path(__file__).parent / "templates"

BACK_LABEL = "← 뒤로가기"
LOADING_TEXT = "불러오는 중..."
NOT_FOUND_TEXT = "기사를 찾을 수 없습니다."


def feed_query(state: FeedState, **overrides: Any) -> str:
    """生成列表页查询串"""
    params = {
        "category": state.category.value,
        "source": state.source.value,
        "page": state.page,
    }
    params.update(overrides)
    return urlencode(params)


class PageRenderer:
    """页面渲染器"""

    def __init__(self, templates_dir: Optional[Path] = None):
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir or TEMPLATES_DIR)),
            autoescape=select_autoescape(['html', 'xml']),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.globals.update(
            back_label=BACK_LABEL,
            sentinel_id=SENTINEL_ID,
        )

    def _list_context(self, view: NewsListView, tz_name: Optional[str]) -> Dict[str, Any]:
        state = view.state
        page = view.page
        next_href = None
        if page.has_more:
            next_href = "/news-cards?" + feed_query(state, page=state.page + 1)
        return {
            "state": state,
            "cards": view.cards(tz_name),
            "total": page.total,
            "loading": view.loading,
            "next_href": next_href,
            "categories": [
                {"value": c.value, "label": label,
                 "href": "/news?" + feed_query(state.with_category(c)),
                 "active": c == state.category}
                for c, label in CATEGORY_LABELS.items()
            ],
            "sources": [
                {"value": s.value, "label": label, "selected": s == state.source}
                for s, label in SOURCE_LABELS.items()
            ],
        }

    def render_list(self, view: NewsListView, tz_name: Optional[str] = None) -> str:
        template = self.env.get_template("news_list.html")
        return template.render(**self._list_context(view, tz_name))

    def render_cards(self, view: NewsListView, tz_name: Optional[str] = None) -> str:
        """仅卡片列表 (无限滚动请求用)"""
        template = self.env.get_template("_cards.html")
        return template.render(**self._list_context(view, tz_name))

    def render_detail(self, view: NewsDetailView, tz_name: Optional[str] = None) -> str:
        template = self.env.get_template("news_detail.html")
        return template.render(
            status=view.status.value,
            item=view.item,
            meta=meta_line(view.item, tz_name) if view.item else "",
            loading_text=LOADING_TEXT,
            not_found_text=NOT_FOUND_TEXT,
        )


_renderer: Optional[PageRenderer] = None


def get_renderer() -> PageRenderer:
    global _renderer
    if _renderer is None:
        _renderer = PageRenderer()
    return _renderer
