"""
视图模块
"""
from .cards import Badge, NewsCard, build_card, build_cards, make_badges, detail_href
from .formatting import format_date, meta_line
from .list_view import NewsListView
from .detail_view import NewsDetailView, DetailStatus
from .render import PageRenderer, get_renderer
from .lifecycle import mounted

__all__ = [
    'Badge', 'NewsCard', 'build_card', 'build_cards', 'make_badges', 'detail_href',
    'format_date', 'meta_line', 'NewsListView', 'NewsDetailView', 'DetailStatus',
    'PageRenderer', 'get_renderer', 'mounted',
]
