"""
数据模型模块
"""
from .news import (
    NewsItem, Category, SourceFilter, CardType,
    CATEGORY_LABELS, SOURCE_LABELS, normalize_item, normalize_items,
)

__all__ = [
    'NewsItem', 'Category', 'SourceFilter', 'CardType',
    'CATEGORY_LABELS', 'SOURCE_LABELS', 'normalize_item', 'normalize_items',
]
