"""
详情查找
"""
from typing import Any, Optional, Sequence
from ..models.news import NewsItem


def find_item(items: Sequence[NewsItem], news_id: Any) -> Optional[NewsItem]:
    """按字符串形式的ID查找, 重复ID取加载顺序中的第一条

    Returns:
        匹配的 NewsItem, 未找到返回 None
    """
    wanted = str(news_id)
    for item in items:
        if item.id == wanted:
            return item
    return None
