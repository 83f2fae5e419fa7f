"""
卡片视图模型

徽章以结构化数据交给模板组合, 不拼接HTML字符串。
"""
from typing import List, Optional
from urllib.parse import quote
from pydantic import BaseModel, Field
from ..models.news import CardType, NewsItem
from .formatting import meta_line


MAX_TAG_BADGES = 2


class Badge(BaseModel):
    """徽章"""
    label: str
    kind: str = "tag"   # "tag" | "source"


class NewsCard(BaseModel):
    """列表卡片"""
    id: str
    href: str
    layout: CardType
    title: str
    summary: str = ""
    image: Optional[str] = None
    meta: str = ""
    badges: List[Badge] = Field(default_factory=list)


def detail_href(news_id: str) -> str:
    """详情页路径, ID做URL转义"""
    return f"/news/{quote(news_id, safe='')}"


def make_badges(item: NewsItem) -> List[Badge]:
    """前两个标签 + 来源类别"""
    badges = [Badge(label=tag, kind="tag") for tag in item.tags[:MAX_TAG_BADGES]]
    badges.append(Badge(label=item.source_class, kind="source"))
    return badges


def build_card(item: NewsItem, tz_name: Optional[str] = None) -> NewsCard:
    """按 card_type 生成卡片; analysis 带徽章, short 不带"""
    card = NewsCard(
        id=item.id,
        href=detail_href(item.id),
        layout=item.card_type,
        title=item.title,
        summary=item.summary,
        image=item.image,
        meta=meta_line(item, tz_name),
    )
    if item.card_type == CardType.ANALYSIS:
        card.badges = make_badges(item)
    return card


def build_cards(items: List[NewsItem], tz_name: Optional[str] = None) -> List[NewsCard]:
    return [build_card(item, tz_name) for item in items]
