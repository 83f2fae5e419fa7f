"""
新闻数据模型
"""
import logging
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from enum import Enum
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


logger = logging.getLogger(__name__)


class Category(str, Enum):
    """分类标签页"""
    ALL = "all"
    TEAM = "team"
    DRIVER = "driver"
    TECH = "tech"
    REG = "reg"
    RUMOR = "rumor"


class SourceFilter(str, Enum):
    """来源筛选选项"""
    ALL = "all"
    OFFICIAL = "official"
    MEDIA = "media"
    REPORTER = "reporter"
    RUMOR = "rumor"


class CardType(str, Enum):
    """卡片布局"""
    ANALYSIS = "analysis"   # 分析卡片 (徽章+大图)
    SHORT = "short"         # 简讯卡片 (缩略图)


DEFAULT_SOURCE_CLASS = SourceFilter.MEDIA.value

CATEGORY_LABELS = {
    Category.ALL: "전체",
    Category.TEAM: "팀",
    Category.DRIVER: "드라이버",
    Category.TECH: "기술",
    Category.REG: "규정",
    Category.RUMOR: "루머",
}

SOURCE_LABELS = {
    SourceFilter.ALL: "전체 소스",
    SourceFilter.OFFICIAL: "공식",
    SourceFilter.MEDIA: "전문매체",
    SourceFilter.REPORTER: "기자",
    SourceFilter.RUMOR: "루머",
}


class NewsItem(BaseModel):
    """新闻条目 (已补全默认值, 加载后不可变)

    API 输出使用与 news.json 相同的驼峰字段名 (pubDate, sourceClass, cardType)
    """
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str = Field(default="", description="新闻ID (统一为字符串)")
    title: str = Field(default="", description="新闻标题")
    summary: str = Field(default="", description="新闻摘要")
    image: Optional[str] = Field(default=None, description="图片URL")
    source: Optional[str] = Field(default=None, description="发布方")
    pub_date: Optional[str] = Field(default=None, description="原始发布时间字符串")
    tags: List[str] = Field(default_factory=list, description="分类标签")
    source_class: str = Field(default=DEFAULT_SOURCE_CLASS, description="来源类别")
    card_type: CardType = Field(default=CardType.SHORT, description="卡片布局")
    timestamp: float = Field(default=0.0, description="发布时间戳, 无法解析时为0")


def parse_pub_date(value: Optional[str]) -> Optional[datetime]:
    """解析发布时间

    支持 ISO 8601 (含 Z 后缀) 与 RFC 2822 (RSS) 格式。
    不带时区的时间按 UTC 处理。

    Returns:
        带时区的 datetime, 无法解析时返回 None
    """
    if not value or not isinstance(value, str):
        return None
    text = value.strip()
    dt = None
    try:
        dt = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except (ValueError, OverflowError):
        try:
            dt = parsedate_to_datetime(text)
        except (TypeError, ValueError, IndexError, OverflowError):
            return None
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return str(value)


def _item_id(value: Any) -> str:
    # 1 与 "1" 视为同一ID; JSON 中的 1.0 也按 "1" 处理
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def normalize_item(raw: dict) -> NewsItem:
    """原始JSON对象 -> 补全默认值的 NewsItem

    所有可选字段在这里统一补默认值, 下游不再重复判断。
    """
    tags = raw.get("tags")
    if not isinstance(tags, list):
        tags = []

    source_class = raw.get("sourceClass")
    if not isinstance(source_class, str) or not source_class:
        source_class = DEFAULT_SOURCE_CLASS

    try:
        card_type = CardType(raw.get("cardType") or CardType.SHORT.value)
    except ValueError:
        card_type = CardType.SHORT

    pub_date = _text(raw.get("pubDate")) or None
    parsed = parse_pub_date(pub_date)

    return NewsItem(
        id=_item_id(raw.get("id")),
        title=_text(raw.get("title")) or "",
        summary=_text(raw.get("summary")) or "",
        image=_text(raw.get("image")) or None,
        source=_text(raw.get("source")) or None,
        pub_date=pub_date,
        tags=[t for t in tags if isinstance(t, str)],
        source_class=source_class,
        card_type=card_type,
        timestamp=parsed.timestamp() if parsed else 0.0,
    )


def normalize_items(data: Any) -> List[NewsItem]:
    """规范化整个集合, 非数组返回空列表, 非对象条目跳过"""
    if not isinstance(data, list):
        return []
    items = []
    for index, raw in enumerate(data):
        if not isinstance(raw, dict):
            logger.warning("Skipping news entry %d: expected object, got %s",
                           index, type(raw).__name__)
            continue
        items.append(normalize_item(raw))
    return items
