"""
日期与元信息格式化
"""
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
from ..config import get_config
from ..models.news import NewsItem, parse_pub_date


def _display_zone(tz_name: Optional[str]) -> ZoneInfo:
    name = tz_name or get_config().display.timezone
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return ZoneInfo("UTC")


def format_date(value: Optional[str], tz_name: Optional[str] = None) -> str:
    """韩文短日期格式, 如 "6월 1일 오전 09:00"

    Args:
        value: 原始发布时间字符串
        tz_name: 显示时区, 默认取配置

    Returns:
        为空时返回空串, 无法解析时原样返回
    """
    if not value:
        return ""
    dt = parse_pub_date(value)
    if dt is None:
        return value
    try:
        local = dt.astimezone(_display_zone(tz_name))
    except (OverflowError, ValueError):
        # 换算到显示时区后超出 datetime 范围
        return value
    meridiem = "오전" if local.hour < 12 else "오후"
    hour = local.hour % 12 or 12
    return f"{local.month}월 {local.day}일 {meridiem} {hour:02d}:{local.minute:02d}"


def meta_line(item: NewsItem, tz_name: Optional[str] = None) -> str:
    """来源 · 日期"""
    parts = []
    if item.source:
        parts.append(item.source)
    date_text = format_date(item.pub_date, tz_name)
    if date_text:
        parts.append(date_text)
    return " · ".join(parts)
