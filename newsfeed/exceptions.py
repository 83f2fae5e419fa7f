"""
异常定义
"""


class NewsLoadError(Exception):
    """静态新闻数据无法获取或解析"""
