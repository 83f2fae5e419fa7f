"""
新闻浏览: 静态新闻数据的列表 (分类/来源筛选, 无限滚动) 与详情视图
"""
__version__ = "1.0.0"
