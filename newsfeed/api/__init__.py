"""
API路由模块
"""
from .news import router as news_router
from .pages import router as pages_router

__all__ = ['news_router', 'pages_router']
