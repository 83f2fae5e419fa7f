"""
视图生命周期
"""
from contextlib import asynccontextmanager
from typing import Union
from .detail_view import NewsDetailView
from .list_view import NewsListView


@asynccontextmanager
async def mounted(view: Union[NewsListView, NewsDetailView]):
    """挂载视图并等待加载完成, 退出时卸载"""
    view.mount()
    try:
        await view.loaded()
        yield view
    finally:
        view.unmount()
