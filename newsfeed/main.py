"""
新闻浏览 - FastAPI入口
"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional
from fastapi import FastAPI
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles

from .config import AppConfig, get_config, set_config
from .api import news_router, pages_router


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    config = get_config()
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Serving news from %s", config.feed.location)
    yield


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    """创建应用; 传入 config 时替换全局配置"""
    if config is not None:
        set_config(config)
    config = get_config()

    app = FastAPI(
        title="뉴스",
        description="静态新闻数据的列表与详情浏览",
        version="1.0.0",
        lifespan=lifespan
    )

    app.include_router(news_router)
    app.include_router(pages_router)

    @app.get("/", include_in_schema=False)
    async def index():
        """首页"""
        return RedirectResponse(url="/news")

    @app.get("/health")
    async def health_check():
        """健康检查"""
        return {"status": "healthy"}

    # 静态资源 (news.json 等), 必须最后挂载
    public_dir = Path(config.feed.public_dir)
    if public_dir.exists():
        app.mount("/", StaticFiles(directory=str(public_dir)), name="public")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
