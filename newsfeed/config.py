"""
新闻浏览 - 配置管理
"""
from pathlib import Path
from typing import Optional
import yaml
from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


# 项目根目录
PROJECT_ROOT = Path(__file__).parent.parent
CONFIG_FILE = PROJECT_ROOT / "config.yaml"
PUBLIC_DIR = PROJECT_ROOT / "public"


class FeedConfig(BaseModel):
    """新闻数据源配置"""
    # http(s) URL 或相对于 public_dir 的路径
    location: str = "news.json"
    public_dir: Path = PUBLIC_DIR
    page_size: int = 10
    timeout: float = 10.0


class DisplayConfig(BaseModel):
    """显示配置"""
    timezone: str = "Asia/Seoul"


class AppConfig(BaseSettings):
    """应用配置"""
    model_config = SettingsConfigDict(
        env_prefix="NEWSFEED_",
        env_nested_delimiter="__",
    )

    feed: FeedConfig = FeedConfig()
    display: DisplayConfig = DisplayConfig()
    log_level: str = "INFO"


def load_config(path: Optional[Path] = None) -> AppConfig:
    """加载配置文件

    config.yaml 中的字段优先; 未写入文件的字段读取 NEWSFEED_ 环境变量
    """
    path = path or CONFIG_FILE
    if path.exists():
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
        return AppConfig(**data)
    return AppConfig()


# 全局配置实例
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """获取配置实例"""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: Optional[AppConfig]):
    """替换配置实例 (传入 None 时下次重新加载)"""
    global _config
    _config = config
