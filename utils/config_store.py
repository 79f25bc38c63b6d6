import asyncio
import json
from pathlib import Path
from typing import Any, Mapping, Optional

import aiofiles
from loguru import logger

from bindings import AccountConfig, Config, ParseError, PortalConfig, UIConfig
from config import config_manager
from utils.portal_form import LoginMode

DEFAULT_CHECK_URL = "http://www.msftconnecttest.com/connecttest.txt"
DEFAULT_METHOD = "GET"
DEFAULT_UI_WIDTH = 720
DEFAULT_UI_HEIGHT = 520
DEFAULT_WINDOW_WIDTH = 620
DEFAULT_WINDOW_HEIGHT = 440
MIN_WINDOW_SIZE = 300
DEFAULT_INTERVAL = 10


def _positive(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def apply_defaults(config: Config, raw: Optional[Mapping[str, Any]] = None) -> Config:
    """
    补全后端默认值

    Args:
        config: 已转换的配置，会被就地修改
        raw: 解码后的原始对象，用于判断键是否存在

    Returns:
        Config: 同一个实例
    """
    raw = raw if isinstance(raw, Mapping) else {}

    if not config.check_url:
        config.check_url = DEFAULT_CHECK_URL

    _ensure_records(config)
    if not config.portal.method:
        config.portal.method = DEFAULT_METHOD
    if not isinstance(config.portal.form, dict):
        config.portal.form = {}
    if not isinstance(config.portal.logout_form, dict):
        config.portal.logout_form = {}

    if not _positive(config.ui.width):
        config.ui.width = DEFAULT_UI_WIDTH
    if not _positive(config.ui.height):
        config.ui.height = DEFAULT_UI_HEIGHT

    if not _positive(config.window_w) or config.window_w < MIN_WINDOW_SIZE:
        config.window_w = DEFAULT_WINDOW_WIDTH
    if not _positive(config.window_h) or config.window_h < MIN_WINDOW_SIZE:
        config.window_h = DEFAULT_WINDOW_HEIGHT
    # 未保存过窗口位置时用 -1 表示居中
    if raw.get("WindowX") is None:
        config.window_x = -1
    if raw.get("WindowY") is None:
        config.window_y = -1

    _apply_behaviour_defaults(config)
    if raw.get("open_settings_on_run") is None:
        config.open_settings_on_run = True
    return config


def _ensure_records(config: Config) -> None:
    # 类型不对的子配置（如 "Portal": []）换成默认实例
    if not isinstance(config.account, AccountConfig):
        config.account = AccountConfig()
    if not isinstance(config.portal, PortalConfig):
        config.portal = PortalConfig()
    if not isinstance(config.ui, UIConfig):
        config.ui = UIConfig()


def _apply_behaviour_defaults(config: Config) -> None:
    if not _positive(config.auto_login_interval):
        config.auto_login_interval = DEFAULT_INTERVAL
    if not config.login_mode:
        config.login_mode = LoginMode.OPERATOR_ID.value


class PortalConfigStore:
    """登录配置文件的读取与保存"""

    def __init__(self, path: str = "config.json"):
        self.path = Path(path)
        self._lock = asyncio.Lock()

    async def load(self) -> Config:
        """读取配置并补全默认值，文件不存在时创建默认配置"""
        if not self.path.exists():
            logger.warning(f"登录配置文件 {self.path} 不存在，将创建默认配置")
            config = apply_defaults(Config())
            await self.save(config)
            return config

        async with aiofiles.open(self.path, "r", encoding="utf-8") as f:
            content = await f.read()

        try:
            raw = json.loads(content)
        except ParseError as e:
            logger.error(f"登录配置文件JSON格式错误: {e}")
            raise

        config = apply_defaults(Config.create_from(raw), raw)
        logger.debug(f"已加载登录配置: {self.path}")
        return config

    async def save(self, config: Config) -> Config:
        """保存配置，返回写入的配置"""
        _ensure_records(config)
        _apply_behaviour_defaults(config)
        payload = json.dumps(config.to_wire(), indent=2, ensure_ascii=False)

        async with self._lock:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(self.path, "w", encoding="utf-8") as f:
                await f.write(payload)
        logger.info(f"登录配置已保存到 {self.path}")
        return config


_config_store: Optional[PortalConfigStore] = None


def get_config_store() -> PortalConfigStore:
    """获取全局登录配置存储（FastAPI 依赖）"""
    global _config_store
    if _config_store is None:
        _config_store = PortalConfigStore(config_manager.get_settings().store.config_path)
    return _config_store
