import threading
from datetime import datetime, timezone
from typing import Any, Optional

from loguru import logger

from bindings import Status
from config import config_manager


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class StatusBoard:
    """保存最近一次联网状态，每次检测整体替换，不保留历史"""

    def __init__(self, initial_message: str = "初始化中"):
        self._lock = threading.Lock()
        self._status = Status(online=False, message=initial_message, last_check=_now())

    def snapshot(self) -> Status:
        """返回当前状态的副本"""
        with self._lock:
            return self._status.model_copy()

    def publish(self, status: Status) -> Status:
        """用外部检测得到的快照替换当前状态"""
        with self._lock:
            self._status = status
        logger.debug(f"状态更新: online={status.online} message={status.message}")
        return status

    def update(
        self, online: bool, message: str, last_check: Optional[Any] = None
    ) -> Status:
        """生成新的状态快照，last_check 默认为当前时间"""
        status = Status(
            online=online,
            message=message,
            last_check=last_check if last_check is not None else _now(),
        )
        return self.publish(status)


_status_board: Optional[StatusBoard] = None


def get_status_board() -> StatusBoard:
    """获取全局状态板（FastAPI 依赖）"""
    global _status_board
    if _status_board is None:
        _status_board = StatusBoard(config_manager.get_settings().store.initial_message)
    return _status_board
