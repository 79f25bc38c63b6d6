import sys
from pathlib import Path
from richuru import install
from loguru import logger

from .manager import config_manager


def setup_logger():
    """根据设置文件配置loguru日志"""
    install()
    settings = config_manager.get_settings()
    log_config = settings.log

    logger.remove()

    log_dir = Path(log_config.file_path).parent
    log_dir.mkdir(parents=True, exist_ok=True)

    if log_config.console_output:
        logger.add(
            sys.stderr,
            format=log_config.format,
            level=log_config.level.value,
            backtrace=log_config.backtrace,
            diagnose=log_config.diagnose,
        )

    logger.add(
        log_config.file_path,
        format=log_config.format,
        level=log_config.level.value,
        rotation=log_config.rotation,
        retention=log_config.retention,
        compression=log_config.compression,
        backtrace=log_config.backtrace,
        diagnose=log_config.diagnose,
        encoding="utf-8",
    )

    for extra_logger in log_config.additional_loggers:
        extra_log_dir = Path(extra_logger["file_path"]).parent
        extra_log_dir.mkdir(parents=True, exist_ok=True)

        logger.add(
            extra_logger["file_path"],
            format=log_config.format,
            level=extra_logger.get("level", log_config.level.value),
            rotation=extra_logger.get("rotation", log_config.rotation),
            retention=extra_logger.get("retention", log_config.retention),
            compression=extra_logger.get("compression", log_config.compression),
            backtrace=log_config.backtrace,
            diagnose=log_config.diagnose,
            encoding="utf-8",
        )

    logger.info("日志系统初始化完成")
