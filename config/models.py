from typing import List, Dict, Any
from pydantic import BaseModel, Field
from enum import Enum


class LogLevel(str, Enum):
    """日志级别枚举"""
    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogConfig(BaseModel):
    """日志配置"""
    level: LogLevel = Field(default=LogLevel.INFO, description="日志级别")
    format: str = Field(
        default="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        description="日志格式"
    )
    file_path: str = Field(default="logs/autologin.log", description="日志文件路径")
    rotation: str = Field(default="5 MB", description="日志轮转大小")
    retention: str = Field(default="14 days", description="日志保留时间")
    compression: str = Field(default="zip", description="日志压缩格式")
    backtrace: bool = Field(default=True, description="是否启用回溯")
    diagnose: bool = Field(default=False, description="是否启用诊断")
    console_output: bool = Field(default=True, description="是否输出到控制台")

    # 额外的日志文件配置
    additional_loggers: List[Dict[str, Any]] = Field(
        default_factory=lambda: [
            {
                "file_path": "logs/error.log",
                "level": "ERROR",
                "rotation": "5 MB"
            }
        ],
        description="额外的日志记录器配置"
    )


class AppConfig(BaseModel):
    """应用程序配置"""
    title: str = Field(default="CUMT Autologin", description="应用标题")
    description: str = Field(default="校园网自动登录后端", description="应用描述")
    version: str = Field(default="1.0.0", description="应用版本")
    debug: bool = Field(default=False, description="是否启用调试模式")

    # CORS配置，前端页面由本地 WebView 加载
    cors_allow_origins: List[str] = Field(
        default_factory=lambda: ["*"],
        description="允许的CORS来源"
    )
    cors_allow_credentials: bool = Field(default=False, description="是否允许CORS凭据")
    cors_allow_methods: List[str] = Field(
        default_factory=lambda: ["GET", "PUT", "POST"],
        description="允许的CORS方法"
    )
    cors_allow_headers: List[str] = Field(
        default_factory=lambda: ["*"],
        description="允许的CORS头部"
    )

    # 服务器配置
    host: str = Field(default="127.0.0.1", description="服务器主机")
    port: int = Field(default=34115, description="服务器端口")


class StoreConfig(BaseModel):
    """登录配置与状态存储"""
    config_path: str = Field(default="config.json", description="登录配置文件路径")
    initial_message: str = Field(default="初始化中", description="首次检测前的状态说明")


class Settings(BaseModel):
    """主配置类"""
    log: LogConfig = Field(default_factory=LogConfig)
    app: AppConfig = Field(default_factory=AppConfig)
    store: StoreConfig = Field(default_factory=StoreConfig)
