from contextlib import asynccontextmanager
from fastapi import FastAPI
from router.config import config_router
from router.status import status_router
from richuru import install
from fastapi.middleware.cors import CORSMiddleware as allow_origins
import uvicorn
# 导入配置管理器和日志设置
from config import config_manager
from config.logger import setup_logger
from loguru import logger
from utils.config_store import get_config_store
from utils.status_board import get_status_board

# 初始化日志系统
install()
setup_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not config_manager.validate_config():
        logger.error("设置文件验证失败，请检查设置")
        raise RuntimeError("设置文件验证失败")

    logger.info("应用程序启动中...")

    config = await get_config_store().load()
    logger.success(
        f"登录配置已加载: wifi={config.wifi_ssid!r} mode={config.login_mode} "
        f"interval={config.auto_login_interval}s"
    )
    status = get_status_board().snapshot()
    logger.info(f"初始状态: {status.message}")

    yield

    logger.info("应用程序已关闭")


app_config = config_manager.get_settings().app

app = FastAPI(
    lifespan=lifespan,
    title=app_config.title,
    description=app_config.description,
    version=app_config.version,
    debug=app_config.debug,
    docs_url=None if not app_config.debug else "/docs",
    redoc_url=None if not app_config.debug else "/redoc",
    openapi_url=None if not app_config.debug else "/openapi.json",
)

app.add_middleware(
    allow_origins,
    allow_origins=app_config.cors_allow_origins,
    allow_credentials=app_config.cors_allow_credentials,
    allow_methods=app_config.cors_allow_methods,
    allow_headers=app_config.cors_allow_headers,
)


@app.get("/")
async def root():
    return {"message": "CUMT Autologin"}

app.include_router(config_router)
app.include_router(status_router)

if __name__ == "__main__":
    uvicorn.run(app, host=app_config.host, port=app_config.port)
