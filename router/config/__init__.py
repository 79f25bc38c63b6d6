from typing import Any, Dict

from fastapi import Body, Depends
from fastapi.routing import APIRouter
from loguru import logger

from bindings import Config
from router.common_model import ErrorResponse
from utils.config_store import PortalConfigStore, get_config_store
from utils.portal_form import prepare_portal_config
from .model import ConfigResponse, PortalResponse

config_router = APIRouter(prefix="/api/v1/config")


@config_router.get("", summary="获取登录配置", response_model=ConfigResponse)
async def fetch_config(store: PortalConfigStore = Depends(get_config_store)):
    """读取登录配置"""
    try:
        config = await store.load()
        return ConfigResponse.success(data=config.to_wire(), message="配置获取成功")
    except Exception as e:
        logger.error(f"读取登录配置失败: {e}")
        return ErrorResponse(message=f"读取登录配置时发生错误：{str(e)}", code=500)


@config_router.put("", summary="保存登录配置", response_model=ConfigResponse)
async def save_config(
    payload: Dict[str, Any] = Body(...),
    store: PortalConfigStore = Depends(get_config_store),
):
    """
    保存登录配置
    :param payload: 后端 JSON 键名格式的配置
    :return: ConfigResponse
    """
    try:
        config = await store.save(Config.create_from(payload))
        return ConfigResponse.success(data=config.to_wire(), message="配置已保存")
    except Exception as e:
        logger.error(f"保存登录配置失败: {e}")
        return ErrorResponse(message=f"保存登录配置时发生错误：{str(e)}", code=500)


@config_router.get("/portal", summary="获取网关登录参数", response_model=PortalResponse)
async def fetch_portal(store: PortalConfigStore = Depends(get_config_store)):
    """返回填好账号密码的网关配置"""
    try:
        config = await store.load()
        portal = prepare_portal_config(config)
        return PortalResponse.success(data=portal.to_wire(), message="网关参数获取成功")
    except Exception as e:
        logger.error(f"生成网关参数失败: {e}")
        return ErrorResponse(message=f"生成网关参数时发生错误：{str(e)}", code=500)
