from typing import Any, Dict

from fastapi import Body, Depends
from fastapi.routing import APIRouter
from loguru import logger

from bindings import Status
from router.common_model import ErrorResponse
from utils.status_board import StatusBoard, get_status_board
from .model import StatusResponse

status_router = APIRouter(prefix="/api/v1/status")


@status_router.get("", summary="获取联网状态", response_model=StatusResponse)
async def fetch_status(board: StatusBoard = Depends(get_status_board)):
    """返回最近一次检测的状态快照"""
    return StatusResponse.success(data=board.snapshot().to_wire(), message="状态获取成功")


@status_router.post("", summary="上报联网状态", response_model=StatusResponse)
async def publish_status(
    payload: Dict[str, Any] = Body(...),
    board: StatusBoard = Depends(get_status_board),
):
    """
    由外部检测程序上报新的状态快照
    :param payload: online / message / last_check
    :return: StatusResponse
    """
    try:
        status = board.publish(Status.create_from(payload))
        return StatusResponse.success(data=status.to_wire(), message="状态已更新")
    except Exception as e:
        logger.error(f"更新状态失败: {e}")
        return ErrorResponse(message=f"更新状态时发生错误：{str(e)}", code=500)
