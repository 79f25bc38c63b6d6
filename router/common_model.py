from typing import Generic, Optional, TypeVar
from pydantic import BaseModel, Field

T = TypeVar("T")


class BaseResponse(BaseModel, Generic[T]):
    """通用响应模型基类"""

    code: int = Field(200, description="状态码")
    message: str = Field("成功", description="提示信息")
    data: Optional[T] = Field(None, description="响应数据")

    @classmethod
    def success(cls, data: T, message: str = "获取成功") -> "BaseResponse[T]":
        """创建成功响应"""
        return cls(code=200, message=message, data=data)

    @classmethod
    def error(
        cls, message: str = "请求失败", code: int = 500, data: Optional[T] = None
    ) -> "BaseResponse[T]":
        """创建错误响应"""
        return cls(code=code, message=message, data=data)


class ErrorResponse(BaseResponse[None]):
    """专用错误响应模型"""

    def __init__(self, message: str = "请求失败，请稍后重试", code: int = 500):
        super().__init__(code=code, message=message, data=None)
