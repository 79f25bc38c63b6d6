from typing import Any, Dict

from router.common_model import BaseResponse


# 数据均为后端 JSON 键名格式
class ConfigResponse(BaseResponse[Dict[str, Any]]):
    """登录配置响应"""

    pass


class PortalResponse(BaseResponse[Dict[str, Any]]):
    """网关配置响应（已填入账号字段）"""

    pass
