from typing import Any, Dict

from router.common_model import BaseResponse


class StatusResponse(BaseResponse[Dict[str, Any]]):
    """联网状态响应"""

    pass
