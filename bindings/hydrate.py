import json
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel

JsonValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]

# JSON 解析错误直接向上抛出，不做转换
ParseError = json.JSONDecodeError


class JsonKind(str, Enum):
    """JSON 值类型"""
    NULL = "null"
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    OBJECT = "object"


def json_kind(value: Any) -> JsonKind:
    """按值本身的 JSON 类型分类，已构造好的模型实例视为标量"""
    if value is None:
        return JsonKind.NULL
    if isinstance(value, (list, tuple)):
        return JsonKind.SEQUENCE
    if isinstance(value, Mapping):
        return JsonKind.OBJECT
    return JsonKind.SCALAR


def load_source(source: Any) -> Any:
    """
    将原始输入转换为已解码的 JSON 值

    Args:
        source: JSON 字符串、bytes 或已解码的对象，None 视为空对象；
            已构造好的模型按 JSON 键名导出后再读取

    Returns:
        已解码的 JSON 值

    Raises:
        ParseError: 字符串不是合法 JSON
    """
    if source is None:
        return {}
    if isinstance(source, (str, bytes, bytearray)):
        return json.loads(source)
    if isinstance(source, BaseModel):
        return source.model_dump(by_alias=True, warnings=False)
    return source


def get_field(source: Any, key: str) -> JsonValue:
    """按键名直接取值，键不存在或源不是对象时返回 None"""
    if isinstance(source, Mapping):
        return source.get(key)
    return None


def convert_values(
    value: Any,
    target: Optional[Callable[[Any], Any]],
    *,
    as_map: bool = False,
) -> Any:
    """
    将未类型化的 JSON 值转换为目标模型

    - 空值或未指定目标类型：原样返回
    - 数组：逐个元素递归转换，保持顺序和长度
    - 对象：构造单个目标实例；as_map 为 True 时就地替换对象中的每个值
    - 标量：原样返回

    Args:
        value: 已解码的 JSON 值
        target: 目标模型构造器
        as_map: 是否将对象视为 键 -> 模型 的映射（由调用处显式指定）

    Returns:
        转换后的值
    """
    kind = json_kind(value)
    if kind is JsonKind.NULL or target is None:
        return value

    if kind is JsonKind.SEQUENCE:
        return [convert_values(item, target) for item in value]

    if kind is JsonKind.OBJECT:
        if as_map:
            # 就地修改，调用方不能假设传入的映射保持不变
            for key in list(value.keys()):
                value[key] = target(value[key])
            return value
        return target(value)

    return value
