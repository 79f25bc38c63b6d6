import collections.abc
from typing import Any, Dict, List, Optional, Tuple, Union, get_args, get_origin

from pydantic import BaseModel, Field

from .hydrate import convert_values, get_field, load_source


def _unwrap_optional(annotation: Any) -> Any:
    if get_origin(annotation) is Union:
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _is_binding(annotation: Any) -> bool:
    return (
        get_origin(annotation) is None
        and isinstance(annotation, type)
        and issubclass(annotation, BindingModel)
    )


def _resolve_target(annotation: Any) -> Tuple[Optional[type], bool, bool]:
    """
    根据字段声明确定转换方式

    Returns:
        (目标模型, 是否 as_map, 是否单个记录)
    """
    annotation = _unwrap_optional(annotation)
    if _is_binding(annotation):
        return annotation, False, True

    origin = get_origin(annotation)
    args = get_args(annotation)
    if origin in (list, tuple) and args:
        item = _unwrap_optional(args[0])
        if _is_binding(item):
            return item, False, False
    if origin in (dict, collections.abc.Mapping) and len(args) == 2:
        item = _unwrap_optional(args[1])
        if _is_binding(item):
            return item, True, False
    return None, False, False


class BindingModel(BaseModel):
    """
    前端绑定模型基类

    只做结构映射：按字段的 JSON 键名逐个取值，嵌套模型字段交给
    convert_values 转换。不校验类型，缺失字段为 None，多余字段丢弃。
    """

    def __init__(self, source: Any = None, /, **data: Any) -> None:
        if source is None and data:
            source = data
        # 先解析，解析失败时不会赋值任何字段
        values = self._hydrate(load_source(source))
        super().__init__()
        for name, value in values.items():
            setattr(self, name, value)

    @classmethod
    def create_from(cls, source: Any = None) -> "BindingModel":
        """从 JSON 字符串或已解码对象创建实例"""
        return cls(source)

    @classmethod
    def _hydrate(cls, source: Any) -> Dict[str, Any]:
        values: Dict[str, Any] = {}
        for name, info in cls.model_fields.items():
            raw = get_field(source, info.alias or name)
            target, as_map, is_record = _resolve_target(info.annotation)
            if is_record and raw is None:
                raw = {}
            values[name] = convert_values(raw, target, as_map=as_map)
        return values

    def to_wire(self) -> Dict[str, Any]:
        """按 JSON 键名导出"""
        return self.model_dump(by_alias=True, warnings=False)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, warnings=False)


class AccountConfig(BindingModel):
    """校园网账号"""
    student_id: Optional[str] = Field(None, alias="StudentID", description="学号")
    carrier: Optional[str] = Field(None, alias="Carrier", description="运营商")
    password: Optional[str] = Field(
        None, alias="Password", description="密码", repr=False
    )


class PortalConfig(BindingModel):
    """认证网关配置"""
    login_url: Optional[str] = Field(None, alias="LoginURL", description="登录地址")
    method: Optional[str] = Field(None, alias="Method", description="请求方法")
    form: Optional[Dict[str, str]] = Field(None, alias="Form", description="登录表单")
    logout_form: Optional[Dict[str, str]] = Field(
        None, alias="LogoutForm", description="注销表单"
    )
    headers: Optional[Dict[str, str]] = Field(None, alias="Headers", description="请求头")
    success_keywords: Optional[List[str]] = Field(
        None, alias="SuccessKeywords", description="登录成功关键字"
    )


class UIConfig(BindingModel):
    """界面尺寸"""
    width: Optional[int] = Field(None, alias="Width")
    height: Optional[int] = Field(None, alias="Height")


class Config(BindingModel):
    """
    主配置

    顶层的行为开关沿用后端的 snake_case 键名，其余字段为 PascalCase，
    两者都必须与后端输出保持一致。
    """
    wifi_ssid: Optional[str] = Field(None, alias="WifiSSID", description="目标 Wi-Fi")
    check_url: Optional[str] = Field(None, alias="CheckURL", description="联网检测地址")
    account: Optional[AccountConfig] = Field(None, alias="Account")
    portal: Optional[PortalConfig] = Field(None, alias="Portal")
    ui: Optional[UIConfig] = Field(None, alias="UI")

    auto_login_interval: Optional[int] = Field(
        None, alias="auto_login_interval", description="自动登录间隔(秒)"
    )
    login_mode: Optional[str] = Field(None, alias="login_mode", description="登录模式")
    auto_start: Optional[bool] = Field(None, alias="auto_start", description="开机自启")
    open_settings_on_run: Optional[bool] = Field(
        None, alias="open_settings_on_run", description="启动时打开设置"
    )

    window_x: Optional[int] = Field(None, alias="WindowX")
    window_y: Optional[int] = Field(None, alias="WindowY")
    window_w: Optional[int] = Field(None, alias="WindowW")
    window_h: Optional[int] = Field(None, alias="WindowH")


class Status(BindingModel):
    """联网状态快照"""
    online: Optional[bool] = Field(None, alias="online", description="是否在线")
    message: Optional[str] = Field(None, alias="message", description="状态说明")
    # 时间戳原样保留，不转换为 datetime
    last_check: Any = Field(None, alias="last_check", description="最近检测时间")
