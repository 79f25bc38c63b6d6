from .hydrate import JsonKind, ParseError, convert_values, get_field, json_kind, load_source
from .model import AccountConfig, BindingModel, Config, PortalConfig, Status, UIConfig

__all__ = [
    "JsonKind",
    "ParseError",
    "convert_values",
    "get_field",
    "json_kind",
    "load_source",
    "BindingModel",
    "AccountConfig",
    "PortalConfig",
    "UIConfig",
    "Config",
    "Status",
]
