from .portal_form import LoginMode, carrier_suffix, prepare_portal_config
from .config_store import PortalConfigStore, apply_defaults, get_config_store
from .status_board import StatusBoard, get_status_board

__all__ = [
    "LoginMode",
    "carrier_suffix",
    "prepare_portal_config",
    "PortalConfigStore",
    "apply_defaults",
    "get_config_store",
    "StatusBoard",
    "get_status_board",
]
