from enum import Enum
from typing import Optional

from bindings import AccountConfig, Config, PortalConfig


class LoginMode(str, Enum):
    """登录模式"""
    OPERATOR_ID = "operator_id"  # 学号 + 运营商后缀
    CAMPUS_ONLY = "campus_only"  # 仅校园网，不加后缀


_CARRIER_SUFFIXES = {
    "none": "",
    "": "",
    "telecom": "@telecom",
    "ct": "@telecom",
    "dx": "@telecom",
    "unicom": "@unicom",
    "cu": "@unicom",
    "lt": "@unicom",
    "cmcc": "@cmcc",
    "mobile": "@cmcc",
    "yd": "@cmcc",
}


def carrier_suffix(carrier: Optional[str]) -> str:
    """运营商对应的账号后缀，未知运营商按电信处理"""
    if carrier is None:
        return ""
    return _CARRIER_SUFFIXES.get(carrier.lower(), "@telecom")


def prepare_portal_config(config: Config) -> PortalConfig:
    """
    生成带账号字段的网关配置副本

    Args:
        config: 主配置，不会被修改

    Returns:
        PortalConfig: Form 中已填入 user_account 与 user_password
    """
    portal = (
        config.portal.model_copy(deep=True)
        if isinstance(config.portal, PortalConfig)
        else PortalConfig()
    )
    if not isinstance(portal.form, dict):
        portal.form = {}

    account = config.account if isinstance(config.account, AccountConfig) else None
    user_account = (account.student_id if account else None) or ""
    login_mode = (config.login_mode or "").lower()
    if login_mode != LoginMode.CAMPUS_ONLY.value:
        user_account += carrier_suffix(account.carrier if account else None)

    portal.form["user_account"] = user_account
    portal.form["user_password"] = (account.password if account else None) or ""
    return portal
