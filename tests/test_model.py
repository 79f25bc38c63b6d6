import json
from typing import Dict, List, Optional

import pytest
from pydantic import Field

from bindings import AccountConfig, BindingModel, Config, ParseError, PortalConfig, Status, UIConfig


FULL_CONFIG = {
    "WifiSSID": "CUMT_Stu",
    "CheckURL": "http://www.msftconnecttest.com/connecttest.txt",
    "Account": {"StudentID": "2021001", "Carrier": "cmcc", "Password": "pw"},
    "Portal": {
        "LoginURL": "http://10.2.5.251:801/eportal/",
        "Method": "GET",
        "Form": {"c": "Portal", "a": "login"},
        "LogoutForm": {"c": "Portal", "a": "logout"},
        "Headers": {"Referer": "http://10.2.5.251/"},
        "SuccessKeywords": ["认证成功", "\"result\":\"1\""],
    },
    "UI": {"Width": 720, "Height": 520},
    "auto_login_interval": 15,
    "login_mode": "operator_id",
    "auto_start": True,
    "open_settings_on_run": False,
    "WindowX": 100,
    "WindowY": 80,
    "WindowW": 620,
    "WindowH": 440,
}


def test_account_scenario():
    account = AccountConfig.create_from({"StudentID": "2021001", "Carrier": "CMCC", "Password": "pw"})
    assert account.student_id == "2021001"
    assert account.carrier == "CMCC"
    assert account.password == "pw"


def test_both_construction_paths_agree():
    raw = json.dumps(FULL_CONFIG)
    assert Config.create_from(raw) == Config(raw)
    assert Config.create_from(FULL_CONFIG) == Config(FULL_CONFIG)


def test_keyword_source_uses_wire_keys():
    account = AccountConfig(StudentID="1", Carrier="cu")
    assert account.student_id == "1"
    assert account.carrier == "cu"
    assert account.password is None


def test_empty_config_builds_default_sub_records():
    config = Config.create_from({})
    assert config.account == AccountConfig({})
    assert config.portal == PortalConfig({})
    assert config.ui == UIConfig({})
    assert config.account.student_id is None
    assert config.portal.form is None
    assert config.wifi_ssid is None
    assert config.auto_login_interval is None
    assert config.open_settings_on_run is None
    assert config.window_x is None


def test_omitted_source_is_empty_object():
    assert Config() == Config.create_from({})
    assert Status().online is None


def test_null_sub_record_builds_default():
    config = Config({"Account": None})
    assert config.account == AccountConfig({})


@pytest.mark.parametrize("model", [AccountConfig, PortalConfig, UIConfig, Config, Status])
def test_malformed_string_raises_parse_error(model):
    with pytest.raises(ParseError):
        model("not json")
    with pytest.raises(ParseError):
        model.create_from("not json")


def test_status_scenario():
    status = Status.create_from({"online": True, "message": "connected", "last_check": "2024-01-01T00:00:00Z"})
    assert status.online is True
    assert status.message == "connected"
    assert status.last_check == "2024-01-01T00:00:00Z"
    assert isinstance(status.last_check, str)


def test_status_last_check_object_is_kept():
    stamp = {"sec": 1, "nsec": 2}
    status = Status({"last_check": stamp})
    assert status.last_check is stamp


def test_round_trip_keeps_declared_fields_and_drops_extras():
    raw = dict(FULL_CONFIG, Extra="dropped")
    raw["Account"] = dict(FULL_CONFIG["Account"], Nickname="dropped")

    wire = Config.create_from(json.dumps(raw)).to_wire()

    assert wire == FULL_CONFIG
    assert "Extra" not in wire
    assert "Nickname" not in wire["Account"]


def test_to_json_uses_wire_keys():
    data = json.loads(Config(FULL_CONFIG).to_json())
    assert data == FULL_CONFIG


def test_wire_keys_are_case_sensitive():
    account = AccountConfig({"studentId": "1", "student_id": "2"})
    assert account.student_id is None


def test_idempotent_rebuild():
    config = Config(FULL_CONFIG)
    assert Config(config.to_wire()) == config
    account = config.account
    assert AccountConfig(account.to_wire()) == account


def test_wrong_types_pass_through():
    config = Config({"WindowX": "left", "auto_start": "yes", "UI": {"Width": "wide"}})
    assert config.window_x == "left"
    assert config.auto_start == "yes"
    assert config.ui.width == "wide"


def test_non_object_source_gives_absent_fields():
    account = AccountConfig("[1, 2]")
    assert account.student_id is None
    assert account.carrier is None


def test_sub_records_are_owned_per_instance():
    first = Config(json.dumps(FULL_CONFIG))
    second = Config(json.dumps(FULL_CONFIG))
    first.portal.form["extra"] = "x"
    assert "extra" not in second.portal.form


class Campus(BindingModel):
    name: Optional[str] = Field(None, alias="Name")
    accounts: Optional[List[AccountConfig]] = Field(None, alias="Accounts")
    by_carrier: Optional[Dict[str, AccountConfig]] = Field(None, alias="ByCarrier")


def test_sequence_and_map_fields():
    campus = Campus(
        {
            "Name": "Nanhu",
            "Accounts": [{"StudentID": "1"}, {"StudentID": "2"}],
            "ByCarrier": {"cmcc": {"StudentID": "3"}},
        }
    )
    assert [a.student_id for a in campus.accounts] == ["1", "2"]
    assert campus.by_carrier["cmcc"] == AccountConfig({"StudentID": "3"})


def test_absent_collection_fields_stay_none():
    campus = Campus({})
    assert campus.accounts is None
    assert campus.by_carrier is None


def test_rebuilding_from_instance_keeps_fields():
    account = AccountConfig({"StudentID": "1", "Carrier": "cmcc", "Password": "pw"})
    rebuilt = AccountConfig(account)
    assert rebuilt == account
    assert rebuilt.to_wire() == {"StudentID": "1", "Carrier": "cmcc", "Password": "pw"}


def test_create_from_instance_keeps_nested_records():
    config = Config(FULL_CONFIG)
    rebuilt = Config.create_from(config)
    assert rebuilt == config
    assert rebuilt.to_wire() == FULL_CONFIG


def test_rebuilt_instance_does_not_share_sub_records():
    config = Config(FULL_CONFIG)
    rebuilt = Config(config)
    rebuilt.portal.form["extra"] = "x"
    assert "extra" not in config.portal.form
