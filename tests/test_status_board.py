from bindings import Status
from utils.status_board import StatusBoard


def test_initial_snapshot():
    board = StatusBoard("初始化中")
    status = board.snapshot()
    assert status.online is False
    assert status.message == "初始化中"
    assert isinstance(status.last_check, str)


def test_update_replaces_snapshot():
    board = StatusBoard()
    first = board.snapshot()
    status = board.update(True, "在线", "2024-01-01T00:00:00Z")
    assert board.snapshot() == status
    assert status != first
    assert status.to_wire() == {"online": True, "message": "在线", "last_check": "2024-01-01T00:00:00Z"}


def test_update_defaults_last_check():
    board = StatusBoard()
    status = board.update(False, "离线，等待重试")
    assert status.last_check


def test_publish_keeps_given_status():
    board = StatusBoard()
    status = Status({"online": True, "message": "登录成功", "last_check": "2024-01-01T00:00:00Z"})
    assert board.publish(status) is status
    assert board.snapshot() == status


def test_snapshot_changes_do_not_leak_into_board():
    board = StatusBoard()
    board.update(True, "在线", "2024-01-01T00:00:00Z")
    snapshot = board.snapshot()
    snapshot.online = False
    snapshot.message = "改过"
    current = board.snapshot()
    assert current.online is True
    assert current.message == "在线"
