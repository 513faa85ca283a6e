import pytest

from tfcli.terraform import Terraform
from tfcli.versions import VersionMismatchError
from tfcli.workspaces import (
    parse_workspace_list,
    workspace_delete_command,
    workspace_list_command,
    workspace_new_command,
    workspace_select_command,
    workspace_show_command,
)

EXEC = "/opt/terraform/terraform"


def make_tf(tmp_path, version="1.2.0"):
    tf = Terraform(tmp_path, EXEC, version)
    tf.set_env({})
    return tf


@pytest.fixture
def tf(tmp_path):
    return make_tf(tmp_path)


@pytest.mark.parametrize(
    "expected, current, stdout",
    [
        (["default"], "default", "* default\n\n"),
        (["default", "foo", "bar"], "foo", "  default\n* foo\n  bar\n\n"),
        (["default", "foo"], "foo", "  default\n* foo\n\n"),
        (["default", "foo"], "foo", "  default\r\n* foo\r\n\r\n"),
    ],
)
def test_parse_workspace_list(expected, current, stdout):
    assert parse_workspace_list(stdout) == (expected, current)


def test_parse_workspace_list_no_current():
    assert parse_workspace_list("  a\n  b\n") == (["a", "b"], "")


def test_workspace_list_command(tf):
    assert workspace_list_command(tf).args == ["workspace", "list", "-no-color"]


def test_workspace_delete_defaults(tf):
    cmd = workspace_delete_command(tf, "workspace-name")
    assert cmd.args == ["workspace", "delete", "-no-color", "workspace-name"]


def test_workspace_delete_override(tf):
    cmd = workspace_delete_command(
        tf, "workspace-name", lock_timeout="200s", force=True, lock=False
    )
    assert cmd.args == [
        "workspace", "delete", "-no-color",
        "-force", "-lock-timeout=200s", "-lock=false", "workspace-name",
    ]


def test_workspace_delete_lock_needs_012(tmp_path):
    old = make_tf(tmp_path, "0.11.14")
    assert workspace_delete_command(old, "w").args[-1] == "w"
    with pytest.raises(VersionMismatchError, match="workspace delete"):
        workspace_delete_command(old, "w", lock=False)


def test_workspace_new_defaults(tf):
    cmd = workspace_new_command(tf, "workspace-name")
    assert cmd.args == ["workspace", "new", "-no-color", "workspace-name"]


def test_workspace_new_override(tf):
    cmd = workspace_new_command(
        tf, "workspace-name", lock_timeout="200s", copy_state="teststate", lock=False
    )
    assert cmd.args == [
        "workspace", "new", "-no-color",
        "-lock-timeout=200s", "-lock=false", "-state=teststate", "workspace-name",
    ]


def test_workspace_new_default_timeout_omitted(tf):
    cmd = workspace_new_command(tf, "w", lock_timeout="0s", lock=True)
    assert cmd.args == ["workspace", "new", "-no-color", "w"]


def test_workspace_new_lock_needs_012(tmp_path):
    old = make_tf(tmp_path, "0.11.14")
    with pytest.raises(VersionMismatchError):
        workspace_new_command(old, "w", lock_timeout="5s")


def test_workspace_select_command(tf):
    assert workspace_select_command(tf, "dev").args == ["workspace", "select", "-no-color", "dev"]


def test_workspace_show_command(tf):
    cmd = workspace_show_command(tf)
    assert cmd.args == ["workspace", "show", "-no-color"]
    assert cmd.env["TF_LOG"] == ""


def test_workspace_show_needs_010(tmp_path):
    with pytest.raises(VersionMismatchError, match="0.10.0"):
        workspace_show_command(make_tf(tmp_path, "0.9.11"))