"""Commands for the ``terraform workspace`` subcommands."""

from __future__ import annotations

from .versions import TF_0_10_0, TF_0_12_0, VersionMismatchError

CURRENT_WORKSPACE_PREFIX = "* "
DEFAULT_LOCK_TIMEOUT = "0s"


def _require(tf, min_inclusive, max_exclusive, reason):
    try:
        tf.compatible(min_inclusive, max_exclusive)
    except VersionMismatchError as err:
        raise VersionMismatchError(
            err.min_inclusive, err.max_exclusive, err.actual, reason=reason
        ) from err


def parse_workspace_list(stdout):
    """Return (workspaces, current) from ``terraform workspace list`` output."""
    current = ""
    workspaces = []
    for line in stdout.split("\n"):
        line = line.strip()
        if not line:
            continue
        if line.startswith(CURRENT_WORKSPACE_PREFIX):
            line = line[len(CURRENT_WORKSPACE_PREFIX):]
            current = line
        workspaces.append(line)
    return workspaces, current


def workspace_list_command(tf):
    return tf.build_command(["workspace", "list", "-no-color"])


def _lock_args(lock, lock_timeout):
    args = []
    if lock_timeout and lock_timeout != DEFAULT_LOCK_TIMEOUT:
        args.append(f"-lock-timeout={lock_timeout}")
    if lock is False:
        args.append("-lock=false")
    return args


def workspace_delete_command(tf, workspace, *, lock=None, lock_timeout=None, force=False):
    """Build ``terraform workspace delete``; lock options need Terraform 0.12."""
    if lock is not None or lock_timeout is not None:
        _require(
            tf,
            TF_0_12_0,
            None,
            "-lock and -lock-timeout were added to workspace delete in Terraform 0.12",
        )
    args = ["workspace", "delete", "-no-color"]
    if force:
        args.append("-force")
    args.extend(_lock_args(lock, lock_timeout))
    args.append(workspace)
    return tf.build_command(args)


def workspace_new_command(tf, workspace, *, lock=None, lock_timeout=None, copy_state=""):
    """Build ``terraform workspace new``; lock options need Terraform 0.12."""
    if lock is not None or lock_timeout is not None:
        _require(
            tf,
            TF_0_12_0,
            None,
            "-lock and -lock-timeout were added to workspace new in Terraform 0.12",
        )
    args = ["workspace", "new", "-no-color", *_lock_args(lock, lock_timeout)]
    if copy_state:
        args.append(f"-state={copy_state}")
    args.append(workspace)
    return tf.build_command(args)


def workspace_select_command(tf, workspace):
    return tf.build_command(["workspace", "select", "-no-color", workspace])


def workspace_show_command(tf):
    """Build ``terraform workspace show``, available from Terraform 0.10.0."""
    _require(tf, TF_0_10_0, None, "workspace show was first introduced in Terraform 0.10.0")
    return tf.build_command(["workspace", "show", "-no-color"])