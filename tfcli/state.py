"""Commands for the ``terraform state`` subcommands."""

from __future__ import annotations

DEFAULT_LOCK_TIMEOUT = "0s"


def _bool(value):
    return "true" if value else "false"


def _path_options(**paths):
    """Return ``-name=value`` flags for the options that are set, in order."""
    return [f"-{name}={value}" for name, value in paths.items() if value]


def state_mv_command(
    tf,
    source,
    destination,
    *,
    backup="",
    backup_out="",
    dry_run=False,
    lock=True,
    lock_timeout=DEFAULT_LOCK_TIMEOUT,
    state="",
    state_out="",
):
    """Build ``terraform state mv`` moving ``source`` to ``destination``."""
    args = ["state", "mv", "-no-color"]
    args.extend(
        _path_options(
            **{
                "backup": backup,
                "backup-out": backup_out,
                "lock-timeout": lock_timeout,
                "state": state,
                "state-out": state_out,
            }
        )
    )
    args.append(f"-lock={_bool(lock)}")
    if dry_run:
        args.append("-dry-run")
    args.extend([source, destination])
    return tf.build_command(args)


def state_pull_command(tf):
    """Build ``terraform state pull``."""
    return tf.build_command(["state", "pull"])


def state_push_command(tf, path, *, force=False, lock=False, lock_timeout=DEFAULT_LOCK_TIMEOUT):
    """Build ``terraform state push`` for the state file at ``path``."""
    args = ["state", "push"]
    if force:
        args.append("-force")
    args.append(f"-lock={_bool(lock)}")
    if lock_timeout:
        args.append(f"-lock-timeout={lock_timeout}")
    args.append(str(path))
    return tf.build_command(args)


def state_replace_provider_command(
    tf,
    source,
    destination,
    *,
    backup="",
    lock=True,
    lock_timeout=DEFAULT_LOCK_TIMEOUT,
    state="",
    state_out="",
):
    """Build ``terraform state replace-provider`` with automatic approval."""
    args = ["state", "replace-provider", "-no-color", "-auto-approve"]
    args.extend(
        _path_options(
            **{
                "backup": backup,
                "lock-timeout": lock_timeout,
                "state": state,
                "state-out": state_out,
            }
        )
    )
    args.append(f"-lock={_bool(lock)}")
    # only positional arguments follow
    args.append("--")
    args.extend([source, destination])
    return tf.build_command(args)


def state_rm_command(
    tf,
    address,
    *,
    backup="",
    backup_out="",
    dry_run=False,
    lock=True,
    lock_timeout=DEFAULT_LOCK_TIMEOUT,
    state="",
    state_out="",
):
    """Build ``terraform state rm`` for the resource at ``address``."""
    args = ["state", "rm", "-no-color"]
    args.extend(
        _path_options(
            **{
                "backup": backup,
                "backup-out": backup_out,
                "lock-timeout": lock_timeout,
                "state": state,
                "state-out": state_out,
            }
        )
    )
    args.append(f"-lock={_bool(lock)}")
    if dry_run:
        args.append("-dry-run")
    args.append(address)
    return tf.build_command(args)