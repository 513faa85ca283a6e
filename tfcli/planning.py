"""Commands for ``terraform plan``, ``refresh``, ``output`` and ``validate``."""

from __future__ import annotations

from .versions import TF_0_12_0, TF_0_15_2, VersionMismatchError

DEFAULT_LOCK_TIMEOUT = "0s"
DEFAULT_PARALLELISM = 10


def _require(tf, min_inclusive, max_exclusive, reason):
    try:
        tf.compatible(min_inclusive, max_exclusive)
    except VersionMismatchError as err:
        raise VersionMismatchError(
            err.min_inclusive, err.max_exclusive, err.actual, reason=reason
        ) from err


def _bool(value):
    return "true" if value else "false"


def plan_command(
    tf,
    *,
    destroy=False,
    dir="",
    lock=True,
    lock_timeout=DEFAULT_LOCK_TIMEOUT,
    out="",
    parallelism=DEFAULT_PARALLELISM,
    refresh=True,
    replace=(),
    state="",
    targets=(),
    vars=(),
    var_files=(),
):
    """Build ``terraform plan`` with a detailed exit code.

    The command exits with 2 when the plan holds changes, 0 when it does not.
    Replacing addresses needs Terraform 0.15.2 or later.
    """
    args = ["plan", "-no-color", "-input=false", "-detailed-exitcode"]

    if lock_timeout:
        args.append(f"-lock-timeout={lock_timeout}")
    if out:
        args.append(f"-out={out}")
    if state:
        args.append(f"-state={state}")
    args.extend(f"-var-file={var_file}" for var_file in var_files)

    args.append(f"-lock={_bool(lock)}")
    args.append(f"-parallelism={parallelism}")
    args.append(f"-refresh={_bool(refresh)}")

    if replace:
        _require(tf, TF_0_15_2, None, "replace option was introduced in Terraform 0.15.2")
        args.extend(f"-replace={address}" for address in replace)
    if destroy:
        args.append("-destroy")

    args.extend(f"-target={target}" for target in targets)
    for assignment in vars:
        args.extend(["-var", assignment])

    if dir:
        args.append(dir)

    return tf.build_command(args)


def refresh_command(
    tf,
    *,
    backup="",
    dir="",
    lock=True,
    lock_timeout=DEFAULT_LOCK_TIMEOUT,
    state="",
    state_out="",
    targets=(),
    vars=(),
    var_files=(),
):
    """Build ``terraform refresh``."""
    args = ["refresh", "-no-color", "-input=false"]

    if backup:
        args.append(f"-backup={backup}")
    if lock_timeout:
        args.append(f"-lock-timeout={lock_timeout}")
    if state:
        args.append(f"-state={state}")
    if state_out:
        args.append(f"-state-out={state_out}")
    args.extend(f"-var-file={var_file}" for var_file in var_files)

    args.append(f"-lock={_bool(lock)}")

    args.extend(f"-target={target}" for target in targets)
    for assignment in vars:
        args.extend(["-var", assignment])

    if dir:
        args.append(dir)

    return tf.build_command(args)


def output_command(tf, *, state=""):
    """Build ``terraform output -json``."""
    args = ["output", "-no-color", "-json"]
    if state:
        args.append(f"-state={state}")
    return tf.build_command(args)


def validate_command(tf):
    """Build ``terraform validate -json``, available from Terraform 0.12.0."""
    _require(tf, TF_0_12_0, None, "terraform validate -json was added in 0.12.0")
    return tf.build_command(["validate", "-no-color", "-json"])