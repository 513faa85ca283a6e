"""Commands for ``terraform taint`` and ``terraform untaint``."""

from __future__ import annotations

from .versions import TF_0_4_1, TF_0_6_13, VersionMismatchError


def _require(tf, min_inclusive, reason):
    try:
        tf.compatible(min_inclusive, None)
    except VersionMismatchError as err:
        raise VersionMismatchError(
            err.min_inclusive, err.max_exclusive, err.actual, reason=reason
        ) from err


def _taint_args(subcommand, address, state, allow_missing, lock, lock_timeout):
    args = [subcommand, "-no-color"]
    if lock_timeout:
        args.append(f"-lock-timeout={lock_timeout}")
    if state:
        args.append(f"-state={state}")
    args.append(f"-lock={'true' if lock else 'false'}")
    if allow_missing:
        args.append("-allow-missing")
    args.append(address)
    return args


def taint_command(tf, address, *, state="", allow_missing=False, lock=True, lock_timeout=""):
    """Build ``terraform taint``, available from Terraform 0.4.1."""
    _require(tf, TF_0_4_1, "taint was first introduced in Terraform 0.4.1")
    return tf.build_command(
        _taint_args("taint", address, state, allow_missing, lock, lock_timeout)
    )


def untaint_command(tf, address, *, state="", allow_missing=False, lock=True, lock_timeout=""):
    """Build ``terraform untaint``, available from Terraform 0.6.13."""
    _require(tf, TF_0_6_13, "untaint was first introduced in Terraform 0.6.13")
    return tf.build_command(
        _taint_args("untaint", address, state, allow_missing, lock, lock_timeout)
    )