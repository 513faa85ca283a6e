"""Commands for ``terraform providers lock`` and ``providers schema``."""

from __future__ import annotations

from .versions import TF_0_14_0, VersionMismatchError


def providers_lock_command(tf, *, fs_mirror="", net_mirror="", platforms=(), providers=()):
    """Build ``terraform providers lock``, available from Terraform 0.14.0."""
    try:
        tf.compatible(TF_0_14_0, None)
    except VersionMismatchError as err:
        raise VersionMismatchError(
            err.min_inclusive,
            err.max_exclusive,
            err.actual,
            reason="terraform providers lock was added in 0.14.0",
        ) from err

    args = ["providers", "lock"]
    if fs_mirror:
        args.append(f"-fs-mirror={fs_mirror}")
    if net_mirror:
        args.append(f"-net-mirror={net_mirror}")
    args.extend(f"-platform={platform}" for platform in platforms)
    args.extend(providers)
    return tf.build_command(args)


def providers_schema_command(tf, *args):
    """Build ``terraform providers schema -json`` with any extra arguments."""
    return tf.build_command(["providers", "schema", "-json", "-no-color", *args])