"""Commands for ``terraform 0.12upgrade`` and ``terraform 0.13upgrade``."""

from __future__ import annotations

from .versions import TF_0_12_0, TF_0_13_0, TF_0_14_0, VersionMismatchError


def _require(tf, min_inclusive, max_exclusive, reason):
    try:
        tf.compatible(min_inclusive, max_exclusive)
    except VersionMismatchError as err:
        raise VersionMismatchError(
            err.min_inclusive, err.max_exclusive, err.actual, reason=reason
        ) from err


def upgrade012_command(tf, *, dir="", force=False):
    """Build ``terraform 0.12upgrade``, supported only by 0.12 releases."""
    _require(
        tf,
        TF_0_12_0,
        TF_0_13_0,
        "terraform 0.12upgrade is only supported in 0.12 releases",
    )
    args = ["0.12upgrade", "-no-color", "-yes"]
    if force:
        args.append("-force")
    if dir:
        args.append(str(dir))
    return tf.build_command(args)


def upgrade013_command(tf, *, dir=""):
    """Build ``terraform 0.13upgrade``, supported only by 0.13 releases."""
    _require(
        tf,
        TF_0_13_0,
        TF_0_14_0,
        "terraform 0.13upgrade is only supported in 0.13 releases",
    )
    args = ["0.13upgrade", "-no-color", "-yes"]
    if dir:
        args.append(str(dir))
    return tf.build_command(args)