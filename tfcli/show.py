"""Commands for ``terraform show``."""

from __future__ import annotations

from .versions import TF_0_12_0, VersionMismatchError

_JSON_REASON = "terraform show -json was added in 0.12.0"


def _require_json(tf):
    try:
        tf.compatible(TF_0_12_0, None)
    except VersionMismatchError as err:
        raise VersionMismatchError(
            err.min_inclusive, err.max_exclusive, err.actual, reason=_JSON_REASON
        ) from err


def _show(tf, json_output, *args):
    all_args = ["show"]
    if json_output:
        all_args.append("-json")
    all_args.append("-no-color")
    all_args.extend(args)
    return tf.build_command(all_args)


def show_command(tf):
    """Build ``terraform show -json`` for the default state."""
    _require_json(tf)
    return _show(tf, True)


def show_state_file_command(tf, state_path):
    """Build ``terraform show -json`` for a given state file."""
    _require_json(tf)
    if not state_path:
        raise ValueError("state_path cannot be blank: use show_command() if not passing a state path")
    return _show(tf, True, str(state_path))


def show_plan_file_command(tf, plan_path):
    """Build ``terraform show -json`` for a given plan file."""
    _require_json(tf)
    if not plan_path:
        raise ValueError("plan_path cannot be blank: use show_command() if not passing a plan path")
    return _show(tf, True, str(plan_path))


def show_plan_file_raw_command(tf, plan_path):
    """Build ``terraform show`` for a plan file in human-readable form."""
    if not plan_path:
        raise ValueError("plan_path cannot be blank: use show_command() if not passing a plan path")
    return _show(tf, False, str(plan_path))