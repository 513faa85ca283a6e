# tfcli

`tfcli` describes Terraform CLI invocations without running them. It
builds the exact argument list and environment for a subcommand,
checks that the Terraform version you recorded supports the command,
and parses the text and JSON that the version and workspace commands
print.

## Installation

```
pip install tfcli
```

## Describing a Terraform installation

```python
from tfcli.terraform import Terraform
from tfcli.versions import Version

tf = Terraform("/path/to/config", "/usr/local/bin/terraform", Version.parse("1.2.3"))
tf.set_env({"CHECKPOINT_DISABLE": "1"})
```

The version may also be given as a string such as `"1.2.3"`, or left
out. The working directory must exist, otherwise `ValueError` is
raised. An empty executable path raises `NoSuitableBinaryError`.

`set_env` replaces the environment the commands are built with. Passing
`None` (the default) inherits the current process environment, minus the
variables the package manages itself. `set_env` rejects those managed
variables, such as `TF_LOG`, `TF_REATTACH_PROVIDERS` and any `TF_VAR_*`
variable, by raising `ManualEnvVarError`. `prohibited_env(env)` returns
the keys that would be rejected. When an explicit environment is set and
it does not mention `CHECKPOINT_DISABLE`, that variable is still carried
over from the process environment.

If you do not pass the version up front, run `terraform version -json`
or `terraform version` yourself and pass what it printed to
`tf.record_version_output(stdout)`. It accepts either form and also
records the provider versions in `tf.provider_versions`.
`tf.compatible(min_inclusive, max_exclusive)` raises
`VersionMismatchError` when the version is out of range, and
`RuntimeError` when no version is known yet.

Other settings on the instance: `tf.append_user_agent` (sets
`TF_APPEND_USER_AGENT`), `tf.disable_plugin_tls` (sets
`TF_DISABLE_PLUGIN_TLS=1`), and `tf.set_skip_provider_verify(skip)`
(sets `TF_SKIP_PROVIDER_VERIFY=1`, only allowed before Terraform 0.13.0).

## Building commands

Each builder returns a `Command` with `exec_path`, `args`, `env` and
`working_dir`; `command.argv` is the executable followed by the
arguments. Options are keyword arguments whose defaults match the
Terraform CLI's.

```python
from tfcli.planning import plan_command

cmd = plan_command(tf, targets=["aws_instance.web"], parallelism=4)
```

The builders are grouped by subcommand:

- `tfcli.planning`: `plan_command`, `refresh_command`, `output_command`, `validate_command`
- `tfcli.show`: `show_command`, `show_state_file_command`, `show_plan_file_command`, `show_plan_file_raw_command`
- `tfcli.providers`: `providers_lock_command`, `providers_schema_command`
- `tfcli.state`: `state_mv_command`, `state_pull_command`, `state_push_command`, `state_replace_provider_command`, `state_rm_command`
- `tfcli.taint`: `taint_command`, `untaint_command`
- `tfcli.upgrade`: `upgrade012_command`, `upgrade013_command`
- `tfcli.workspaces`: `workspace_list_command`, `workspace_new_command`, `workspace_delete_command`, `workspace_select_command`, `workspace_show_command`, and `parse_workspace_list` for reading the output of `workspace list`

`plan_command` passes `-detailed-exitcode`, so the command exits with 2
when the plan holds changes and 0 when it does not.

Some subcommands and options exist only in certain Terraform releases
(for example `validate -json` and `show -json` from 0.12.0,
`providers lock` from 0.14.0, `plan` with `replace` from 0.15.2,
`0.12upgrade` only in 0.12 releases). When the recorded version falls
outside the supported range, the builder raises `VersionMismatchError`.
The show builders raise `ValueError` for a blank file path.

## Logging

`set_log`, `set_log_core` and `set_log_provider` set the Terraform log
levels and need Terraform 0.15.0 or later. None of them take effect
until `set_log_path` has also been called; until then the built
environment holds empty values for the log variables. If no level has
been chosen when `set_log_path` is called, `TF_LOG` defaults to `TRACE`.

## Versions

`tfcli.versions` holds the `Version` type (`Version.parse(text)`,
`version.release()`) and the version helpers.
`version_in_range(tfv, min_inclusive, max_exclusive)` checks
`min_inclusive <= tfv < max_exclusive`, ignoring pre-release and build
metadata; either bound may be `None`. To read what the version command
printed, use `parse_version_output`, `parse_json_version_output` or
`parse_plaintext_version_output`; each returns the Terraform version and
a dictionary of provider versions.

## What it does not do

- It never starts a process: running the command, streaming its output
  and reading its exit status are up to you.
- It does not decode the JSON that `show`, `output`, `validate` or
  `providers schema` print into objects; parse it with `json` as you see
  fit.
- It does not install or locate a Terraform executable.