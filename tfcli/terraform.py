"""The Terraform executable, its working directory and command construction."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from .versions import (
    TF_0_13_0,
    TF_0_15_0,
    Version,
    VersionMismatchError,
    parse_version_output,
    version_in_range,
)

logger = logging.getLogger(__name__)

APPEND_USER_AGENT_ENV = "TF_APPEND_USER_AGENT"
AUTOMATION_ENV = "TF_IN_AUTOMATION"
INPUT_ENV = "TF_INPUT"
LOG_ENV = "TF_LOG"
LOG_CORE_ENV = "TF_LOG_CORE"
LOG_PATH_ENV = "TF_LOG_PATH"
LOG_PROVIDER_ENV = "TF_LOG_PROVIDER"
REATTACH_ENV = "TF_REATTACH_PROVIDERS"
DISABLE_PLUGIN_TLS_ENV = "TF_DISABLE_PLUGIN_TLS"
SKIP_PROVIDER_VERIFY_ENV = "TF_SKIP_PROVIDER_VERIFY"
CHECKPOINT_DISABLE_ENV = "CHECKPOINT_DISABLE"
VAR_ENV_PREFIX = "TF_VAR_"

MANAGED_ENV = frozenset(
    {
        APPEND_USER_AGENT_ENV,
        AUTOMATION_ENV,
        INPUT_ENV,
        LOG_ENV,
        LOG_CORE_ENV,
        LOG_PATH_ENV,
        LOG_PROVIDER_ENV,
        REATTACH_ENV,
        DISABLE_PLUGIN_TLS_ENV,
        SKIP_PROVIDER_VERIFY_ENV,
    }
)


class ManualEnvVarError(ValueError):
    """An environment variable that is managed internally was set by hand."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"manual setting of env var {name!r} detected")


class NoSuitableBinaryError(Exception):
    """No usable Terraform executable was supplied."""


def prohibited_env(env):
    """Return the names in ``env`` that may not be set by hand."""
    if not env:
        return []
    return [name for name in env if name in MANAGED_ENV or name.startswith(VAR_ENV_PREFIX)]


@dataclass
class Command:
    """A fully prepared Terraform invocation."""

    exec_path: str
    args: list[str]
    env: dict[str, str] = field(default_factory=dict)
    working_dir: str = ""

    @property
    def argv(self):
        return [self.exec_path, *self.args]


class Terraform:
    """The Terraform CLI executable together with its working directory."""

    def __init__(self, working_dir, exec_path, version=None):
        if not working_dir:
            raise ValueError("Terraform cannot be initialised with empty workdir")
        try:
            os.stat(working_dir)
        except OSError as err:
            raise ValueError(f"error initialising Terraform with workdir {working_dir}: {err}") from err
        if not exec_path:
            raise NoSuitableBinaryError(
                "please supply the path to a Terraform executable using exec_path"
            )
        self.working_dir = os.fspath(working_dir)
        self.exec_path = os.fspath(exec_path)
        self.version = Version.parse(version) if isinstance(version, str) else version
        self.provider_versions: dict[str, Version] = {}
        self.env: dict[str, str] | None = None
        self.append_user_agent = ""
        self.disable_plugin_tls = False
        self._skip_provider_verify = False
        self._log = ""
        self._log_core = ""
        self._log_path = ""
        self._log_provider = ""

    @property
    def log(self):
        return self._log

    @property
    def log_core(self):
        return self._log_core

    @property
    def log_path(self):
        return self._log_path

    @property
    def log_provider(self):
        return self._log_provider

    @property
    def skip_provider_verify(self):
        return self._skip_provider_verify

    def set_env(self, env):
        """Replace the environment; None inherits the process environment."""
        prohibited = prohibited_env(env)
        if prohibited:
            raise ManualEnvVarError(prohibited[0])
        self.env = None if env is None else dict(env)

    def record_version_output(self, stdout):
        """Store the version reported by ``terraform version`` output."""
        self.version, self.provider_versions = parse_version_output(stdout)
        return self.version, self.provider_versions

    def compatible(self, min_inclusive, max_exclusive):
        """Raise VersionMismatchError unless the known version is in range."""
        if self.version is None:
            raise RuntimeError(
                "the Terraform version is unknown: pass it to Terraform() "
                "or call record_version_output()"
            )
        if not version_in_range(self.version, min_inclusive, max_exclusive):
            raise VersionMismatchError._for(self.version, min_inclusive, max_exclusive)

    def set_log(self, log):
        self.compatible(TF_0_15_0, None)
        self._log = log

    def set_log_core(self, log_core):
        self.compatible(TF_0_15_0, None)
        self._log_core = log_core

    def set_log_path(self, path):
        self._log_path = os.fspath(path)
        # logging without a level would write nothing
        if not (self._log or self._log_core or self._log_provider):
            self._log = "TRACE"

    def set_log_provider(self, log_provider):
        self.compatible(TF_0_15_0, None)
        self._log_provider = log_provider

    def set_skip_provider_verify(self, skip):
        self.compatible(None, TF_0_13_0)
        self._skip_provider_verify = skip

    def _split_logging(self) -> bool:
        return self.version is None or version_in_range(self.version, TF_0_15_0, None)

    def _base_env(self) -> dict[str, str]:
        if self.env is None:
            return {name: value for name, value in os.environ.items() if name not in MANAGED_ENV}
        env = dict(self.env)
        if CHECKPOINT_DISABLE_ENV not in env and CHECKPOINT_DISABLE_ENV in os.environ:
            env[CHECKPOINT_DISABLE_ENV] = os.environ[CHECKPOINT_DISABLE_ENV]
        return env

    def build_command(self, args, merge_env=None):
        """Prepare a Command for ``args`` with the managed environment applied."""
        env = self._base_env()
        if self.append_user_agent:
            env[APPEND_USER_AGENT_ENV] = self.append_user_agent
        logging_on = bool(self._log_path)
        env[LOG_ENV] = self._log if logging_on else ""
        env[LOG_PATH_ENV] = self._log_path
        if self._split_logging():
            env[LOG_CORE_ENV] = self._log_core if logging_on else ""
            env[LOG_PROVIDER_ENV] = self._log_provider if logging_on else ""
        if self.disable_plugin_tls:
            env[DISABLE_PLUGIN_TLS_ENV] = "1"
        if self._skip_provider_verify:
            env[SKIP_PROVIDER_VERIFY_ENV] = "1"
        if merge_env:
            env.update(merge_env)
        command = Command(self.exec_path, list(args), env, self.working_dir)
        logger.debug("prepared terraform command: %s", " ".join(command.argv))
        return command