"""Terraform CLI version parsing, comparison and range checks."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from functools import total_ordering
from itertools import zip_longest

_VERSION_RE = re.compile(
    r"v?([0-9]+(?:\.[0-9]+)*?)"
    r"(?:-([0-9]+[0-9A-Za-z\-~]*(?:\.[0-9A-Za-z\-~]+)*)"
    r"|(?:-?([A-Za-z\-~]+[0-9A-Za-z\-~]*(?:\.[0-9A-Za-z\-~]+)*)))?"
    r"(?:\+([0-9A-Za-z\-~]+(?:\.[0-9A-Za-z\-~]+)*))?"
)

_SIMPLE_VERSION = r"v?(?P<version>[0-9]+(?:\.[0-9]+)*(?:-[A-Za-z0-9\.]+)?)"
_TERRAFORM_VERSION_RE = re.compile(r"Terraform " + _SIMPLE_VERSION)
_PROVIDER_VERSION_RE = re.compile(r"\n\+ provider[\. ](?P<name>\S+) " + _SIMPLE_VERSION)


def _compare_part(mine: str, theirs: str) -> int:
    if mine == theirs:
        return 0
    mine_numeric = mine.isdigit()
    theirs_numeric = theirs.isdigit()
    if mine == "":
        return -1 if theirs_numeric else 1
    if theirs == "":
        return 1 if mine_numeric else -1
    if mine_numeric and not theirs_numeric:
        return -1
    if not mine_numeric and theirs_numeric:
        return 1
    if not mine_numeric:
        return 1 if mine > theirs else -1
    return 1 if int(mine) > int(theirs) else -1


def _compare_prereleases(mine: str, theirs: str) -> int:
    if mine == theirs:
        return 0
    if not mine:
        return 1
    if not theirs:
        return -1
    for part_mine, part_theirs in zip_longest(mine.split("."), theirs.split("."), fillvalue=""):
        result = _compare_part(part_mine, part_theirs)
        if result:
            return result
    return 0


@total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """A semantic-style version with optional pre-release and build metadata."""

    segments: tuple[int, ...]
    prerelease: str = ""
    metadata: str = ""

    @classmethod
    def parse(cls, text):
        """Parse a version string such as ``v0.13.0-beta3``."""
        if not isinstance(text, str):
            raise TypeError(f"version must be a string, not {type(text).__name__}")
        match = _VERSION_RE.fullmatch(text)
        if match is None:
            raise ValueError(f"malformed version: {text}")
        segments = [int(part) for part in match.group(1).split(".")]
        segments.extend([0] * (3 - len(segments)))
        prerelease = match.group(2) or match.group(3) or ""
        return cls(tuple(segments), prerelease, match.group(4) or "")

    def release(self):
        """Return this version without pre-release and metadata."""
        return Version(self.segments)

    def _compare(self, other: Version) -> int:
        if self.segments != other.segments:
            for mine, theirs in zip_longest(self.segments, other.segments, fillvalue=0):
                if mine != theirs:
                    return 1 if mine > theirs else -1
        if not self.prerelease and not other.prerelease:
            return 0
        return _compare_prereleases(self.prerelease, other.prerelease)

    def __eq__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) == 0

    def __lt__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) < 0

    def __hash__(self):
        segments = list(self.segments)
        while segments and segments[-1] == 0:
            segments.pop()
        return hash((tuple(segments), self.prerelease))

    def __str__(self):
        text = ".".join(str(segment) for segment in self.segments)
        if self.prerelease:
            text += f"-{self.prerelease}"
        if self.metadata:
            text += f"+{self.metadata}"
        return text


TF_0_4_1 = Version.parse("0.4.1")
TF_0_5_0 = Version.parse("0.5.0")
TF_0_6_13 = Version.parse("0.6.13")
TF_0_7_7 = Version.parse("0.7.7")
TF_0_8_0 = Version.parse("0.8.0")
TF_0_10_0 = Version.parse("0.10.0")
TF_0_12_0 = Version.parse("0.12.0")
TF_0_13_0 = Version.parse("0.13.0")
TF_0_14_0 = Version.parse("0.14.0")
TF_0_15_0 = Version.parse("0.15.0")
TF_0_15_2 = Version.parse("0.15.2")
TF_1_1_0 = Version.parse("1.1.0")


def _version_string(version: Version | None) -> str:
    return "-" if version is None else str(version)


class VersionMismatchError(Exception):
    """The Terraform version is outside the range a feature supports."""

    def __init__(self, min_inclusive, max_exclusive, actual, reason=""):
        self.min_inclusive = min_inclusive
        self.max_exclusive = max_exclusive
        self.actual = actual
        self.reason = reason
        message = f"unexpected version {actual} (min: {min_inclusive}, max: {max_exclusive})"
        super().__init__(f"{reason}: {message}" if reason else message)

    @classmethod
    def _for(cls, tfv, min_inclusive, max_exclusive):
        return cls(
            _version_string(min_inclusive),
            _version_string(max_exclusive),
            _version_string(tfv),
        )


def _parse_named(text: str, what: str) -> Version:
    try:
        return Version.parse(text)
    except ValueError as err:
        raise ValueError(f"unable to parse {what} {text!r}: {err}") from err


def parse_json_version_output(stdout):
    """Parse ``terraform version -json`` output into (version, providers)."""
    data = json.loads(stdout)
    if not isinstance(data, dict):
        raise ValueError(f"unexpected version output: {data!r}")
    tf_version = _parse_named(data.get("terraform_version") or "", "version")
    providers = {
        provider: _parse_named(text, f"{provider!r} version")
        for provider, text in (data.get("provider_selections") or {}).items()
    }
    return tf_version, providers


def parse_plaintext_version_output(stdout):
    """Parse plain ``terraform version`` output into (version, providers)."""
    if isinstance(stdout, bytes):
        stdout = stdout.decode()
    stdout = stdout.strip()
    match = _TERRAFORM_VERSION_RE.search(stdout)
    if match is None:
        raise ValueError(f"unexpected number of version matches 0 for {stdout}")
    tf_version = _parse_named(match.group("version"), "version")
    providers = {
        found.group("name"): _parse_named(found.group("version"), "provider version")
        for found in _PROVIDER_VERSION_RE.finditer(stdout)
    }
    return tf_version, providers


def parse_version_output(stdout):
    """Parse version output, trying JSON first and plain text when it is not JSON."""
    try:
        return parse_json_version_output(stdout)
    except json.JSONDecodeError:
        pass
    try:
        return parse_plaintext_version_output(stdout)
    except ValueError as err:
        raise ValueError(f"unable to parse version: {err}") from err


def strip_prerelease_and_meta(version):
    """Return the release part of ``version``, or None for None."""
    return None if version is None else version.release()


def version_in_range(tfv, min_inclusive, max_exclusive):
    """Check ``min_inclusive <= tfv < max_exclusive`` ignoring pre-release data."""
    if min_inclusive is None and max_exclusive is None:
        return True
    tfv = strip_prerelease_and_meta(tfv)
    min_inclusive = strip_prerelease_and_meta(min_inclusive)
    max_exclusive = strip_prerelease_and_meta(max_exclusive)
    if min_inclusive is not None and not tfv >= min_inclusive:
        return False
    if max_exclusive is not None and not tfv < max_exclusive:
        return False
    return True