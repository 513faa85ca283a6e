import pytest

from tfcli.versions import (
    Version,
    VersionMismatchError,
    parse_json_version_output,
    parse_plaintext_version_output,
    parse_version_output,
    strip_prerelease_and_meta,
    version_in_range,
)

V = Version.parse

OUTDATED_013 = (
    "\n\nYour version of Terraform is out of date! The latest version\n"
    "is 0.13.1. You can update by downloading from https://www.terraform.io/downloads.html"
)
OUTDATED_012 = (
    "\n\nYour version of Terraform is out of date! The latest version\n"
    "is 0.12.26. You can update by downloading from https://www.terraform.io/downloads.html\n"
)
PROVIDERS_013 = {
    "registry.terraform.io/hashicorp/null": "2.1.2",
    "registry.terraform.io/paultyng/null": "0.1.0",
}


@pytest.mark.parametrize(
    "expected, providers, stdout",
    [
        ("0.13.0-dev", {}, "\nTerraform v0.13.0-dev"),
        (
            "0.13.0-dev",
            PROVIDERS_013,
            "\nTerraform v0.13.0-dev\n"
            "+ provider registry.terraform.io/hashicorp/null v2.1.2\n"
            "+ provider registry.terraform.io/paultyng/null v0.1.0",
        ),
        ("0.13.0-dev", {}, "\nTerraform v0.13.0-dev" + OUTDATED_013),
        (
            "0.13.0-dev",
            PROVIDERS_013,
            "\nTerraform v0.13.0-dev\n"
            "+ provider registry.terraform.io/hashicorp/null v2.1.2\n"
            "+ provider registry.terraform.io/paultyng/null v0.1.0" + OUTDATED_013,
        ),
        ("0.12.26", {}, "\nTerraform v0.12.26\n"),
        ("0.12.26", {"null": "2.1.2"}, "\nTerraform v0.12.26\n+ provider.null v2.1.2\n"),
        ("0.12.18", {}, "\nTerraform v0.12.18" + OUTDATED_012),
        ("0.12.18", {"null": "2.1.2"}, "\nTerraform v0.12.18\n+ provider.null v2.1.2" + OUTDATED_012),
    ],
)
def test_parse_plaintext_version_output(expected, providers, stdout):
    actual, actual_providers = parse_plaintext_version_output(stdout)
    assert actual == V(expected)
    assert actual_providers == {name: V(text) for name, text in providers.items()}


JSON_STDOUT = b"""{
  "terraform_version": "0.15.0-beta1",
  "platform": "darwin_amd64",
  "provider_selections": {
    "registry.terraform.io/hashicorp/aws": "3.31.0",
    "registry.terraform.io/hashicorp/google": "3.58.0"
  },
  "terraform_outdated": false
}
"""


def test_parse_json_version_output():
    tf_version, providers = parse_json_version_output(JSON_STDOUT)
    assert tf_version == V("0.15.0-beta1")
    assert providers == {
        "registry.terraform.io/hashicorp/aws": V("3.31.0"),
        "registry.terraform.io/hashicorp/google": V("3.58.0"),
    }


def test_parse_json_version_output_bad_version():
    with pytest.raises(ValueError, match="unable to parse version"):
        parse_json_version_output('{"terraform_version": "nope"}')


def test_parse_version_output_falls_back_to_plaintext():
    tf_version, providers = parse_version_output("Terraform v0.12.26\n+ provider.null v2.1.2\n")
    assert tf_version == V("0.12.26")
    assert providers == {"null": V("2.1.2")}


def test_parse_version_output_prefers_json():
    tf_version, _ = parse_version_output(JSON_STDOUT)
    assert str(tf_version) == "0.15.0-beta1"


def test_parse_version_output_garbage():
    with pytest.raises(ValueError, match="unable to parse version"):
        parse_version_output("hello world")


@pytest.mark.parametrize(
    "expected, low, tfv, high",
    [
        (True, "", "0.12.26", ""),
        (True, "", "0.13.0-beta3", ""),
        (False, "", "0.12.26", "0.12.25"),
        (False, "", "0.12.26", "0.12.26"),
        (False, "0.12.27", "0.12.26", ""),
        (True, "", "0.12.26", "0.13.0"),
        (True, "0.12.25", "0.12.26", ""),
        (True, "0.12.26", "0.12.26", ""),
        (True, "0.12.26", "0.12.26", "0.12.27"),
        (True, "0.12.26", "0.12.26", "0.13.0"),
        (False, "0.12.26", "0.13.0-beta3", "0.13.0"),
        (True, "0.12.26", "0.13.0-beta3", ""),
        (True, "0.13.0", "0.13.0-beta3", ""),
        (True, "0.13.0", "0.13.0-beta3", "0.14.0"),
        (True, "", "0.13.0-beta3", "0.14.0"),
    ],
)
def test_version_in_range(expected, low, tfv, high):
    low_v = V(low) if low else None
    high_v = V(high) if high else None
    assert version_in_range(V(tfv), low_v, high_v) is expected


def test_parse_and_str():
    version = V("v1.2")
    assert version.segments == (1, 2, 0)
    assert str(version) == "1.2.0"
    assert str(V("0.13.0-beta3+abc")) == "0.13.0-beta3+abc"


def test_invalid_version():
    with pytest.raises(ValueError):
        V("not.a.version")


def test_ordering():
    assert V("1.0.0-alpha") < V("1.0.0")
    assert V("1.0.0-alpha") < V("1.0.0-beta")
    assert V("1.0.0-alpha.2") < V("1.0.0-alpha.10")
    assert V("0.12.26") < V("0.13.0")
    assert V("1.0.0+meta") == V("1.0.0")
    assert V("1.0") == V("1.0.0")
    assert len({V("1.0"), V("1.0.0")}) == 1


def test_release_and_strip():
    assert str(V("0.13.0-beta3+x").release()) == "0.13.0"
    assert strip_prerelease_and_meta(None) is None
    assert str(strip_prerelease_and_meta(V("1.1.0-rc1"))) == "1.1.0"


def test_mismatch_error_message():
    err = VersionMismatchError("0.12.0", "-", "0.11.14", reason="feature")
    assert str(err) == "feature: unexpected version 0.11.14 (min: 0.12.0, max: -)"
    assert err.actual == "0.11.14"