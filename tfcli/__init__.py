"""Build Terraform CLI invocations, check version support and parse version and workspace output."""

__version__ = "0.1.0"

__all__ = [
    "planning",
    "providers",
    "show",
    "state",
    "taint",
    "terraform",
    "upgrade",
    "versions",
    "workspaces",
]