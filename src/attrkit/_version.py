"""Single source of truth for the attrkit version."""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version


def get_version() -> str:
    """Get the installed distribution version, or a placeholder from a bare checkout."""
    try:
        return _metadata_version("attrkit")
    except PackageNotFoundError:
        return "0.0.0"
