"""Package version and the User-Agent built from it."""

from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION_NAME = "beeswax-client"
UNKNOWN_VERSION = "0.0.0"


def get_version() -> str:
    """Installed version of ``beeswax-client``, or ``UNKNOWN_VERSION`` from an uninstalled checkout."""
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return UNKNOWN_VERSION


def user_agent() -> str:
    """User-Agent header value sent with every request."""
    return f"{DISTRIBUTION_NAME}/{get_version()}"
