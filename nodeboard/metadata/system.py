"""Host operating system identification."""

import platform


def get_os_name() -> str:
    """
    Identify the host operating system family.

    Returns:
        Lowercase OS family name (e.g. "linux", "darwin", "windows")
    """
    return platform.system().lower()
