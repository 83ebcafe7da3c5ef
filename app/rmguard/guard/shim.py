"""Command shim reader.

Package managers on platforms without usable symlinks install small
launcher scripts ("shims") that forward to the real executable. This
module extracts the destination such a shim points at, relative to the
shim's own directory.
"""

import re

from rmguard.guard.errors import NotAShimError

# Shims are tiny launchers; anything larger is not worth scanning.
MAX_SHIM_BYTES = 64 * 1024

_CMD_PATTERN = re.compile(r'"%(?:~dp0|dp0%)\\([^"]+?)"\s+%[*]')
_POWERSHELL_PATTERN = re.compile(r'"\$basedir/([^"]+?)"\s+\$args')
_SH_PATTERN = re.compile(r'"\$basedir/([^"]+?)"\s+"\$@"')


def extract_shim_destination(path: str, contents: str) -> str | None:
    """Extract the destination from shim contents.

    The shim flavour is chosen by file extension: ``.cmd`` for cmd.exe,
    ``.ps1`` for PowerShell, anything else for the POSIX shell form.

    Args:
        path: Path of the shim, used only to pick the flavour.
        contents: Decoded file contents.

    Returns:
        Destination relative to the shim's directory using ``/``
        separators, or None if the contents are not a shim.
    """
    lowered = path.lower()
    if lowered.endswith(".cmd"):
        pattern = _CMD_PATTERN
    elif lowered.endswith(".ps1"):
        pattern = _POWERSHELL_PATTERN
    else:
        pattern = _SH_PATTERN

    match = pattern.search(contents)
    if match is None:
        return None
    return match.group(1).replace("\\", "/")


def read_cmd_shim(path: str) -> str:
    """Read a command shim and return its destination.

    Args:
        path: Absolute path of the file to read.

    Returns:
        Destination relative to the shim's directory.

    Raises:
        NotAShimError: If the file is not a recognizable shim.
        IsADirectoryError: If the path is a directory.
        OSError: For any other read failure.
    """
    with open(path, "rb") as f:
        raw = f.read(MAX_SHIM_BYTES)

    destination = extract_shim_destination(path, raw.decode("utf-8", errors="replace"))
    if destination is None:
        raise NotAShimError(path)
    return destination
