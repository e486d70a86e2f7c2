"""
Extraction strategy selection for downloaded release files.
"""

from enum import Enum
from typing import Optional


class ExtractionKind(str, Enum):
    """Unpack procedure for a downloaded file."""
    TAR_GZ = "tar.gz"
    TAR_XZ = "tar.xz"
    ZIP = "zip"
    GZ = "gz"
    RAW = "raw"


# Checked in order, first match wins
_SUFFIXES = [
    (ExtractionKind.TAR_GZ, (".tar.gz", ".tgz")),
    (ExtractionKind.TAR_XZ, (".tar.xz", ".txz")),
    (ExtractionKind.ZIP, (".zip",)),
    (ExtractionKind.GZ, (".gz",)),
]

_ARCHIVE_COMMANDS = {
    ExtractionKind.TAR_GZ: "tar -xzf",
    ExtractionKind.TAR_XZ: "tar -xJf",
    ExtractionKind.ZIP: "unzip -q",
}


def extraction_kind(file_name: str) -> ExtractionKind:
    """Classify a file name by suffix. Anything unrecognized is a raw binary."""
    for kind, suffixes in _SUFFIXES:
        if file_name.endswith(suffixes):
            return kind
    return ExtractionKind.RAW


def strategy_for(file_name: str, tool_name: str,
                 kind: Optional[ExtractionKind] = None) -> str:
    """
    Bash snippet that leaves the executable as ./<tool_name>.

    Args:
        file_name: Name of the downloaded file, escaped for use inside
            double quotes (may contain ${OS}/${ARCH})
        tool_name: Binary name to look for and rename to
        kind: Extraction kind, when already classified from another file name

    Returns:
        Bash commands, without trailing newline
    """
    kind = kind or extraction_kind(file_name)

    if kind in _ARCHIVE_COMMANDS:
        return "\n".join([
            f"# Extract from {kind.value}",
            f'echo "Extracting {file_name}..."',
            f'{_ARCHIVE_COMMANDS[kind]} "{file_name}"',
            "# Find the binary (may be in subdirectory)",
            f'BINARY=$(find . -name "{tool_name}" -type f | head -n 1)',
            'if [ -z "$BINARY" ]; then',
            f'  echo "Error: Could not find {tool_name} binary in archive"',
            "  exit 1",
            "fi",
            f'mv "$BINARY" {tool_name}',
        ])

    if kind is ExtractionKind.GZ:
        return "\n".join([
            "# Extract from gz",
            f'echo "Extracting {file_name}..."',
            f'gunzip "{file_name}"',
            f"EXTRACTED=$(echo \"{file_name}\" | sed 's/\\.gz$//')",
            f'mv "$EXTRACTED" {tool_name}',
        ])

    if file_name == tool_name:
        # mv onto itself fails under set -e
        return f"# File is a raw binary already named {tool_name}"

    return "\n".join([
        "# File is a raw binary",
        f'mv "{file_name}" {tool_name}',
    ])
