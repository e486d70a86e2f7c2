"""
Bash install script rendering.

The script is assembled as an ordered list of stages. OS and architecture
are detected by the script itself when it runs; nothing about the machine
generating the script leaks into the output.
"""

import logging
from typing import Optional

from ..config.settings import ScriptConfig
from ..models.script import ScriptContext, ScriptDocument
from ..utils.shell import escape_double_quoted, quote_word
from .extraction import extraction_kind, strategy_for


# Shell variables the generated script sets after platform detection
OS_PLACEHOLDER = "${OS}"
ARCH_PLACEHOLDER = "${ARCH}"

# Stand-ins for the placeholders while release text is escaped
_OS_MARK = "\x00OS\x00"
_ARCH_MARK = "\x00ARCH\x00"

# Kernel-reported machine names that differ from release asset naming
ARCH_ALIASES = {
    "x86_64": "amd64",
    "aarch64": "arm64",
}

STAGE_ORDER = [
    "shebang",
    "announce",
    "detect_os",
    "detect_arch",
    "normalize_arch",
    "report_platform",
    "download",
    "extract",
    "install",
    "cleanup",
    "verify",
    "success",
]


def normalize_arch(machine: str) -> str:
    """Python mirror of the architecture case statement in the script."""
    return ARCH_ALIASES.get(machine, machine)


def version_check_command(tool_name: str) -> str:
    """Command used to verify the installed binary."""
    if tool_name == "node":
        return f"{tool_name} --version"
    if tool_name == "kubectl":
        return f"{tool_name} version --client"
    return f'{tool_name} --version || {tool_name} version || echo "Version check not available"'


class ScriptBuilder:
    """Renders install scripts from a ScriptContext."""

    def __init__(self, config: Optional[ScriptConfig] = None):
        self.logger = logging.getLogger(__name__)
        self.config = config or ScriptConfig()

    def build(self, context: ScriptContext) -> str:
        return self.build_document(context).render()

    def build_document(self, context: ScriptContext) -> ScriptDocument:
        """
        Build the stage list for a script.

        In dynamic mode the URL pattern is rendered against the sample
        platform to pick an extraction strategy, then against the shell
        placeholders to get the URL the script downloads at run time.

        Release data (version, file name, URL) is escaped before it is
        placed between double quotes; only ${OS} and ${ARCH} expand.
        """
        tool = context.tool_name
        file_name, download_url, kind = self._resolve_download(context)
        version = escape_double_quoted(context.version)
        install_dir = self.config.install_dir
        target = quote_word(f"{install_dir}/{tool}")

        bodies = {
            "shebang": "#!/usr/bin/env bash\nset -e",
            "announce": f'echo "Installing {tool} {version}..."',
            "detect_os": "\n".join([
                "# Detect OS",
                "OS=$(uname -s | tr '[:upper:]' '[:lower:]')",
                'if [ -z "$OS" ]; then',
                '  echo "Error: Failed to detect operating system"',
                "  exit 1",
                "fi",
            ]),
            "detect_arch": "\n".join([
                "# Detect Architecture",
                "ARCH=$(uname -m)",
                'if [ -z "$ARCH" ]; then',
                '  echo "Error: Failed to detect architecture"',
                "  exit 1",
                "fi",
            ]),
            "normalize_arch": self._normalize_arch_stage(),
            "report_platform": "\n".join([
                'echo "Detected OS: $OS"',
                'echo "Detected Architecture: $ARCH"',
            ]),
            "download": "\n".join([
                "# Download",
                f'echo "Downloading {tool}..."',
                "TEMP_DIR=$(mktemp -d)",
                'cd "$TEMP_DIR"',
                f'curl -fsSL "{download_url}" -o "{file_name}"',
            ]),
            "extract": strategy_for(file_name, tool, kind),
            "install": "\n".join([
                f"# Install to {install_dir}",
                f'echo "Installing {tool} to {escape_double_quoted(install_dir)}..."',
                f"sudo mv {tool} {target}",
                f"sudo chmod +x {target}",
            ]),
            "cleanup": "\n".join([
                "# Cleanup",
                "cd - > /dev/null",
                'rm -rf "$TEMP_DIR"',
            ]),
            "verify": "\n".join([
                "# Verify installation",
                'echo "Verifying installation..."',
                version_check_command(tool),
            ]),
            "success": f'echo "{tool} installed successfully!"',
        }

        doc = ScriptDocument()
        for name in STAGE_ORDER:
            doc.add(name, bodies[name])
        return doc

    def _resolve_download(self, context: ScriptContext):
        """File name and URL, both escaped for double quotes, plus the extraction kind."""
        if not context.is_dynamic:
            return (
                escape_double_quoted(context.file_name),
                escape_double_quoted(context.download_url),
                extraction_kind(context.file_name),
            )

        template = context.custom_download
        sample = template.file_name(context.version, self.config.sample_os, self.config.sample_arch)
        self.logger.debug(f"Sample file name for {context.tool_name}: {sample}")

        file_name = template.file_name(context.version, _OS_MARK, _ARCH_MARK)
        download_url = template.render(context.version, _OS_MARK, _ARCH_MARK)
        return _with_placeholders(file_name), _with_placeholders(download_url), extraction_kind(sample)

    @staticmethod
    def _normalize_arch_stage() -> str:
        lines = ["# Normalize architecture names", 'case "$ARCH" in']
        for machine, arch in ARCH_ALIASES.items():
            lines.extend([
                f"  {machine})",
                f'    ARCH="{arch}"',
                "    ;;",
            ])
        lines.append("esac")
        return "\n".join(lines)


def _with_placeholders(rendered: str) -> str:
    """Escape a template rendering, then swap the marks for shell variables."""
    escaped = escape_double_quoted(rendered)
    return escaped.replace(_OS_MARK, OS_PLACEHOLDER).replace(_ARCH_MARK, ARCH_PLACEHOLDER)
