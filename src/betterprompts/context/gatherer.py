"""Fills PromptContext from a working directory, without an editor."""

import logging
import re
import subprocess
from pathlib import Path
from typing import List, Optional, Union

from ..core.types import ContextFlags, PromptContext

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

LANGUAGE_BY_EXTENSION = {
    ".py": "python",
    ".js": "javascript",
    ".jsx": "javascriptreact",
    ".ts": "typescript",
    ".tsx": "typescriptreact",
    ".java": "java",
    ".kt": "kotlin",
    ".go": "go",
    ".rs": "rust",
    ".rb": "ruby",
    ".php": "php",
    ".cs": "csharp",
    ".c": "c",
    ".h": "c",
    ".cpp": "cpp",
    ".hpp": "cpp",
    ".swift": "swift",
    ".scala": "scala",
    ".sh": "shellscript",
    ".sql": "sql",
    ".html": "html",
    ".css": "css",
    ".scss": "scss",
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".toml": "toml",
    ".md": "markdown",
    ".vue": "vue",
}

IGNORE_DIRS = {
    "node_modules", ".git", "dist", "build", ".next", "__pycache__",
    ".vscode", "coverage", ".cache",
}
IGNORE_FILES = {".DS_Store", "package-lock.json", "yarn.lock", "pnpm-lock.yaml"}

MAX_ENTRIES = 15
MAX_DEPTH = 2
GIT_TIMEOUT_SECONDS = 5.0

IMPORT_PATTERNS = [
    re.compile(r"""import\s+.*\s+from\s+['"]([^'"]+)['"]"""),   # ES modules
    re.compile(r"""require\s*\(\s*['"]([^'"]+)['"]\s*\)"""),     # CommonJS
    re.compile(r"from\s+([^\s]+)\s+import"),                    # Python
    re.compile(r"^import\s+([^\s]+)", re.MULTILINE),
]


def detect_language(path: PathLike) -> Optional[str]:
    """Language id for a file, from its extension."""
    return LANGUAGE_BY_EXTENSION.get(Path(path).suffix.lower())


class ContextGatherer:
    """
    Gathers source context for a request.

    Args:
        root: Project root used for the tree and for git
    """

    def __init__(self, root: Optional[PathLike] = None):
        self.root = Path(root) if root is not None else Path.cwd()

    def gather(
        self,
        include: ContextFlags,
        file_path: Optional[PathLike] = None,
        selection: Optional[str] = None
    ) -> PromptContext:
        """
        Build a PromptContext for the sections the flags ask for.

        File details are filled whenever a file is given; the flags still
        decide what gets rendered.
        """
        file_name = path_str = language = None
        if file_path is not None:
            path = Path(file_path)
            file_name = path.name
            path_str = str(path)
            language = detect_language(path)

        return PromptContext(
            file_name=file_name,
            file_path=path_str,
            language=language,
            selected_code=selection or None,
            project_structure=self.project_structure() if include.project else None,
            git_status=self.git_status() if include.git else None,
            related_files=(
                self.related_files(file_path)
                if include.related and file_path is not None else None
            ),
        )

    def project_structure(self, max_depth: int = MAX_DEPTH) -> Optional[str]:
        """Indented tree of the project root, directories first."""
        try:
            return self._build_structure(self.root, max_depth, "")
        except OSError as e:
            logger.debug("Could not read project structure: %s", e)
            return None

    def git_status(self) -> Optional[str]:
        """Output of `git status --short`, or "No changes" when clean."""
        try:
            completed = subprocess.run(
                ["git", "status", "--short"],
                cwd=self.root,
                capture_output=True,
                text=True,
                timeout=GIT_TIMEOUT_SECONDS,
                check=True,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug("git status failed: %s", e)
            return None

        output = completed.stdout.strip()
        return output or "No changes"

    def related_files(self, file_path: PathLike) -> Optional[List[str]]:
        """Relative imports found in a source file, deduplicated in order."""
        try:
            text = Path(file_path).read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.debug("Could not read %s: %s", file_path, e)
            return None

        found = []
        for pattern in IMPORT_PATTERNS:
            for match in pattern.finditer(text):
                target = match.group(1)
                if target.startswith((".", "/")):
                    found.append(target)

        return list(dict.fromkeys(found)) or None

    def _build_structure(self, directory: Path, depth: int, prefix: str) -> str:
        if depth <= 0:
            return ""

        entries = [
            entry for entry in directory.iterdir()
            if entry.name not in IGNORE_DIRS
            and entry.name not in IGNORE_FILES
            and not entry.name.startswith(".")
        ]
        entries.sort(key=lambda e: (not e.is_dir(), e.name.lower()))

        lines = []
        for entry in entries[:MAX_ENTRIES]:
            if entry.is_dir():
                lines.append(f"{prefix}📁 {entry.name}/")
                if depth > 1:
                    sub = self._build_structure(entry, depth - 1, prefix + "  ")
                    if sub:
                        lines.append(sub)
            else:
                lines.append(f"{prefix}📄 {entry.name}")

        if len(entries) > MAX_ENTRIES:
            lines.append(f"{prefix}... and {len(entries) - MAX_ENTRIES} more items")

        return "\n".join(lines)
