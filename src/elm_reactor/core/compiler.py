"""Elm compilation through the `elm make` command line tool.

The compiler is treated as a black box: source file in, either a rendered
document (or JavaScript for hot swapping) or a diagnostics report out. Compile
failures are ordinary results, not exceptions.
"""

import asyncio
import logging
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

SOURCE_EXTENSION = ".elm"


@dataclass(frozen=True)
class Rendered:
    """Successful compile: an HTML document, or JavaScript when requested."""

    output: str


@dataclass(frozen=True)
class CompileError:
    """Failed compile with the compiler's report."""

    diagnostics: str


CompileOutcome = Rendered | CompileError


def is_source(path: str | Path) -> bool:
    """Whether a file is an Elm source file, judged by its last extension."""
    return Path(path).suffix == SOURCE_EXTENSION


class Compiler(Protocol):
    """Protocol for anything that can compile a source file."""

    async def compile(self, source: Path, *, javascript: bool = False) -> CompileOutcome: ...


class ElmCompiler:
    """Runs `elm make` in a subprocess.

    The subprocess is awaited on the event loop, so a slow compile does not
    hold up other requests.
    """

    def __init__(self, project_dir: Path, *, executable: str = "elm") -> None:
        """Initialize compiler.

        Args:
            project_dir: Directory `elm make` runs in (where elm.json lives)
            executable: Name or path of the elm binary
        """
        self._project_dir = project_dir
        self._executable = executable

    @property
    def executable(self) -> str:
        return self._executable

    async def compile(self, source: Path, *, javascript: bool = False) -> CompileOutcome:
        """Compile a source file.

        Args:
            source: Absolute path to the .elm file
            javascript: Produce bare JavaScript instead of a standalone HTML page

        Returns:
            Rendered on success, CompileError with the report on failure
        """
        suffix = ".js" if javascript else ".html"
        with tempfile.TemporaryDirectory(prefix="elm-reactor-") as tmpdir:
            output_path = Path(tmpdir) / f"elm{suffix}"
            logger.debug(f"Compiling {source} to {output_path}")

            try:
                process = await asyncio.create_subprocess_exec(
                    self._executable,
                    "make",
                    str(source),
                    f"--output={output_path}",
                    cwd=self._project_dir,
                    stdin=asyncio.subprocess.DEVNULL,
                    stdout=asyncio.subprocess.PIPE,
                    stderr=asyncio.subprocess.PIPE,
                )
            except FileNotFoundError:
                logger.warning(f"Elm executable not found: {self._executable}")
                return CompileError(
                    diagnostics=(
                        f"Could not find the `{self._executable}` executable.\n\n"
                        "Install Elm from https://guide.elm-lang.org/install/ or point "
                        "[compiler] executable in reactor.toml at your elm binary."
                    )
                )

            try:
                stdout, stderr = await process.communicate()
            except asyncio.CancelledError:
                # the requester went away; elm make must not outlive it
                process.kill()
                await process.wait()
                logger.debug(f"Cancelled compile of {source}")
                raise

            if process.returncode != 0:
                report = stderr.decode("utf-8", errors="replace") or stdout.decode(
                    "utf-8", errors="replace"
                )
                logger.info(f"Compile failed for {source}")
                return CompileError(diagnostics=report.strip())

            output = await asyncio.to_thread(output_path.read_text, encoding="utf-8")

        logger.info(f"Compiled {source}")
        return Rendered(output=output)
