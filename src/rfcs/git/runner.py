"""Run git commands against a local checkout.

All repository access goes through the git command-line interface; there is
no GitPython or libgit2 binding.  ``GitRunner.run`` never raises for a
non-zero exit status: callers inspect the returned ``GitResult`` and decide
which error to raise.  Output bytes that are not valid UTF-8 (an old branch
name, say) are kept as surrogate escapes so they can be passed back to git.
"""

from __future__ import annotations

import logging
import os
import subprocess
import time
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from ..constants import GIT_TIMEOUT_S
from ..errors import GitError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GitResult:
    """Outcome of a single git invocation."""

    argv: tuple[str, ...]
    exit_code: int
    stdout: str
    stderr: str
    duration_ms: int
    timed_out: bool = False

    @property
    def ok(self) -> bool:
        return self.exit_code == 0 and not self.timed_out

    @property
    def message(self) -> str:
        """Git's own diagnostic, stripped, falling back to stdout."""
        return (self.stderr or self.stdout).strip()


class GitRunner:
    """Execute ``git`` subcommands inside ``cwd``."""

    def __init__(self, cwd: Path, timeout_s: int = GIT_TIMEOUT_S) -> None:
        self.cwd = Path(cwd)
        self.timeout_s = timeout_s

    def _env(self) -> dict[str, str]:
        # Never block on a credential prompt
        return {**os.environ, "GIT_TERMINAL_PROMPT": "0"}

    def run(self, args: Sequence[str], timeout_s: int | None = None) -> GitResult:
        argv = ("git", *args)
        timeout = timeout_s or self.timeout_s
        logger.debug("Running %s in %s", " ".join(argv), self.cwd)

        timed_out = False
        start_ns = time.time_ns()
        try:
            proc = subprocess.run(
                list(argv),
                cwd=str(self.cwd),
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                shell=False,
                timeout=timeout,
                text=True,
                errors="surrogateescape",
                env=self._env(),
            )
            stdout = proc.stdout or ""
            stderr = proc.stderr or ""
            exit_code = proc.returncode
        except subprocess.TimeoutExpired:
            timed_out = True
            stdout = ""
            stderr = f"git {args[0] if args else ''} timed out after {timeout}s"
            exit_code = 124
        except OSError as exc:
            raise GitError(f"Unable to run git in {self.cwd}: {exc}") from exc

        duration_ms = int((time.time_ns() - start_ns) / 1_000_000)
        result = GitResult(
            argv=argv,
            exit_code=exit_code,
            stdout=stdout,
            stderr=stderr,
            duration_ms=duration_ms,
            timed_out=timed_out,
        )
        if not result.ok:
            logger.debug("%s exited with %d: %s", " ".join(argv), exit_code, result.message)
        return result

    def check(self, args: Sequence[str], timeout_s: int | None = None) -> GitResult:
        """Like ``run`` but raise ``GitError`` on failure."""
        result = self.run(args, timeout_s=timeout_s)
        if not result.ok:
            raise GitError(f"git {' '.join(args)} failed: {result.message}")
        return result
