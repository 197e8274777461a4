"""Shell execution utilities.

Runs external programs, captures their output as text and classifies
the exit status. Every failure is raised as a ``ProcessError`` subclass.
"""

import logging
import shutil
import subprocess
from collections.abc import Collection
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Output of package manager CLIs is always decoded as UTF-8
_ENCODING = "utf-8"


class ProcessError(Exception):
    """Base exception for external process failures."""


class SpawnFailure(ProcessError):
    """Raised when a program cannot be started (e.g. not found)."""

    def __init__(self, program: str, error: OSError) -> None:
        self.program = program
        self.error = error
        reason = "command not found" if isinstance(error, FileNotFoundError) else str(error)
        super().__init__(f"{program} failed to run: {reason}")


class NonSuccessExit(ProcessError):
    """Raised when a program exits with a code outside the allowed set.

    Attributes:
        label: Program and arguments joined into one string.
        returncode: Exit code of the program.
        stderr: Captured standard error.
    """

    def __init__(self, label: str, returncode: int, stderr: str) -> None:
        self.label = label
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.strip() or "unknown error"
        super().__init__(f"{label} failed (exit {returncode}): {detail}")


class DecodeFailure(ProcessError):
    """Raised when program output is not valid text."""

    def __init__(self, label: str, stream: str, error: UnicodeDecodeError) -> None:
        self.label = label
        self.stream = stream
        super().__init__(f"{label} produced invalid {_ENCODING} on {stream}: {error.reason}")


class CommandTimeout(ProcessError):
    """Raised when a caller-imposed timeout expires."""

    def __init__(self, label: str, timeout: float) -> None:
        self.label = label
        self.timeout = timeout
        super().__init__(f"{label} timed out after {timeout:g}s")


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of a shell command execution.

    Attributes:
        stdout: Standard output from the command.
        stderr: Standard error from the command.
        returncode: Exit code of the command.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if command exited with status 0."""
        return self.returncode == 0


def run_command(
    args: list[str],
    *,
    allowed_exit_codes: Collection[int] = (),
    timeout: float | None = None,
    cwd: str | None = None,
) -> CommandResult:
    """Execute a command and return its decoded output.

    Exit code 0 is always accepted. Codes listed in ``allowed_exit_codes``
    are accepted as well; any other code raises ``NonSuccessExit``.

    Args:
        args: Program and arguments to execute.
        allowed_exit_codes: Non-zero exit codes to treat as success.
        timeout: Maximum time in seconds to wait. None waits forever.
        cwd: Working directory for the command. If None, uses current directory.

    Returns:
        CommandResult with stdout, stderr, and returncode.

    Raises:
        SpawnFailure: If the program cannot be started.
        NonSuccessExit: If the exit code is not accepted.
        DecodeFailure: If stdout or stderr is not valid UTF-8.
        CommandTimeout: If ``timeout`` expires.
    """
    label = " ".join(args)
    logger.debug("Running %s", label)

    try:
        completed = subprocess.run(
            args,
            capture_output=True,
            check=False,
            timeout=timeout,
            cwd=cwd,
        )
    except subprocess.TimeoutExpired as e:
        raise CommandTimeout(label, e.timeout) from e
    except OSError as e:
        raise SpawnFailure(args[0], e) from e

    stdout = _decode(completed.stdout, label, "stdout")
    stderr = _decode(completed.stderr, label, "stderr")

    if completed.returncode != 0 and completed.returncode not in allowed_exit_codes:
        raise NonSuccessExit(label, completed.returncode, stderr)

    return CommandResult(stdout=stdout, stderr=stderr, returncode=completed.returncode)


def _decode(data: bytes | None, label: str, stream: str) -> str:
    """Decode captured output strictly.

    Args:
        data: Raw bytes captured from the process.
        label: Command label used in error messages.
        stream: Stream name ("stdout" or "stderr").

    Returns:
        Decoded text.

    Raises:
        DecodeFailure: If the bytes are not valid UTF-8.
    """
    if not data:
        return ""
    try:
        return data.decode(_ENCODING)
    except UnicodeDecodeError as e:
        raise DecodeFailure(label, stream, e) from e


def command_exists(name: str) -> bool:
    """Check if a command exists in the system PATH.

    Args:
        name: Command name to check.

    Returns:
        True if command exists, False otherwise.
    """
    return shutil.which(name) is not None
