"""Subprocess execution service for etcdlauncher."""

import shlex
import subprocess
from typing import List

from etcdlauncher.errors import LauncherError


class CommandRunner:
    """Runs external commands with consistent error handling."""

    def __init__(self, logger, subprocess_module=subprocess):
        self.logger = logger
        self.subprocess = subprocess_module

    def run(
        self,
        cmd: List[str],
        check: bool = True,
        capture_output: bool = False,
    ) -> subprocess.CompletedProcess:
        cmd_str = shlex.join(cmd)
        self.logger.debug("Executing: %s", cmd_str)

        try:
            result = self.subprocess.run(cmd, text=True, capture_output=capture_output)
        except FileNotFoundError as exc:
            raise LauncherError(
                f"Required command not found: {cmd[0]}. Please install it and try again."
            ) from exc
        except OSError as exc:
            raise LauncherError(f"Failed to execute command: {cmd_str}. {exc}") from exc

        if capture_output and result.stdout:
            self.logger.debug("Command output: %s", result.stdout.strip())

        if result.returncode == 0:
            return result

        stderr = (result.stderr or "").strip() if capture_output else ""
        message = f"Command failed ({result.returncode}): {cmd_str}"
        if stderr:
            message = f"{message}\n{stderr}"

        if check:
            raise LauncherError(message)

        self.logger.debug(message)
        return result

    def spawn(self, cmd: List[str]) -> subprocess.Popen:
        """Start a command in its own session and return without waiting.

        Nothing reaps the returned process: background runs are fire-and-forget
        and the launcher exits right after spawning them.
        """
        cmd_str = shlex.join(cmd)
        self.logger.debug("Spawning: %s", cmd_str)

        try:
            return self.subprocess.Popen(
                cmd,
                stdin=self.subprocess.DEVNULL,
                start_new_session=True,
            )
        except FileNotFoundError as exc:
            raise LauncherError(
                f"Required command not found: {cmd[0]}. Please install it and try again."
            ) from exc
        except OSError as exc:
            raise LauncherError(f"Failed to execute command: {cmd_str}. {exc}") from exc
