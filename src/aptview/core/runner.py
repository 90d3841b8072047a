# List command execution, locally or over ssh
import os
import shlex
import subprocess
from typing import List, Optional

from .exceptions import CommandError


class CommandRunner:
    """Runs a list command and returns its standard output."""

    def __init__(self, ssh_command: str = "ssh"):
        """
        Initialize command runner.

        Args:
            ssh_command: ssh executable used for remote targets
        """
        self.ssh_command = ssh_command

    def build_argv(self, command: str, target: Optional[str] = None) -> List[str]:
        """
        Build argv for a command.

        Args:
            command: Shell-style command string
            target: Optional remote target in user@host form

        Returns:
            Argument list for subprocess
        """
        if target:
            return [self.ssh_command, "-o", "BatchMode=yes", target, command]
        return shlex.split(command)

    def run(self, command: str, target: Optional[str] = None) -> str:
        """
        Run command and capture its output.

        Args:
            command: Shell-style command string
            target: Optional remote target in user@host form

        Returns:
            Standard output as text

        Raises:
            CommandError: If the command cannot be started or fails
        """
        where = f" on {target}" if target else ""
        # apt output is parsed by column, keep it untranslated
        env = {**os.environ, "LC_ALL": "C"}

        try:
            argv = self.build_argv(command, target)
            process = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                env=env,
            )
        except (OSError, ValueError) as e:
            raise CommandError(
                f"Failed to run command{where}: {command}", details=str(e)
            ) from e

        if process.returncode != 0:
            raise CommandError(
                f"Command failed{where}: {command}",
                details=process.stderr.strip() or f"exit status {process.returncode}",
            )

        return process.stdout

    __call__ = run
