"""Docker runtime services for etcdlauncher."""

import shlex
from typing import List, Protocol

from etcdlauncher.errors import LauncherError
from etcdlauncher.models import ContainerRequest

ENV_FORMAT = "{{range .Config.Env}}{{println .}}{{end}}"


class ContainerRuntime(Protocol):
    """The container operations the launcher depends on."""

    def exists(self, name: str) -> bool:
        ...

    def environment(self, name: str) -> List[str]:
        ...

    def create(self, request: ContainerRequest) -> int:
        ...

    def start(self, name: str, interactive: bool = False) -> int:
        ...

    def stop(self, name: str) -> int:
        ...


class DockerRuntimeService:
    """Drives the ``docker`` CLI.

    Inspect queries always run. Mutating commands are echoed first and are
    skipped entirely in dry-run mode; otherwise they run synchronously in
    foreground mode or detached in background mode.
    """

    def __init__(self, command_runner, logger, dry_run: bool = False, foreground: bool = False):
        self.command_runner = command_runner
        self.logger = logger
        self.dry_run = dry_run
        self.foreground = foreground

    def exists(self, name: str) -> bool:
        result = self._inspect(["docker", "inspect", "--type=container", name])
        return result is not None and result.returncode == 0

    def environment(self, name: str) -> List[str]:
        result = self._inspect(
            ["docker", "inspect", "--type=container", f"--format={ENV_FORMAT}", name]
        )
        if result is None or result.returncode != 0:
            return []
        return [line for line in (result.stdout or "").splitlines() if line.strip()]

    def _inspect(self, cmd: List[str]):
        """Run a read-only query. In dry-run mode a missing docker means no container."""
        try:
            return self.command_runner.run(cmd, check=False, capture_output=True)
        except LauncherError as exc:
            if not self.dry_run:
                raise
            self.logger.debug("Treating container as absent in dry run: %s", exc)
            return None

    def build_run_command(self, request: ContainerRequest) -> List[str]:
        cmd = ["docker", "run", "--name", request.name]
        if request.remove:
            cmd.append("--rm")
        for key, value in request.environment.items():
            cmd.extend(["--env", f"{key}={value}"])
        for host_path, container_path in request.volumes:
            cmd.extend(["-v", f"{host_path}:{container_path}"])
        for mapping in request.ports:
            cmd.extend(["-p", mapping])
        if request.interactive:
            cmd.extend(["-t", "-i"])
        cmd.append(request.image)
        return cmd

    def create(self, request: ContainerRequest) -> int:
        return self._execute(self.build_run_command(request))

    def start(self, name: str, interactive: bool = False) -> int:
        cmd = ["docker", "start"]
        if interactive:
            cmd.extend(["-a", "-i"])
        cmd.append(name)
        return self._execute(cmd)

    def stop(self, name: str) -> int:
        return self._execute(["docker", "stop", name])

    def _execute(self, cmd: List[str]) -> int:
        self.logger.info("Run: %s", shlex.join(cmd))

        if self.dry_run:
            self.logger.info("Debug mode enabled - will not execute")
            return 0

        if self.foreground:
            return self.command_runner.run(cmd, check=False).returncode

        self.command_runner.spawn(cmd)
        return 0
