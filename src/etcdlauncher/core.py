import logging
import os
import subprocess
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from .constants import PROG_NAME, SAVE_THRESHOLD, SETTINGS_FILE_NAME
from .errors import ContainerConflictError, LauncherError, UsageError
from .errors_catalog import actionable_error
from .models import ParsedArguments, RunConfig
from .services.certificates import CertificateService
from .services.command_runner import CommandRunner
from .services.container_driver import ContainerDriver
from .services.docker_runtime import ContainerRuntime, DockerRuntimeService
from .services.options import OptionService
from .services.resolver import HostResolver
from .services.settings import SettingsService
from .services.usage import UsageService
from .services.validation import ValidationService

console = Console(stderr=True)
logger = logging.getLogger("etcdlauncher")


class Launcher:
    """Configures and manages the single etcd-browser container."""

    def __init__(
        self,
        prog: str = PROG_NAME,
        home_dir: Optional[str] = None,
        runtime: Optional[ContainerRuntime] = None,
        command_runner: Optional[CommandRunner] = None,
        resolver: Optional[HostResolver] = None,
        certificate_service: Optional[CertificateService] = None,
    ):
        self.prog = prog
        self.home_dir = home_dir if home_dir is not None else self._find_home()
        self.runtime = runtime

        self.command_runner = command_runner or CommandRunner(
            logger=logger,
            subprocess_module=subprocess,
        )
        self.validation_service = ValidationService()
        self.option_service = OptionService(
            validation_service=self.validation_service,
            prog=self.prog,
        )
        self.usage_service = UsageService(prog=self.prog)
        self.resolver = resolver or HostResolver(command_runner=self.command_runner, logger=logger)
        self.certificate_service = certificate_service or CertificateService(logger=logger)

        self.settings_service: Optional[SettingsService] = None
        if self.home_dir and os.path.isdir(self.home_dir):
            self.settings_service = SettingsService(
                settings_file=os.path.join(self.home_dir, SETTINGS_FILE_NAME),
                logger=logger,
                prog=self.prog,
                validation_service=self.validation_service,
            )

    @staticmethod
    def _find_home() -> Optional[str]:
        try:
            return str(Path.home())
        except (RuntimeError, KeyError):
            return None

    def _build_driver(self, config: RunConfig) -> ContainerDriver:
        runtime = self.runtime or DockerRuntimeService(
            command_runner=self.command_runner,
            logger=logger,
            dry_run=config.debug,
            foreground=config.foreground,
        )
        return ContainerDriver(
            runtime=runtime,
            validation_service=self.validation_service,
            resolver=self.resolver,
            logger=logger,
        )

    def load_defaults(self, config: RunConfig, quiet: bool = False):
        """Populate ``config`` from the settings file, or discover certificates."""
        if self.settings_service and self.settings_service.exists():
            log = logger.debug if quiet else logger.info
            log("Loading settings from %s", self.settings_service.settings_file)
            self.settings_service.apply(config, self.settings_service.load())
        else:
            self.certificate_service.discover(config)

    def save_defaults(self, config: RunConfig):
        if self.settings_service is None:
            return
        if config.debug:
            logger.info("Debug mode enabled - settings not saved")
            return
        self.settings_service.save(config)

    def apply_identity(self, config: RunConfig, arguments: ParsedArguments):
        """Apply the run-mode flags and settle the container name."""
        config.debug = arguments.debug
        config.interactive = arguments.interactive
        config.foreground = arguments.foreground
        if arguments.keep is not None:
            config.keep = arguments.keep

        if arguments.container_name is not None:
            if not arguments.container_name:
                raise UsageError("Option --name= needs a container name.")
            config.container_name = arguments.container_name
        elif arguments.name_suffix is not None:
            config.container_name = f"{config.image_name}-{arguments.name_suffix}"
            logger.info(
                "Using arg '%s' as container name suffix - full name is %s",
                arguments.name_suffix,
                config.container_name,
            )
        else:
            config.container_name = config.image_name

    def render_usage(self, config: RunConfig, container_env: Optional[List[str]] = None) -> str:
        saved_settings = None
        if self.settings_service and self.settings_service.exists():
            saved_settings = self.settings_service.read_text()
        return self.usage_service.render(
            config,
            saved_settings=saved_settings,
            container_env=container_env,
        )

    def show_usage(self, config: RunConfig, arguments: ParsedArguments):
        try:
            self.load_defaults(config, quiet=True)
        except LauncherError as exc:
            logger.warning("Ignoring saved settings: %s", exc)
        self.apply_identity(config, arguments)

        driver = self._build_driver(config)
        container_env = None
        try:
            if driver.exists(config):
                container_env = driver.environment(config)
        except LauncherError as exc:
            logger.warning("Could not inspect container %s: %s", config.container_name, exc)

        if container_env is None and not config.address:
            config.address = self.resolver.lookup(config.host, config.resolve)

        console.print(
            self.render_usage(config, container_env),
            markup=False,
            highlight=False,
            soft_wrap=True,
            end="",
        )

    def launch(self, config: RunConfig, driver: ContainerDriver) -> int:
        if config.interactive:
            logger.info("Running in foreground with an attached console.")
        elif config.foreground:
            logger.info("Running in foreground.")
        else:
            logger.info("Running as daemon.")

        if driver.exists(config):
            return driver.start(config)

        request = driver.prepare(config)

        # Only transient, customised runs from a reachable home are remembered.
        if config.save_counter >= SAVE_THRESHOLD:
            self.save_defaults(config)

        return driver.create(request)

    def _execute(self, config: RunConfig, arguments: ParsedArguments) -> int:
        if arguments.show_help:
            self.show_usage(config, arguments)
            return 0

        action = arguments.actions[0] if arguments.actions else None
        if action == "reset":
            if self.settings_service:
                self.settings_service.delete()
            return 0

        if self.settings_service:
            config.save_counter += 1
            self.load_defaults(config)

        self.apply_identity(config, arguments)
        if action == "stop":
            config.foreground = True

        driver = self._build_driver(config)
        exists = driver.exists(config)
        if not exists and not config.address:
            config.address = self.resolver.lookup(config.host, config.resolve)

        if action == "stop":
            return driver.stop(config)

        if arguments.options:
            if exists:
                raise ContainerConflictError(
                    actionable_error(
                        "container_exists",
                        name=config.container_name,
                        option=arguments.options[0].raw,
                        prog=self.prog,
                    )
                )
            self.option_service.apply(config, arguments.options)
            config.save_counter += 1

        return self.launch(config, driver)

    def run(self, arguments: ParsedArguments) -> int:
        config = RunConfig()

        try:
            return self._execute(config, arguments)
        except UsageError as exc:
            logger.error("%s", exc)
            console.print(
                self.render_usage(config),
                markup=False,
                highlight=False,
                soft_wrap=True,
                end="",
            )
            return exc.exit_code
        except LauncherError as exc:
            logger.error("%s", exc)
            return exc.exit_code
        except KeyboardInterrupt:
            console.print("[bold red]Operation cancelled by user.[/bold red]")
            logger.info("Operation cancelled by user")
            return 1
        except Exception as exc:
            console.print(f"[bold red]Unexpected error:[/bold red] {escape(str(exc))}")
            logger.exception("Unexpected error")
            return 1
