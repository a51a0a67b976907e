"""Persisted per-user settings for etcdlauncher."""

import os
import re
import shlex
import tempfile
from pathlib import Path
from typing import Dict

from etcdlauncher.constants import PROG_NAME
from etcdlauncher.errors import LauncherError
from etcdlauncher.errors_catalog import actionable_error
from etcdlauncher.services.validation import ValidationService

_ASSIGNMENT = re.compile(r"^([A-Za-z_][A-Za-z0-9_]*)=(.*)$")


class SettingsService:
    """Loads and saves the ``key="value"`` settings file in the home directory.

    The password is never written: only the keys in ``FIELDS`` are persisted.
    Each value must fit on one line, and saved ports must be valid ports.
    """

    PORT_KEYS = ("port", "etcdport")

    FIELDS = {
        "IMAGE": "image_name",
        "certfile": "cert_file",
        "keyfile": "key_file",
        "cafile": "ca_file",
        "port": "port",
        "etcdport": "etcd_port",
        "host": "host",
        "authuser": "auth_user",
    }

    def __init__(
        self,
        settings_file: str,
        logger,
        prog: str = PROG_NAME,
        validation_service=None,
    ):
        self.settings_file = settings_file
        self.logger = logger
        self.prog = prog
        self.validation_service = validation_service or ValidationService()

    def exists(self) -> bool:
        return os.path.isfile(self.settings_file)

    def read_text(self) -> str:
        try:
            return Path(self.settings_file).read_text(encoding="utf-8")
        except OSError as exc:
            raise LauncherError(
                f"Could not read settings file '{self.settings_file}': {exc}"
            ) from exc

    def load(self) -> Dict[str, str]:
        values: Dict[str, str] = {}
        for number, line in enumerate(self.read_text().splitlines(), start=1):
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue

            match = _ASSIGNMENT.match(stripped)
            if not match:
                self._invalid(f"line {number} is not a key=\"value\" assignment")

            key, raw_value = match.groups()
            if key not in self.FIELDS:
                self._invalid(f"unknown key '{key}' on line {number}")

            try:
                tokens = shlex.split(raw_value)
            except ValueError as exc:
                self._invalid(f"line {number} has a malformed value ({exc})")
            if len(tokens) > 1:
                self._invalid(f"line {number} has more than one value")

            values[key] = tokens[0] if tokens else ""
        return values

    def apply(self, config, values: Dict[str, str]):
        for key, value in values.items():
            if key in self.PORT_KEYS and value and not self.validation_service.is_port(value):
                self._invalid(f"{key} '{value}' is not a port between 1 and 65535")
            setattr(config, self.FIELDS[key], value)

    def save(self, config):
        self.logger.info("Saving settings to '%s'", self.settings_file)

        lines = []
        for key, attribute in self.FIELDS.items():
            value = getattr(config, attribute)
            if self.validation_service.has_control_characters(value):
                raise LauncherError(
                    f"Refusing to save settings: {key} contains a newline "
                    "or another control character."
                )
            lines.append(f'{key}="{self._escape(value)}"')
        content = "\n".join(lines) + "\n"

        directory = os.path.dirname(self.settings_file) or "."
        fd, temp_path = tempfile.mkstemp(prefix=".etcd-browserrc-", dir=directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as file_obj:
                file_obj.write(content)
            os.replace(temp_path, self.settings_file)
        except OSError as exc:
            raise LauncherError(
                f"Could not write settings file '{self.settings_file}': {exc}"
            ) from exc
        finally:
            if os.path.exists(temp_path):
                try:
                    os.remove(temp_path)
                except OSError:
                    pass

    def delete(self):
        self.logger.info("Deleting settings in %s", self.settings_file)
        try:
            os.remove(self.settings_file)
        except FileNotFoundError:
            self.logger.debug("No settings file to delete at %s", self.settings_file)
        except OSError as exc:
            raise LauncherError(
                f"Could not delete settings file '{self.settings_file}': {exc}"
            ) from exc

    def _invalid(self, reason: str):
        raise LauncherError(
            actionable_error(
                "invalid_settings",
                path=self.settings_file,
                reason=reason,
                prog=self.prog,
            )
        )

    @staticmethod
    def _escape(value: str) -> str:
        return value.replace("\\", "\\\\").replace('"', '\\"')
