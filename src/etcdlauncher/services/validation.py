"""Input validation helpers for etcdlauncher."""

import re
from pathlib import Path

from etcdlauncher.errors import UsageError, ValidationError
from etcdlauncher.errors_catalog import actionable_error


class ValidationService:
    """Checks configured paths and ports before they reach the container runtime."""

    def ensure_file(self, path: str, label: str, option: str):
        if not path:
            return
        if not Path(path).is_file():
            raise ValidationError(
                actionable_error("file_not_found", path=path, label=label, option=option)
            )

    def ensure_certificate_files(self, config):
        self.ensure_file(config.ca_file, "CA file", "ca")
        self.ensure_file(config.cert_file, "client certificate", "cert")
        self.ensure_file(config.key_file, "client key", "key")

    @staticmethod
    def is_port(value: str) -> bool:
        return bool(re.fullmatch(r"[0-9]{1,5}", value)) and 1 <= int(value) <= 65535

    @staticmethod
    def has_control_characters(value: str) -> bool:
        return re.search(r"[\x00-\x1f\x7f]", value) is not None

    def ensure_port(self, value: str, label: str, option: str):
        if not value:
            return
        if not self.is_port(value):
            raise UsageError(
                actionable_error("invalid_port", value=value, label=label, option=option)
            )

    def ensure_single_line(self, value: str, option: str):
        if self.has_control_characters(value):
            raise UsageError(actionable_error("control_characters", option=option))
