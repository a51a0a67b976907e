"""Command-line option parsing for etcdlauncher."""

import re
from typing import Iterable, List

from etcdlauncher.constants import PROG_NAME
from etcdlauncher.errors import UsageError
from etcdlauncher.errors_catalog import actionable_error
from etcdlauncher.models import ConfigOption, ParsedArguments
from etcdlauncher.services.validation import ValidationService

HELP_FLAGS = {"-h", "-help", "--help"}
INTERACTIVE_FLAGS = {"-i", "-interactive", "--interactive"}
FOREGROUND_FLAGS = {"-fg", "-foreground", "--foreground"}
DEBUG_FLAGS = {"-d", "-debug", "--debug"}
KEEP_FLAGS = {"-k", "-keep", "--keep"}
REMOVE_FLAGS = {"--rm"}
VERBOSE_FLAGS = {"-verbose", "--verbose"}
RESOLVE_FLAGS = {"-r", "-resolve", "--resolve"}

ACTION_FLAGS = {
    "-stop": "stop",
    "--stop": "stop",
    "-reset": "reset",
    "--reset": "reset",
}

VALUE_OPTIONS = (
    ("--image=", "image_name"),
    ("--user=", "auth_user"),
    ("--pass=", "auth_pass"),
    ("--port=", "port"),
    ("--cert=", "cert_file"),
    ("--key=", "key_file"),
    ("--ca=", "ca_file"),
    ("--etcd=", "etcd_port"),
    ("--host=", "host"),
)

PORT_FIELDS = {
    "port": ("web interface port", "port"),
    "etcd_port": ("etcd daemon port", "etcd"),
}

NAME_OPTION = "--name="
LOG_FILE_OPTION = "--log-file="
NAME_SUFFIX = re.compile(r"^[a-zA-Z0-9]")


class OptionService:
    """Turns argv into ``ParsedArguments`` and applies deferred options to a config.

    Mode flags, names and actions are settled while parsing. Configuration
    options are kept in order and applied later, once the launcher knows
    whether the target container already exists.
    """

    def __init__(self, validation_service=None, prog: str = PROG_NAME):
        self.validation_service = validation_service or ValidationService()
        self.prog = prog

    def parse(self, argv: Iterable[str]) -> ParsedArguments:
        parsed = ParsedArguments()

        for arg in argv:
            if arg in HELP_FLAGS:
                parsed.show_help = True
            elif arg in INTERACTIVE_FLAGS:
                parsed.interactive = True
                parsed.foreground = True
            elif arg in FOREGROUND_FLAGS:
                parsed.foreground = True
            elif arg in DEBUG_FLAGS:
                parsed.debug = True
            elif arg in REMOVE_FLAGS:
                parsed.keep = False
            elif arg in KEEP_FLAGS:
                parsed.keep = True
            elif arg in VERBOSE_FLAGS:
                parsed.verbose = True
            elif arg.startswith(LOG_FILE_OPTION):
                parsed.log_file = arg[len(LOG_FILE_OPTION):] or None
            elif arg.startswith(NAME_OPTION):
                parsed.container_name = arg[len(NAME_OPTION):]
                parsed.name_suffix = None
                parsed.keep = True
            elif NAME_SUFFIX.match(arg):
                parsed.name_suffix = arg
                parsed.container_name = None
                parsed.keep = True
            elif arg in ACTION_FLAGS:
                parsed.actions.append(ACTION_FLAGS[arg])
            else:
                parsed.options.append(self._parse_option(arg))

        return parsed

    def _parse_option(self, arg: str) -> ConfigOption:
        if arg in RESOLVE_FLAGS:
            return ConfigOption(raw=arg, field="resolve")

        for prefix, field_name in VALUE_OPTIONS:
            if arg.startswith(prefix):
                return ConfigOption(raw=arg, field=field_name, value=arg[len(prefix):])

        return ConfigOption(raw=arg)

    def apply(self, config, options: List[ConfigOption]):
        for option in options:
            if option.field is None:
                raise UsageError(
                    actionable_error("unrecognised_option", option=option.raw, prog=self.prog)
                )

            if option.field == "resolve":
                config.resolve = True
                # Re-derive the address with resolution enabled.
                config.address = ""
                continue

            flag = option.raw.split("=", 1)[0].lstrip("-")
            self.validation_service.ensure_single_line(option.value, flag)

            if option.field == "host":
                config.set_host(option.value)
            elif option.field in PORT_FIELDS:
                label, flag = PORT_FIELDS[option.field]
                self.validation_service.ensure_port(option.value, label, flag)
                setattr(config, option.field, option.value)
            else:
                setattr(config, option.field, option.value)
