"""Actionable error catalog for etcdlauncher."""

from typing import Dict

_ERROR_MESSAGES: Dict[str, Dict[str, str]] = {
    "file_not_found": {
        "what": "File '{path}' does not exist.",
        "next": "Check the {label} path or clear it with --{option}=.",
    },
    "unrecognised_option": {
        "what": "Unrecognised option: '{option}'.",
        "next": "Run `{prog} --help` to list the supported options.",
    },
    "invalid_port": {
        "what": "Invalid {label} '{value}'. Ports must be numbers between 1 and 65535.",
        "next": "Pass a numeric port such as `--{option}=8080`.",
    },
    "control_characters": {
        "what": "Option --{option}= contains a newline or another control character.",
        "next": "Pass the value on a single line, without control characters.",
    },
    "container_exists": {
        "what": "Container {name} exists or is running but option {option} is being customised.",
        "next": (
            "Remove the old container first with `{prog} -stop --name={name}` (transient "
            "containers) or `docker stop {name} ; docker rm {name}` (persistent containers), "
            "or else specify a new name with --name=<newname>."
        ),
    },
    "invalid_settings": {
        "what": "Invalid settings file '{path}': {reason}.",
        "next": "Fix the file by hand or delete it with `{prog} --reset`.",
    },
}


def actionable_error(code: str, **kwargs: str) -> str:
    if code not in _ERROR_MESSAGES:
        raise KeyError(f"Unknown error catalog key: {code}")

    template = _ERROR_MESSAGES[code]
    what = template["what"].format(**kwargs)
    next_step = template["next"].format(**kwargs)
    return f"{what} Suggested action: {next_step}"
