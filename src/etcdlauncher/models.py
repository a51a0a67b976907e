"""Shared domain models for etcdlauncher."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .constants import CERT_STYLE_AUTO, DEFAULT_IMAGE


@dataclass
class RunConfig:
    """Working configuration for a single launcher invocation."""

    image_name: str = DEFAULT_IMAGE
    container_name: str = ""
    port: str = ""
    etcd_port: str = ""
    host: str = ""
    address: str = ""
    cert_style: str = CERT_STYLE_AUTO
    cert_file: str = ""
    key_file: str = ""
    ca_file: str = ""
    auth_user: str = ""
    auth_pass: str = ""
    resolve: bool = False
    keep: bool = False
    debug: bool = False
    foreground: bool = False
    interactive: bool = False
    save_counter: int = 0

    def set_host(self, host: str):
        """Change the etcd host, dropping any address resolved for the old one."""
        self.host = host
        self.address = ""


@dataclass(frozen=True)
class ConfigOption:
    """A configuration token deferred until the target container is known.

    ``field`` is ``None`` when the token matched no known option.
    """

    raw: str
    field: Optional[str] = None
    value: str = ""


@dataclass
class ParsedArguments:
    """Structured view of the command line, before any business rule runs."""

    show_help: bool = False
    interactive: bool = False
    foreground: bool = False
    debug: bool = False
    keep: Optional[bool] = None
    container_name: Optional[str] = None
    name_suffix: Optional[str] = None
    actions: List[str] = field(default_factory=list)
    options: List[ConfigOption] = field(default_factory=list)
    verbose: bool = False
    log_file: Optional[str] = None


@dataclass(frozen=True)
class ContainerRequest:
    """Everything the runtime needs to create and start a new container."""

    name: str
    image: str
    environment: Dict[str, str] = field(default_factory=dict)
    volumes: List[Tuple[str, str]] = field(default_factory=list)
    ports: List[str] = field(default_factory=list)
    remove: bool = True
    interactive: bool = False
