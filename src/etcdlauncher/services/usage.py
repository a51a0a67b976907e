"""Usage text for the etcd-browser launcher."""

import textwrap
from typing import List, Optional

from etcdlauncher.constants import (
    CERT_STYLE_NONE,
    DEFAULT_ADDRESS,
    DEFAULT_ETCD_PORT,
    DEFAULT_PORT,
    PROG_NAME,
    SETTINGS_FILE_NAME,
)

_USAGE = """\
Usage:  {prog} <options>
Runs etcd-browser by Ryan Henszey
  (see https://github.com/henszey/etcd-browser)

Options:
  [-h|-help|--help]
  [-d|-debug|--debug]              # dry run: print docker commands only
  [-i|-interactive|--interactive]  # Attach a console and run in foreground
  [-fg|-foreground|--foreground]   # Run in foreground
  [-r|-resolve|--resolve]          # resolve host before configuring container
  [-k|-keep|--keep]                # keep configured container afterwards
  [-stop|--stop]                   # stop a running container
  [-reset|--reset]                 # Delete the saved settings
  [--rm]                           # don't keep configured container afterwards
  [--host=<host>]                  # set etcd host
  [--name=<instance name>]         # set the docker container name. also enables -keep
  [--image=<image name>]           # the docker build image name
  [--port=<number>]                # the web interface port (default: {port})
  [--ca=<ca file>]                 # (default:{ca_file})
  [--cert=<client cert file>]      # (default:{cert_file})
  [--key=<client key file>]        # (default:{key_file})
  [--etcd=<etcd daemon port>]      # (default:{etcd_port})
  [--user=<auth username>]         # (default:{auth_user})
  [--pass=<auth password>]
  [--verbose]                      # verbose logging
  [--log-file=<path>]              # also write the log to a file

Config file:
  Settings from each run are saved to / loaded from '~/{settings}' unless a container name was specified.
  The auth password is never saved. To delete old settings, use -reset or delete that file.
  If a container name is specified, the container will be kept and can be restarted with a simple command: {prog} --name=<name>
  or stopped with {prog} --name=<name> -stop
Example usage:

  Configure etcd-browser as a container named etcd-browser-local, then stop/restart it.
    {prog} --host=localhost --name=etcd-browser-local     # configure and start
    {prog} local -stop                                    # stop running container
    {prog} local                                          # restart saved container
  Configure and run transient containers with different settings saved in ~/{settings}
    {prog} --host=etcd.demo
    {prog} -stop
    {prog} --host=localhost
    {prog} -stop
  Configure and save certificate settings, reusing them the next time, changing the web port:
    {prog} --ca=<file> --cert=<file> --key=<file>
    {prog} -stop
    {prog} --port=8080
"""


class UsageService:
    """Renders the help screen, including the effective defaults."""

    def __init__(self, prog: str = PROG_NAME):
        self.prog = prog

    def render(
        self,
        config,
        saved_settings: Optional[str] = None,
        container_env: Optional[List[str]] = None,
    ) -> str:
        """Build the usage text.

        ``container_env`` is ``None`` when no container with the configured
        name exists; otherwise it lists that container's environment.
        """
        sections = [
            _USAGE.format(
                prog=self.prog,
                settings=SETTINGS_FILE_NAME,
                port=config.port or DEFAULT_PORT,
                etcd_port=config.etcd_port or DEFAULT_ETCD_PORT,
                ca_file=config.ca_file,
                cert_file=config.cert_file,
                key_file=config.key_file,
                auth_user=config.auth_user,
            )
        ]

        if saved_settings:
            sections.append(
                "Saved settings (for interactive use):\n"
                + textwrap.indent(saved_settings.rstrip("\n"), "  ")
                + "\n"
            )

        if container_env is not None:
            lines = [
                "Defaults:",
                f"  Existing container {config.container_name}",
                "  With settings:",
            ]
            lines.extend(f"    {entry}" for entry in container_env)
            sections.append("\n".join(lines) + "\n")
            return "\n".join(sections)

        lines = [
            "Defaults:",
            f"  provides web interface on port {config.port or DEFAULT_PORT}",
            "  to view etcd host "
            f"{config.address or DEFAULT_ADDRESS}:{config.etcd_port or DEFAULT_ETCD_PORT}",
        ]
        if config.cert_style != CERT_STYLE_NONE:
            lines.append(f"Certificate locations default to {config.cert_style} on this system:")
        lines.extend(
            [
                f"  CA file {config.ca_file}",
                f"  Client cert file {config.cert_file}",
                f"  Client key file {config.key_file}",
            ]
        )
        sections.append("\n".join(lines) + "\n")
        return "\n".join(sections)
