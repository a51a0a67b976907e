"""Container lifecycle for the etcd-browser instance."""

from typing import Dict, List, Tuple

from etcdlauncher.constants import (
    CONTAINER_CA_FILE,
    CONTAINER_CERT_FILE,
    CONTAINER_KEY_FILE,
    ENV_AUTH_PASS,
    ENV_AUTH_USER,
    ENV_CA_FILE,
    ENV_CERT_FILE,
    ENV_ETCD_HOST,
    ENV_ETCD_PORT,
    ENV_KEY_FILE,
    ENV_SERVER_PORT,
    PORT_BIND_ADDRESS,
)
from etcdlauncher.models import ContainerRequest
from etcdlauncher.services.docker_runtime import ContainerRuntime


class ContainerDriver:
    """Translates a ``RunConfig`` into runtime calls."""

    def __init__(self, runtime: ContainerRuntime, validation_service, resolver, logger):
        self.runtime = runtime
        self.validation_service = validation_service
        self.resolver = resolver
        self.logger = logger

    def exists(self, config) -> bool:
        return self.runtime.exists(config.container_name)

    def environment(self, config) -> List[str]:
        return self.runtime.environment(config.container_name)

    def start(self, config) -> int:
        self.logger.info("Starting existing container %s", config.container_name)
        return self.runtime.start(config.container_name, interactive=config.interactive)

    def stop(self, config) -> int:
        return self.runtime.stop(config.container_name)

    def prepare(self, config) -> ContainerRequest:
        """Validate the config and derive the request for a new container.

        Raises ``ValidationError`` before anything reaches the runtime when a
        certificate path is missing. A transient container bumps the save
        counter; kept containers are restarted by name, not reconfigured.
        """
        self.validation_service.ensure_certificate_files(config)

        if not config.address:
            config.address = self.resolver.lookup(config.host, config.resolve)

        if not config.keep:
            config.save_counter += 1

        environment: Dict[str, str] = {}
        volumes: List[Tuple[str, str]] = []
        ports: List[str] = []

        if config.address:
            environment[ENV_ETCD_HOST] = config.address
        if config.port:
            environment[ENV_SERVER_PORT] = config.port
            ports.append(f"{PORT_BIND_ADDRESS}:{config.port}:{config.port}")

        mounts = (
            (config.cert_file, ENV_CERT_FILE, CONTAINER_CERT_FILE),
            (config.key_file, ENV_KEY_FILE, CONTAINER_KEY_FILE),
            (config.ca_file, ENV_CA_FILE, CONTAINER_CA_FILE),
        )
        for host_path, env_name, container_path in mounts:
            if host_path:
                environment[env_name] = container_path
                volumes.append((host_path, container_path))

        if config.etcd_port:
            environment[ENV_ETCD_PORT] = config.etcd_port
        if config.auth_user:
            environment[ENV_AUTH_USER] = config.auth_user
        if config.auth_pass:
            environment[ENV_AUTH_PASS] = config.auth_pass

        return ContainerRequest(
            name=config.container_name,
            image=config.image_name,
            environment=environment,
            volumes=volumes,
            ports=ports,
            remove=not config.keep,
            interactive=config.interactive,
        )

    def create(self, request: ContainerRequest) -> int:
        self.logger.info("Creating container %s from image %s", request.name, request.image)
        return self.runtime.create(request)
