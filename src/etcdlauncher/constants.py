"""Defaults and fixed names shared across etcdlauncher."""

PROG_NAME = "etcd-browser"

DEFAULT_IMAGE = "etcd-browser"
DEFAULT_PORT = "8000"
DEFAULT_ADDRESS = "localhost"
DEFAULT_ETCD_PORT = "4001"

SETTINGS_FILE_NAME = ".etcd-browserrc"

# Settings are persisted once the counter reaches this value:
# home reachable, options supplied and the container is transient.
SAVE_THRESHOLD = 3

CERT_STYLE_AUTO = "auto"
CERT_STYLE_NONE = "none"
CERT_STYLE_OPENSHIFT_ORIGIN = "openshift-origin"

# style -> (probe directory, client cert, client key, ca file)
CERTIFICATE_STYLES = {
    CERT_STYLE_OPENSHIFT_ORIGIN: (
        "/etc/origin/master",
        "master.etcd-client.crt",
        "master.etcd-client.key",
        "ca.crt",
    ),
}

CONTAINER_CERT_FILE = "/client.crt"
CONTAINER_KEY_FILE = "/client.key"
CONTAINER_CA_FILE = "/ca.crt"

ENV_ETCD_HOST = "ETCD_HOST"
ENV_SERVER_PORT = "SERVER_PORT"
ENV_ETCD_PORT = "ETCD_PORT"
ENV_CERT_FILE = "ETCDCTL_CERT_FILE"
ENV_KEY_FILE = "ETCDCTL_KEY_FILE"
ENV_CA_FILE = "ETCDCTL_CA_FILE"
ENV_AUTH_USER = "AUTH_USER"
ENV_AUTH_PASS = "AUTH_PASS"

PORT_BIND_ADDRESS = "0.0.0.0"
