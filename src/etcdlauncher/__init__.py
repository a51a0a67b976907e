"""
etcdlauncher - configure and run the etcd-browser web UI in docker
"""

__version__ = "1.0.0"

from .core import Launcher
from .errors import LauncherError

__all__ = ["Launcher", "LauncherError"]
