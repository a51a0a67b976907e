"""Automatic discovery of etcd client certificates."""

import os
from typing import Dict, Optional, Tuple

from etcdlauncher.constants import CERT_STYLE_AUTO, CERTIFICATE_STYLES


class CertificateService:
    """Locates client cert, key and CA files from well-known layouts."""

    def __init__(self, logger, styles: Optional[Dict[str, Tuple[str, str, str, str]]] = None):
        self.logger = logger
        self.styles = CERTIFICATE_STYLES if styles is None else styles

    def detect_style(self) -> Optional[str]:
        for style, (directory, *_files) in self.styles.items():
            if os.path.isdir(directory):
                return style
        return None

    def discover(self, config):
        """Fill in certificate paths for ``config.cert_style``.

        Only called when no settings were saved. Leaves the config alone
        when no known layout is present on this system.
        """
        if config.cert_style == CERT_STYLE_AUTO:
            detected = self.detect_style()
            if detected:
                self.logger.debug("Detected %s certificate layout", detected)
                config.cert_style = detected

        layout = self.styles.get(config.cert_style)
        if layout is None:
            return

        directory, cert_name, key_name, ca_name = layout
        config.cert_file = os.path.join(directory, cert_name)
        config.key_file = os.path.join(directory, key_name)
        config.ca_file = os.path.join(directory, ca_name)
