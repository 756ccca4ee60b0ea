"""Process-wide settings, read once from the environment.

- DD_ADMISSION_CONTROLLER_AUTO_INSTRU_CONTAINER_REGISTRY (default: gcr.io/datadoghq)
- DD_ADMISSION_CONTROLLER_AUTO_INSTRU_ENABLED (default: true)
- CERT_FILE (default: /tls/tls.crt)
- KEY_FILE (default: /tls/tls.key)
- PORT (default: 8443)
- LOG_LEVEL (default: INFO)
"""

import os

_TRUTHY = ("1", "true", "yes", "on")


def env_bool(name: str, default: bool) -> bool:
    """Read a boolean flag; unset means `default`."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


CONTAINER_REGISTRY = os.environ.get("DD_ADMISSION_CONTROLLER_AUTO_INSTRU_CONTAINER_REGISTRY", "gcr.io/datadoghq")
AUTO_INSTRU_ENABLED = env_bool("DD_ADMISSION_CONTROLLER_AUTO_INSTRU_ENABLED", True)

CERT_FILE = os.environ.get("CERT_FILE", "/tls/tls.crt")
KEY_FILE = os.environ.get("KEY_FILE", "/tls/tls.key")
PORT = int(os.environ.get("PORT", "8443"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
