import math
import os

from dotenv import load_dotenv
from loguru import logger

from kmutnb.adobe_renew.error import ConfigError
from kmutnb.adobe_renew.portal.path import HOSTNAME as DEFAULT_HOSTNAME

DEFAULT_TIMEOUT = 10.0


class Config:
    """Application configuration.

    Handles loading and validation of environment variables for the renewal
    run: portal credentials, TLS verification, request timeout, and the portal
    hostname.
    """

    def __init__(self):
        self.username = ""
        self.password = ""
        self.verify_tls = True
        self.timeout = DEFAULT_TIMEOUT
        self.hostname = DEFAULT_HOSTNAME
        self.dry_run = False

    def load(self) -> "Config":
        """Load environment variables

        Variables already set in the environment take priority over the .env file.
        See .env-example for the available variables.
        """
        load_dotenv()
        username = os.getenv("KMUTNB_USERNAME")
        password = os.getenv("KMUTNB_PASSWORD")
        if not username or not password:
            raise ConfigError("KMUTNB_USERNAME and KMUTNB_PASSWORD environment variables are not set.")

        # KMUTNB credentials
        self.username = username
        self.password = password

        # Certificate validation is only skipped when explicitly asked for
        self.verify_tls = not self._is_truthy(os.getenv("KMUTNB_INSECURE", "false"))

        timeout = os.getenv("KMUTNB_TIMEOUT", str(DEFAULT_TIMEOUT))
        try:
            self.timeout = float(timeout)
        except ValueError:
            raise ConfigError(f"Invalid KMUTNB_TIMEOUT: {timeout!r}") from None
        if not math.isfinite(self.timeout) or self.timeout <= 0:
            raise ConfigError(f"KMUTNB_TIMEOUT must be a positive number, got {timeout!r}")

        hostname = os.getenv("KMUTNB_HOSTNAME", DEFAULT_HOSTNAME).rstrip("/")
        if not hostname.startswith(("http://", "https://")):
            raise ConfigError(f"KMUTNB_HOSTNAME must start with http:// or https://, got {hostname!r}")
        self.hostname = hostname

        logger.debug(f"Configuration loaded for {self.hostname}")
        return self

    def _is_truthy(self, bool_value: str) -> bool:
        return bool_value.lower() in (
            "true",
            "1",
            "yes",
        )
