"""Custom exception hierarchy for the Adobe renewal tool.

Every error carries the process exit code the command line reports it with.
"""


class RenewError(Exception):
    exit_code = 1


class ConfigError(RenewError):
    """Error caused by invalid user configuration."""

    exit_code = 2


class ClientBuildError(RenewError):
    """Error caused by failure to construct the HTTP session."""

    exit_code = 3


class TransportError(RenewError):
    """The portal could not be reached (timeout, DNS, connection reset)."""

    exit_code = 4


class LoginError(RenewError):
    """The portal was reached but rejected the login."""

    exit_code = 5

    def __init__(self, status_code: int):
        super().__init__(f"Login failed with status: {status_code}")
        self.status_code = status_code
