from loguru import logger
import requests
import urllib3
from urllib3.exceptions import InsecureRequestWarning

from kmutnb.adobe_renew.config import Config
from kmutnb.adobe_renew.error import ClientBuildError
from kmutnb.adobe_renew.error import LoginError
from kmutnb.adobe_renew.error import TransportError
from kmutnb.adobe_renew.portal.path import Path

USER_AGENT = "Mozilla/5.0 (X11; Linux x86_64; rv:146.0) Gecko/20100101 Firefox/146.0"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
HTML_ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"


def build_session(verify_tls: bool = True) -> requests.Session:
    """Create the cookie-persisting session shared by login and reservation.

    Args:
        verify_tls: Validate the portal's certificate chain. Passing False is a
            deliberate opt-out for hosts with a broken chain and is logged.

    Raises:
        ClientBuildError: The session could not be constructed.
    """
    try:
        session = requests.Session()
    except Exception as e:
        raise ClientBuildError(f"Failed to build HTTP session: {e}") from e

    if not verify_tls:
        logger.warning("TLS certificate verification is DISABLED. The portal's identity is not checked.")
        urllib3.disable_warnings(InsecureRequestWarning)
        session.verify = False

    return session


def login_headers(path: Path) -> dict[str, str]:
    return {
        "Content-Type": FORM_CONTENT_TYPE,
        "User-Agent": USER_AGENT,
        "Origin": path.ORIGIN,
        "Referer": path.LOGIN,
        "Accept": HTML_ACCEPT,
    }


def reserve_headers(path: Path) -> dict[str, str]:
    return {
        "Content-Type": FORM_CONTENT_TYPE,
        "User-Agent": USER_AGENT,
        "Origin": path.ORIGIN,
        "Referer": path.ADOBE_PROCESS,
    }


class Portal:
    """Form-based client for the KMUTNB software portal.

    One instance owns one session: the cookies set by `login` are the ones
    `reserve` presents, so both calls must go through the same Portal.
    """

    def __init__(self, config: Config, path: Path | None = None):
        self.config = config
        self.path = path or Path.for_hostname(config.hostname)

    def start(self):
        """Open the HTTP session"""
        self.session = build_session(self.config.verify_tls)

    def close(self):
        """Close the HTTP session"""
        # NOTE: self.session is created at self.start(), not self.__init__().
        if hasattr(self, "session"):
            self.session.close()

    def __enter__(self) -> "Portal":
        self.start()
        return self

    def __exit__(self, *exc_info):
        self.close()

    def login(self) -> requests.Response:
        """Submit the login form.

        Raises:
            LoginError: The portal answered with a non-2xx status.
            TransportError: The portal could not be reached.
        """
        data = {
            "myusername": self.config.username,
            "mypassword": self.config.password,
            "Submit": "",
        }
        logger.info(f"Logging in to {self.path.LOGIN}...")
        resp = self._post(self.path.LOGIN, data, login_headers(self.path))

        if not 200 <= resp.status_code < 300:
            raise LoginError(resp.status_code)

        logger.success("Login successful.")
        return resp

    def reserve(self, date_expire: str) -> str:
        """Submit the Adobe reservation form and return the raw response body.

        The body is not inspected; whether the portal accepted the renewal is
        for the operator to read.
        """
        data = {
            "userId": "",
            "date_expire": date_expire,
            "status_number": "0",
            "Submit_get": "",
        }
        logger.info(f"Submitting Adobe reservation with date_expire={date_expire}...")
        resp = self._post(self.path.ADOBE_RESERVE, data, reserve_headers(self.path))

        if not 200 <= resp.status_code < 300:
            logger.warning(f"Reservation request returned status: {resp.status_code}")
        # Without a charset requests falls back to ISO-8859-1
        if "charset" not in resp.headers.get("Content-Type", "").lower():
            resp.encoding = "utf-8"
        return resp.text

    def _post(self, url: str, data: dict[str, str], headers: dict[str, str]) -> requests.Response:
        try:
            return self.session.post(url, data=data, headers=headers, timeout=self.config.timeout)
        except requests.RequestException as e:
            raise TransportError(f"Request to {url} failed: {e}") from e
