from datetime import date
from enum import Enum

from loguru import logger

from kmutnb.adobe_renew.config import Config
from kmutnb.adobe_renew.expiry import date_expire_for
from kmutnb.adobe_renew.portal.portal import Portal


class RenewalState(Enum):
    START = "start"
    LOGGED_IN = "logged_in"
    RESERVATION_SUBMITTED = "reservation_submitted"
    DONE = "done"


class AdobeRenewal:
    """Log in, then renew the Adobe reservation until the start of next month.

    The state only moves forward. If a step raises, the state stays where the
    run stopped and the error propagates to the caller.
    """

    def __init__(self, config: Config, portal: Portal | None = None, today: date | None = None):
        self.conf = config
        self.portal = portal or Portal(config)
        self.date_expire = date_expire_for(today or date.today())
        self.state = RenewalState.START

    def start(self) -> str | None:
        """Run the renewal and return the reservation response body.

        Returns None on a dry run.
        """
        if self.conf.dry_run:
            logger.info("Dry run enabled. No requests will be sent.")
            logger.info(f"Login endpoint: {self.portal.path.LOGIN}")
            logger.info(f"Reservation endpoint: {self.portal.path.ADOBE_RESERVE}")
            logger.info(f"date_expire would be {self.date_expire}")
            return None

        with self.portal:
            self.portal.login()
            self.state = RenewalState.LOGGED_IN

            body = self.portal.reserve(self.date_expire)
            self.state = RenewalState.RESERVATION_SUBMITTED

        print(body)
        self.state = RenewalState.DONE
        logger.success("Adobe reservation submitted.")
        return body
