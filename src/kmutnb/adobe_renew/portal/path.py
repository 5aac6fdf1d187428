from dataclasses import dataclass

HOSTNAME = "https://software.kmutnb.ac.th"


@dataclass(frozen=True)
class Path:
    """URL constants for the KMUTNB software portal.

    Contains the origin and the endpoints used for login and Adobe
    reservation. Pass a different instance to point the portal elsewhere.
    """

    ORIGIN: str = HOSTNAME
    LOGIN: str = f"{HOSTNAME}/login/"
    # Sent as the Referer of the reservation request, never requested itself
    ADOBE_PROCESS: str = f"{HOSTNAME}/adobe-reserve/processa.php"
    ADOBE_RESERVE: str = f"{HOSTNAME}:443/adobe-reserve/add2.php"

    @classmethod
    def for_hostname(cls, hostname: str) -> "Path":
        hostname = hostname.rstrip("/")
        if hostname == HOSTNAME:
            return cls()
        return cls(
            ORIGIN=hostname,
            LOGIN=f"{hostname}/login/",
            ADOBE_PROCESS=f"{hostname}/adobe-reserve/processa.php",
            ADOBE_RESERVE=f"{hostname}/adobe-reserve/add2.php",
        )
