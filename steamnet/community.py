"""Session cookies for the Steam Community website."""

from __future__ import annotations

from urllib.parse import quote_plus

import requests
from requests.cookies import RequestsCookieJar

COOKIE_DOMAIN = "steamcommunity.com"


def set_cookies(
    session: requests.Session, session_id: str, steam_login: str, steam_login_secure: str
) -> None:
    """Store the community login cookies in the session's cookie jar."""
    if session.cookies is None:
        session.cookies = RequestsCookieJar()
    cookies = {
        # Steam URL-decodes the session id, so it is escaped here.
        "sessionid": quote_plus(session_id),
        # steamLogin arrives already URL-encoded.
        "steamLogin": steam_login,
        "steamLoginSecure": steam_login_secure,
    }
    for name, value in cookies.items():
        session.cookies.set(name, value, domain=COOKIE_DOMAIN, path="/")