"""Network API functions
"""

import logging
from typing import Optional

import requests
from requests import adapters

import qareport


HTTPError = requests.exceptions.HTTPError

# The User-Agent: header to use
USER_AGENT = f'qareport/{qareport.__version__}'

# Seconds to wait for the server before giving up
TIMEOUT = 60


class Session(requests.Session):
    """Set up a requests session with a standard configuration"""

    def __init__(self, total: int = 4, backoff_factor: int = 10,
                 status_forcelist: Optional[list[int]] = None,
                 allowed_methods: Optional[list[str]] = None):
        super().__init__()
        if not status_forcelist:
            status_forcelist = [429, 500, 502, 503, 504]
        if not allowed_methods:
            allowed_methods = ['HEAD', 'GET', 'OPTIONS']

        # This should delay a total of 10+20+40+80 seconds before aborting
        retry_strategy = adapters.Retry(
            total=total, backoff_factor=backoff_factor, status_forcelist=status_forcelist,
            allowed_methods=allowed_methods)
        adapter = adapters.HTTPAdapter(max_retries=retry_strategy)
        self.mount('https://', adapter)
        self.mount('http://', adapter)
        self.headers['User-Agent'] = USER_AGENT


def fetch_text(url: str, session: Optional[requests.Session] = None) -> str:
    """Retrieve the contents of a results file from a URL.

    HTTP errors are raised as HTTPError.
    """
    if session is None:
        session = Session()
    logging.info('Fetching %s', url)
    resp = session.get(url, timeout=TIMEOUT)
    resp.raise_for_status()
    return resp.text
