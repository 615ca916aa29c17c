import time

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry


def make_session(retries=3, backoff=0.6):
    s = requests.Session()
    retry = Retry(
        total=retries,
        backoff_factor=backoff,
        status_forcelist=[429, 500, 502, 503, 504],
        allowed_methods=["POST"],
    )
    adapter = HTTPAdapter(max_retries=retry)
    s.mount("http://", adapter)
    s.mount("https://", adapter)
    return s


_session = make_session(retries=4, backoff=0.8)


def post_with_retries(url, json_payload, timeout=10, session=None):
    """
    Returns (True, elapsed_seconds) on success,
            (False, exception) on failure.
    """
    session = session or _session
    try:
        t0 = time.time()
        r = session.post(url, json=json_payload, timeout=timeout)
        r.raise_for_status()
        return True, (time.time() - t0)
    except requests.RequestException as e:
        return False, e


def ship_sample(url, sample, session=None):
    """POST a sample to the ingest endpoint; report the outcome, never raise."""
    ok, info = post_with_retries(url, sample.to_payload(), session=session)
    if ok:
        print(f"[POST] Sent OK to {url} | took {info:.2f}s")
    else:
        print(f"[POST] Failed to send to {url}: {info}")
    return ok
