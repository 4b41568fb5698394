from __future__ import annotations

import http.client
import urllib.error
import urllib.parse
import urllib.request
from collections.abc import Sequence

from gitignore_gen import __version__

TEMPLATE_API_URL = "https://www.toptal.com/developers/gitignore/api/"
USER_AGENT = f"gitignore-gen/{__version__}"


class TemplateFetchError(Exception):
    pass


def template_url(labels: Sequence[str]) -> str:
    return TEMPLATE_API_URL + ",".join(urllib.parse.quote(label, safe="") for label in labels)


def _read_url(url: str, timeout_seconds: float | None) -> bytes:
    req = urllib.request.Request(url, headers={"User-Agent": USER_AGENT})
    try:
        if timeout_seconds is None:
            resp = urllib.request.urlopen(req)
        else:
            resp = urllib.request.urlopen(req, timeout=timeout_seconds)
        with resp:
            return resp.read()
    except urllib.error.HTTPError as exc:
        # The service answers unknown templates with a 404 whose body is still
        # written out as-is.
        try:
            return exc.read()
        finally:
            exc.close()
    except (OSError, http.client.HTTPException) as exc:
        raise TemplateFetchError(f"Unable to fetch {url} ({exc})") from exc


def _decode(payload: bytes) -> str:
    return payload.decode("utf-8", errors="surrogateescape")


def fetch_template(labels: Sequence[str], timeout_seconds: float | None = None) -> str:
    """Download the combined ignore template for ``labels``.

    The body is returned whatever the HTTP status. Bytes that are not valid
    UTF-8 survive as surrogate escapes so the writer can restore them.
    """
    return _decode(_read_url(template_url(labels), timeout_seconds))


def list_templates(timeout_seconds: float | None = None) -> list[str]:
    raw = _decode(_read_url(TEMPLATE_API_URL + "list?format=lines", timeout_seconds))
    names: list[str] = []
    for line in raw.splitlines():
        for token in line.split(","):
            token = token.strip()
            if token:
                names.append(token)
    return names
