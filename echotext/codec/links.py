# echotext/codec/links.py
# Share URL construction and token extraction

from __future__ import annotations

from urllib.parse import urlsplit

from echotext.constants import SHARE_PATH_PREFIX


def build_share_url(token: str, origin: str) -> str:
    """origin + '/s/' + token"""
    return f"{origin.rstrip('/')}{SHARE_PATH_PREFIX}{token}"


def extract_token(url_or_path: str) -> str:
    """
    Pull the token out of a share URL or '/s/<token>' path.

    Anything that does not look like a share URL is returned stripped,
    on the assumption that it is a bare token.
    """
    value = url_or_path.strip()
    path = urlsplit(value).path if "://" in value else value
    marker = path.rfind(SHARE_PATH_PREFIX)
    if marker < 0:
        return value
    return path[marker + len(SHARE_PATH_PREFIX):].strip("/")
