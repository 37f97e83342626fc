"""Primary-domain extraction for host names."""

from __future__ import annotations

import re

from .crawlerrors import gen_error

_IP_RE = re.compile(
    r"((?:(?:25[0-5]|2[0-4]\d|[01]?\d?\d)\.){3}(?:25[0-5]|2[0-4]\d|[01]?\d?\d))",
    re.ASCII,
)

_DOMAIN_RES = [
    re.compile(pattern, re.ASCII)
    for pattern in (
        r"\.(com|com\.\w{2})$",
        r"\.(gov|gov\.\w{2})$",
        r"\.(net|net\.\w{2})$",
        r"\.(org|org\.\w{2})$",
        r"\.me$",
        r"\.biz$",
        r"\.info$",
        r"\.name$",
        r"\.mobi$",
        r"\.so$",
        r"\.asia$",
        r"\.tel$",
        r"\.tv$",
        r"\.cc$",
        r"\.co$",
        r"\.\w{2}$",
    )
]


def get_primary_domain(host: str) -> str:
    """Return the primary domain of a host name, or the host itself for an IP.

    Raises SchedulerError for an empty or unrecognized host.
    """
    host = host.strip()
    if not host:
        raise gen_error("empty host")
    if _IP_RE.search(host):
        return host
    suffix_index = 0
    for regex in _DOMAIN_RES:
        match = regex.search(host)
        if match:
            suffix_index = match.start()
            break
    if suffix_index > 0:
        dot = host.rfind(".", 0, suffix_index)
        return host[dot + 1:]
    raise gen_error("unrecognized host")