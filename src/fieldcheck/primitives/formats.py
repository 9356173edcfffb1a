"""Shape checks for addresses, identifiers and encoded strings."""

import ipaddress
import json
import re
from typing import Any
from urllib.parse import urlsplit

from email_validator import EmailNotValidError, validate_email

from ..errors import InvalidRuleError
from .network import has_dns_record

# RFC 1035 labels, lowercase only
_FQDN_PATTERN = re.compile(r"((?=[a-z0-9-]{1,63}\.)[a-z0-9]+(-[a-z0-9]+)*\.)+[a-z]{2,63}")
_HOSTNAME_PATTERN = re.compile(
    r"[a-z0-9]([a-z0-9-]*[a-z0-9])?(\.[a-z0-9]([a-z0-9-]*[a-z0-9])?)*\.?", re.IGNORECASE
)
_SCHEME_PATTERN = re.compile(r"[a-z][a-z0-9+.-]*", re.IGNORECASE)
_HAS_PROTOCOL_PATTERN = re.compile(r"^https?|://")
_UUID_PATTERN = r"[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}"
_MAC_PATTERN = re.compile(
    r"[0-9a-f]{2}([:-])(?:[0-9a-f]{2}\1){4}[0-9a-f]{2}|[0-9a-f]{4}\.[0-9a-f]{4}\.[0-9a-f]{4}",
    re.IGNORECASE,
)
_HEX_COLOR_PATTERN = re.compile(r"#[0-9a-f]{6}", re.IGNORECASE)


def _fullmatch(pattern: str, value: Any, case_insensitive: bool = False) -> bool:
    flags = re.IGNORECASE if case_insensitive else 0
    return isinstance(value, str) and re.fullmatch(pattern, value, flags) is not None


def email(value: Any, check_dns: bool = False) -> bool:
    """Validate an email address.

    Args:
        value: Address to check
        check_dns: Also require the domain to publish MX records

    Returns:
        True when the address is well formed (and has MX records if asked)
    """
    if not isinstance(value, str):
        return False
    try:
        validated = validate_email(value, allow_smtputf8=False, check_deliverability=False)
    except EmailNotValidError:
        return False

    if check_dns:
        return has_dns_record(validated.ascii_domain, "MX")
    return True


def fqdn(value: Any, check_dns: bool = False) -> bool:
    """Validate a fully qualified domain name.

    The pattern only tells whether the name looks valid; pass ``check_dns``
    to require an A record as well.
    """
    result = isinstance(value, str) and _FQDN_PATTERN.fullmatch(value) is not None
    if result and check_dns:
        result = has_dns_record(value, "A")
    return result


def _is_url(value: str) -> bool:
    if any(char.isspace() for char in value):
        return False
    try:
        parts = urlsplit(value)
        host = parts.hostname
        parts.port  # raises on a malformed port
    except ValueError:
        return False

    if not _SCHEME_PATTERN.fullmatch(parts.scheme) or not host:
        return False
    return ip(host) or _HOSTNAME_PATTERN.fullmatch(host) is not None


def url(value: Any, protocol: bool = True) -> bool:
    """Validate a URL.

    Args:
        value: URL to check
        protocol: When False the value must not carry a protocol,
                  e.g. ``www.example.org`` rather than ``https://www.example.org``
    """
    if not isinstance(value, str):
        return False
    if protocol:
        return _is_url(value)
    if _HAS_PROTOCOL_PATTERN.search(value):
        return False
    return _is_url("https://" + value)


def ip(value: Any, version: str = "both") -> bool:
    """Validate an IP address; ``version`` is both, ipv4 or ipv6."""
    if not isinstance(value, str):
        return False
    try:
        address = ipaddress.ip_address(value)
    except ValueError:
        return False

    if version == "ipv4":
        return address.version == 4
    if version == "ipv6":
        return address.version == 6
    return True


def ip_range(value: Any, start: str, end: str) -> bool:
    """Validate an IP address lies between ``start`` and ``end`` inclusive."""
    if not (ip(value) and ip(start) and ip(end)):
        return False

    address = ipaddress.ip_address(value)
    low, high = ipaddress.ip_address(start), ipaddress.ip_address(end)
    if not address.version == low.version == high.version:
        return False
    return low <= address <= high


def uuid(value: Any, case_insensitive: bool = False) -> bool:
    """Validate an RFC 4122 UUID (versions 1-5)."""
    return _fullmatch(_UUID_PATTERN, value, case_insensitive)


def mac_address(value: Any) -> bool:
    return isinstance(value, str) and _MAC_PATTERN.fullmatch(value) is not None


def is_hex(value: Any, case_insensitive: bool = False) -> bool:
    return _fullmatch(r"[0-9a-f]+", value, case_insensitive)


def hex_color(value: Any) -> bool:
    return isinstance(value, str) and _HEX_COLOR_PATTERN.fullmatch(value) is not None


def md5(value: Any, case_insensitive: bool = False) -> bool:
    return _fullmatch(r"[0-9a-f]{32}", value, case_insensitive)


def is_json(value: Any) -> bool:
    if not isinstance(value, str) or not value:
        return False
    try:
        json.loads(value)
    except ValueError:
        return False
    return True


def regex(value: Any, pattern: str) -> bool:
    """Validate a string contains a match for ``pattern``.

    Raises:
        InvalidRuleError: If the pattern does not compile
    """
    try:
        compiled = re.compile(pattern)
    except re.error as e:
        raise InvalidRuleError(f"Invalid regular expression {pattern!r}: {e}") from e
    return isinstance(value, str) and compiled.search(value) is not None
