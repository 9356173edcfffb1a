"""Validation primitives.

Each primitive takes a value (plus optional parameters) and returns a bool.
``PRIMITIVES`` maps rule names, as used when registering rules, to the
functions implementing them.
"""

from collections.abc import Callable

from ..errors import UnknownRuleError
from .checksums import CARD_PATTERNS, credit_card, iban, luhn
from .files import detect_mime_type, extension, mime_type, upload
from .formats import (
    email,
    fqdn,
    hex_color,
    ip,
    ip_range,
    is_hex,
    is_json,
    mac_address,
    md5,
    regex,
    url,
    uuid,
)
from .network import has_dns_record
from .scalars import (
    accepted,
    alpha,
    alpha_numeric,
    array,
    boolean,
    confirm,
    decimal,
    equal_to,
    greater_than,
    greater_than_or_equal,
    in_list,
    in_range,
    integer,
    is_float,
    is_string,
    length,
    less_than,
    less_than_or_equal,
    lowercase,
    max_length,
    min_length,
    not_blank,
    not_empty,
    not_in,
    numeric,
    present,
    to_number,
    uppercase,
)
from .temporal import after, before, date_format, is_date, is_datetime, is_time

PRIMITIVES: dict[str, Callable[..., bool]] = {
    "accepted": accepted,
    "after": after,
    "alpha": alpha,
    "alpha_numeric": alpha_numeric,
    "array": array,
    "before": before,
    "boolean": boolean,
    "confirm": confirm,
    "credit_card": credit_card,
    "date": is_date,
    "date_format": date_format,
    "datetime": is_datetime,
    "decimal": decimal,
    "email": email,
    "equal_to": equal_to,
    "extension": extension,
    "float": is_float,
    "fqdn": fqdn,
    "greater_than": greater_than,
    "greater_than_or_equal": greater_than_or_equal,
    "hex": is_hex,
    "hex_color": hex_color,
    "iban": iban,
    "in": in_list,
    "integer": integer,
    "ip": ip,
    "ip_range": ip_range,
    "json": is_json,
    "length": length,
    "less_than": less_than,
    "less_than_or_equal": less_than_or_equal,
    "lowercase": lowercase,
    "luhn": luhn,
    "mac_address": mac_address,
    "max_length": max_length,
    "md5": md5,
    "mime_type": mime_type,
    "min_length": min_length,
    "not_blank": not_blank,
    "not_empty": not_empty,
    "not_in": not_in,
    "numeric": numeric,
    "present": present,
    "range": in_range,
    "regex": regex,
    "string": is_string,
    "time": is_time,
    "upload": upload,
    "uppercase": uppercase,
    "url": url,
    "uuid": uuid,
}

# Primitives that compare against other fields of the record
RECORD_PRIMITIVES = frozenset({"confirm"})


def get_primitive(name: str) -> Callable[..., bool]:
    """Look up a primitive by rule name.

    Raises:
        UnknownRuleError: If no primitive has that name
    """
    try:
        return PRIMITIVES[name]
    except KeyError:
        raise UnknownRuleError(f"Invalid validation rule: {name}") from None


__all__ = [
    "PRIMITIVES",
    "RECORD_PRIMITIVES",
    "CARD_PATTERNS",
    "get_primitive",
    "has_dns_record",
    "detect_mime_type",
    "to_number",
    "accepted",
    "after",
    "alpha",
    "alpha_numeric",
    "array",
    "before",
    "boolean",
    "confirm",
    "credit_card",
    "date_format",
    "decimal",
    "email",
    "equal_to",
    "extension",
    "fqdn",
    "greater_than",
    "greater_than_or_equal",
    "hex_color",
    "iban",
    "in_list",
    "in_range",
    "integer",
    "ip",
    "ip_range",
    "is_date",
    "is_datetime",
    "is_float",
    "is_hex",
    "is_json",
    "is_string",
    "is_time",
    "length",
    "less_than",
    "less_than_or_equal",
    "lowercase",
    "luhn",
    "mac_address",
    "max_length",
    "md5",
    "mime_type",
    "min_length",
    "not_blank",
    "not_empty",
    "not_in",
    "numeric",
    "present",
    "regex",
    "upload",
    "uppercase",
    "url",
    "uuid",
]
