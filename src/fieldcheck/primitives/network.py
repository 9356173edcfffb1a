"""DNS lookups backing the opt-in ``check_dns`` flags.

These block the calling thread; no timeout is applied beyond the resolver's own.
"""

import logging

import dns.exception
import dns.resolver

from ..errors import DnsLookupError

logger = logging.getLogger(__name__)


def has_dns_record(domain: str, record_type: str) -> bool:
    """Check whether ``domain`` publishes at least one record of ``record_type``.

    Args:
        domain: Domain name to query
        record_type: DNS record type, e.g. "A" or "MX"

    Returns:
        True when the resolver returns an answer, False when the domain or
        the record does not exist

    Raises:
        DnsLookupError: If the query could not be completed
    """
    logger.debug(f"Resolving {record_type} records for {domain}")
    try:
        dns.resolver.resolve(domain, record_type)
    except (dns.resolver.NXDOMAIN, dns.resolver.NoAnswer):
        return False
    except dns.exception.DNSException as e:
        raise DnsLookupError(f"Unable to resolve {record_type} records for {domain}: {e}") from e
    return True
