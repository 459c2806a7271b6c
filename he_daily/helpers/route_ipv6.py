"""
IPv6 address helpers and name resolution for the daily test target
"""
import ipaddress
import socket

from he_daily.helpers.exceptions import ResolutionError


def is_ipv4(ip_address):
    """
    Check if an address is in ivp4 format
    """
    try:
        ipaddress.IPv4Address(ip_address)
    except ValueError:
        return False
    return True


def is_ipv6(ip_address):
    """
    Check if an address is in ivp6 format
    """
    try:
        ipaddress.IPv6Address(ip_address)
    except ValueError:
        return False
    return True


def resolve_name_ipv6(hostname, file_logger):
    """
    DNS lookup of a hostname, returning the first address that is not IPv4.

    Raises ResolutionError if the lookup fails or only IPv4 records exist.
    """
    if is_ipv4(hostname) or is_ipv6(hostname):
        raise ResolutionError("IP address '{}' passed as target, a hostname is required".format(hostname))

    try:
        addr_info = socket.getaddrinfo(hostname, None)
    except (socket.gaierror, UnicodeError) as ex:
        raise ResolutionError("Issue looking up host {} (DNS or hostname Issue?): {}".format(hostname, ex))

    for family, _, _, _, sockaddr in addr_info:

        if family == socket.AF_INET:
            continue

        ip_address = sockaddr[0]

        if is_ipv6(ip_address):
            file_logger.info("  DNS hostname lookup : {} / Result: {}".format(hostname, ip_address))
            return ip_address

    raise ResolutionError("Could not find IPv6 address for '{}'".format(hostname))
