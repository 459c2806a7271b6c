"""Tests for the candidate site list."""

import pytest

from he_daily.helpers.config import DEFAULT_SITES_FILE
from he_daily.helpers.exceptions import ResolutionError
from he_daily.helpers.route_ipv6 import is_ipv6
from he_daily.helpers.sites import Site, load_sites, parse_sites


def test_parse_sites(file_logger):
    lines = [
        "# comment line",
        "",
        "a.example.net 2001:db8::a",
        "b.example.net, 2001:db8::b   # trailing comment",
        "broken-line-without-address",
    ]

    assert parse_sites(lines, file_logger) == [
        Site('a.example.net', '2001:db8::a'),
        Site('b.example.net', '2001:db8::b'),
    ]


def test_load_sites(tmp_path, file_logger):
    sites_file = tmp_path / 'sites.txt'
    sites_file.write_text("c.example.net\t2001:db8::c\n")

    assert load_sites(str(sites_file), file_logger) == [Site('c.example.net', '2001:db8::c')]


def test_load_missing_file(tmp_path, file_logger):
    with pytest.raises(ResolutionError):
        load_sites(str(tmp_path / 'nope.txt'), file_logger)


def test_bundled_site_list(file_logger):
    sites = load_sites(DEFAULT_SITES_FILE, file_logger)

    assert len(sites) >= 20
    assert all(is_ipv6(site.address) for site in sites)
