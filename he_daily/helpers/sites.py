"""
Load the list of candidate IPv6 sites used to pick a random test target
"""
import collections
import re

from he_daily.helpers.exceptions import ResolutionError

Site = collections.namedtuple('Site', ['hostname', 'address'])


def parse_sites(lines, file_logger):
    '''
    Parse site entries, one per line: "hostname address" (space or comma
    separated). Blank lines and '#' comments are ignored, bad lines skipped.
    '''
    sites = []

    for line_num, line in enumerate(lines, start=1):

        line = line.split('#', 1)[0].strip()

        if not line:
            continue

        fields = [field for field in re.split(r'[\s,]+', line) if field]

        if len(fields) != 2:
            file_logger.warning("  Bad site list entry on line {} (bypassing...): {}".format(line_num, line))
            continue

        sites.append(Site(hostname=fields[0], address=fields[1]))

    return sites


def load_sites(sites_file, file_logger):

    try:
        with open(sites_file, 'r', encoding='utf-8') as site_file:
            sites = parse_sites(site_file, file_logger)
    except OSError as ex:
        raise ResolutionError("Unable to read site list {}: {}".format(sites_file, ex))

    file_logger.info("  Loaded {} candidate sites from {}".format(len(sites), sites_file))

    return sites
