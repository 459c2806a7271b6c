'''
Work out the (hostname, IPv6 address) target for the daily tests, either
from a named host or from a random site that answers a ping
'''
import collections
import random
import subprocess

from he_daily.helpers.exceptions import ResolutionError
from he_daily.helpers.route_ipv6 import is_ipv6, resolve_name_ipv6

Target = collections.namedtuple('Target', ['hostname', 'address'])

PROBE_CMD = ['ping6', '-n', '-c1']


def resolve_target(hostname, file_logger):
    '''
    Direct mode: use the first IPv6 address returned by DNS for the hostname
    '''
    file_logger.info("Resolving IPv6 address of target host: {}".format(hostname))

    address = resolve_name_ipv6(hostname, file_logger)

    return Target(hostname=hostname, address=address)


class LivenessProber(object):
    '''
    Best effort liveness check: fire a single ping at an address.

    Note: a site counts as alive when the ping process *starts*, whether or
    not it gets a reply. Started pings are left to run and are reaped by
    reap().
    '''

    def __init__(self, file_logger, probe_cmd=PROBE_CMD):

        self.file_logger = file_logger
        self.probe_cmd = list(probe_cmd)
        self.procs = []

    def __call__(self, address):

        cmd = self.probe_cmd + [address]
        self.file_logger.debug("  Liveness probe: {}".format(' '.join(cmd)))

        try:
            proc = subprocess.Popen(cmd, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
        except OSError as ex:
            self.file_logger.warning("  Liveness probe to {} did not start: {}".format(address, ex))
            return False

        self.procs.append(proc)
        return True

    def reap(self):

        for proc in self.procs:
            proc.wait()

        self.procs = []


def pick_random_target(sites, file_logger, max_attempts=26, probe=None, rng=random):
    '''
    Random mode: try up to max_attempts random sites from the list and return
    the first one that passes the liveness probe.

    If no site passes, the last site picked is returned anyway (its liveness
    is unverified). Sites whose address is not IPv6 are never returned; if
    every pick had a bad address a ResolutionError is raised.
    '''
    if not sites:
        raise ResolutionError("Site list is empty, unable to pick a random target")

    prober = None
    if probe is None:
        prober = probe = LivenessProber(file_logger)

    file_logger.info("Picking a random target from {} sites (max attempts: {})".format(len(sites), max_attempts))

    fallback = None
    attempt = 0

    try:
        while attempt < max_attempts:

            attempt += 1
            site = rng.choice(sites)

            if not is_ipv6(site.address):
                file_logger.warning("  Site {} has bad IPv6 address: {} (bypassing...)".format(site.hostname, site.address))
                continue

            fallback = site
            file_logger.info("  Attempt {}: {} ({})".format(attempt, site.hostname, site.address))

            if probe(site.address):
                file_logger.info("  Using target: {} ({})".format(site.hostname, site.address))
                return Target(hostname=site.hostname, address=site.address)

    finally:
        if prober is not None:
            prober.reap()

    if fallback is None:
        raise ResolutionError("No site with a valid IPv6 address found in {} attempts".format(max_attempts))

    file_logger.warning("  No live site found in {} attempts, using last pick: {} ({})".format(
        max_attempts, fallback.hostname, fallback.address))

    return Target(hostname=fallback.hostname, address=fallback.address)
