#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import argparse
import logging
import sys

# our local modules
from he_daily.helpers.config import (
    COMMAND_FAILURE_POLICIES,
    DEFAULT_CONFIG_FILE,
    apply_cli_args,
    read_local_config
)
from he_daily.helpers.exceptions import HeDailyError
from he_daily.helpers.filelogger import FileLogger
from he_daily.helpers.os_cmds import check_os_cmds
from he_daily.helpers.sites import load_sites
from he_daily.testers.daily_tests import run_tests
from he_daily.testers.portal_login import he_login
from he_daily.testers.target_resolver import pick_random_target, resolve_target


def parse_args(argv=None):

    parser = argparse.ArgumentParser(
        prog='he_daily',
        description="Run the Hurricane Electric IPv6 certification daily tests and submit the results.")

    parser.add_argument('--username', '-username', required=True, help="HE Certification Username")
    parser.add_argument('--password', '-password', required=True, help="HE Certification Password")
    parser.add_argument('--host', '-host', default='',
        help="IPv6 hostname to be used (must be hostname and not IP!). If omitted, a random site is used")
    parser.add_argument('--dryrun', '-dryrun', action='store_true', help="Run the tests but do not submit the results")
    parser.add_argument('--config', default='', help="Config file (default: {})".format(DEFAULT_CONFIG_FILE))
    parser.add_argument('--sites', default='', help="Candidate site list used when no host is given")
    parser.add_argument('--command-failure', choices=COMMAND_FAILURE_POLICIES, default='',
        help="What to do when a test command fails (default: skip with --host, abort otherwise)")
    parser.add_argument('--debug', action='store_true', help="Enable debug logging")

    return parser.parse_args(argv)


def build_config(args, file_logger):
    '''
    Read the config file and overlay the command line args. This is the only
    place the configuration is built.
    '''
    if args.config:
        config_vars = read_local_config(args.config, file_logger, required=True)
    else:
        config_vars = read_local_config(DEFAULT_CONFIG_FILE, file_logger)

    return apply_cli_args(config_vars, args)


def get_target(config_vars, file_logger):

    if config_vars['mode'] == 'direct':
        return resolve_target(config_vars['host'], file_logger)

    sites = load_sites(config_vars['sites_file'], file_logger)
    return pick_random_target(sites, file_logger, max_attempts=config_vars['max_attempts'])


###############################################################################
# Main
###############################################################################
def main(argv=None):

    args = parse_args(argv)

    # console logging until we have read the config
    file_logger = FileLogger(debug=args.debug)

    try:
        config_vars = build_config(args, file_logger)
    except HeDailyError as ex:
        file_logger.error("{} (exiting)".format(ex))
        return 1

    file_logger = FileLogger(config_vars['log_file'], debug=(config_vars['debug'] == 'on'))

    file_logger.info("*****************************************************")
    file_logger.info(" Starting HE IPv6 certification daily tests ({} mode)".format(config_vars['mode']))
    file_logger.info("*****************************************************")

    if file_logger.isEnabledFor(logging.DEBUG):
        file_logger.info("(Note: logging set to debug level.)")

    if config_vars['dry_run'] == 'yes':
        file_logger.info("(Note: dry run, results will not be submitted.)")

    check_os_cmds(file_logger)

    try:
        session = he_login(config_vars['username'], config_vars['password'], config_vars, file_logger)
        target = get_target(config_vars, file_logger)

        file_logger.info("~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~")
        file_logger.info("~~~~~    Running daily tests: {}".format(target.hostname))
        file_logger.info("~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~")

        run_tests(session, target, config_vars, file_logger)

    except HeDailyError as ex:
        file_logger.error("{} (exiting)".format(ex))
        return 1

    file_logger.info("########## end ##########")

    return 0


###############################################################################
# End main
###############################################################################
if __name__ == "__main__":
    sys.exit(main())
