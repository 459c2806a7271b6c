"""
Read in config.ini file and return in a dictionary

Returns:
    dict -- All he_daily config params
"""
import configparser
import os

from he_daily.helpers.exceptions import ConfigError

DEFAULT_CONFIG_FILE = "/etc/he_daily/config.ini"
DEFAULT_SITES_FILE = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'data', 'ipv6_sites.txt')

COMMAND_FAILURE_POLICIES = ('skip', 'abort')


def read_local_config(config_file, file_logger, required=False):
    '''
    Read in and return all config file variables. A missing file is only an
    error if 'required' is set, otherwise the defaults are returned.
    '''
    config_vars = {}

    # create parser
    config = configparser.ConfigParser()

    if os.path.exists(config_file):
        try:
            config.read(config_file)
        except configparser.Error as ex:
            raise ConfigError("Unable to parse config file {}: {}".format(config_file, ex))
        file_logger.debug("Read config file: {}".format(config_file))
    elif required:
        raise ConfigError("Cannot find config file: {}".format(config_file))
    else:
        file_logger.debug("No config file at {}, using defaults.".format(config_file))

    for section in ['General', 'Random']:
        if not config.has_section(section):
            config.add_section(section)

    # Get general config params
    gen_sect = config['General']
    # base URL of the certification portal
    config_vars['portal_url'] = gen_sect.get('portal_url', 'https://ipv6.he.net').rstrip('/')
    # name of the session cookie set by a good login
    config_vars['session_cookie'] = gen_sect.get('session_cookie', 'PHPSESSID')
    # log file (empty = console only)
    config_vars['log_file'] = gen_sect.get('log_file', '')
    # debugging on/off for enhanced logging messages
    config_vars['debug'] = gen_sect.get('debug', 'off')
    # run commands but do not post results to the portal
    config_vars['dry_run'] = gen_sect.get('dry_run', 'no')
    # skip/abort on a failed test command (empty = mode default)
    config_vars['command_failure'] = gen_sect.get('command_failure', '')

    # http timeout in seconds (empty = no timeout)
    http_timeout = gen_sect.get('http_timeout', '')
    if http_timeout:
        try:
            config_vars['http_timeout'] = float(http_timeout)
        except ValueError:
            raise ConfigError("Bad http_timeout value: {}".format(http_timeout))
    else:
        config_vars['http_timeout'] = None

    if config_vars['command_failure'] and config_vars['command_failure'] not in COMMAND_FAILURE_POLICIES:
        raise ConfigError("Unknown command_failure value: {} (use one of: {})".format(
            config_vars['command_failure'], ', '.join(COMMAND_FAILURE_POLICIES)))

    # Get random target config params
    random_sect = config['Random']
    # number of sites tried before giving up on the liveness check
    try:
        config_vars['max_attempts'] = random_sect.getint('max_attempts', 26)
    except ValueError:
        raise ConfigError("Bad max_attempts value: {}".format(random_sect.get('max_attempts')))
    if config_vars['max_attempts'] < 1:
        raise ConfigError("max_attempts must be at least 1 (got: {})".format(config_vars['max_attempts']))
    # list of candidate IPv6 sites
    config_vars['sites_file'] = random_sect.get('sites_file', DEFAULT_SITES_FILE)

    return config_vars


def apply_cli_args(config_vars, args):
    '''
    Overlay command line values on top of the config file values. The
    returned dict is the single configuration passed to all components.
    '''
    config_vars = dict(config_vars)

    config_vars['username'] = args.username
    config_vars['password'] = args.password
    config_vars['host'] = args.host or ''
    config_vars['mode'] = 'direct' if args.host else 'random'

    if args.dryrun:
        config_vars['dry_run'] = 'yes'

    if args.debug:
        config_vars['debug'] = 'on'

    if args.sites:
        config_vars['sites_file'] = args.sites

    if args.command_failure:
        config_vars['command_failure'] = args.command_failure

    # historic behaviour: random site runs stop on a failed command,
    # runs against a named host carry on with the other tests
    if not config_vars['command_failure']:
        config_vars['command_failure'] = 'skip' if config_vars['mode'] == 'direct' else 'abort'

    return config_vars
