"""
Centralised file for all OS commands used by the daily tests
"""

import pathlib
import shutil


def _find_cmd(cmd):
    """
    This function checks if an OS command is available.

    Returns: filename (if exists/found) or False if not found
    """
    path = pathlib.Path(cmd)

    if not path.is_file():
        # as we can't find it, lets hunt through the path
        command_name = cmd.split('/')[-1]
        found_cmd = shutil.which(command_name)

        if not found_cmd:
            return False
        else:
            # re-write cmd path
            return found_cmd

    return cmd


def os_cmds():
    """
    Locate the diagnostic commands used by the daily tests

    Returns: dict of command name -> path (or False if not found)
    """
    return {
        'DIG_CMD': _find_cmd('/usr/bin/dig'),
        'PING6_CMD': _find_cmd('/bin/ping6'),
        'TRACEROUTE6_CMD': _find_cmd('/usr/bin/traceroute6'),
        'WHOIS_CMD': _find_cmd('/usr/bin/whois'),
    }


def check_os_cmds(file_logger, cmds=None):
    """
    This function checks if all expected OS commands are avaiable.

    A missing command is not fatal here: the test that needs it will fail
    and be handled by the command failure policy.
    """
    if cmds is None:
        cmds = os_cmds()

    file_logger.info("Checking required OS commands are available.")

    all_found = True

    for cmd_name in cmds.keys():

        if not cmds[cmd_name]:
            file_logger.warning("  Unable to find OS command: {} (the test using it will fail)".format(cmd_name))
            all_found = False
        else:
            file_logger.debug("  Found OS command: {} ({})".format(cmd_name, cmds[cmd_name]))

    return all_found
