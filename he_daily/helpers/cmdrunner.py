"""
Run a diagnostic command line and capture its output

The command line is split into argv tokens here (shell-style quoting is
honoured) and the program is executed directly, not through a shell.
"""
import shlex
import subprocess

from he_daily.helpers.exceptions import CommandError


def split_cmd(cmd_line):
    """
    Tokenise a shell-style command line, keeping quoted arguments together:

        whois -h whois.arin.net "n 2001:db8::1"
            -> ['whois', '-h', 'whois.arin.net', 'n 2001:db8::1']
    """
    try:
        tokens = shlex.split(cmd_line)
    except ValueError as ex:
        raise CommandError("Unable to parse command '{}': {}".format(cmd_line, ex), cmd_line=cmd_line)

    if not tokens:
        raise CommandError("Empty command line", cmd_line=cmd_line)

    return tokens


def run_cmd(cmd_line, file_logger=None):
    """
    Execute a command line and return its combined stdout/stderr as bytes.

    Raises CommandError if the line cannot be tokenised, the program cannot
    be started or it exits with a non-zero status (output captured up to
    that point is attached to the exception).
    """
    args = split_cmd(cmd_line)

    if file_logger:
        file_logger.debug("  Executing: {}".format(args))

    try:
        return subprocess.check_output(args, stderr=subprocess.STDOUT)
    except OSError as ex:
        raise CommandError("Unable to start '{}': {}".format(args[0], ex), cmd_line=cmd_line)
    except subprocess.CalledProcessError as exc:
        if exc.returncode < 0:
            reason = "killed by signal {}".format(-exc.returncode)
        else:
            reason = "exit status {}".format(exc.returncode)

        raise CommandError("Command '{}' failed ({})".format(cmd_line, reason),
            cmd_line=cmd_line, returncode=exc.returncode, output=exc.output or b'')
