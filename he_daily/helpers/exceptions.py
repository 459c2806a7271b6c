"""
Exceptions raised by the daily test components
"""


class HeDailyError(Exception):
    ''' Base class for all he_daily errors '''


class ConfigError(HeDailyError):
    ''' Bad or missing configuration file / value '''


class AuthenticationError(HeDailyError):
    ''' Login to the certification portal failed '''


class ResolutionError(HeDailyError):
    ''' Unable to determine an IPv6 target to test '''


class CommandError(HeDailyError):
    '''
    A diagnostic command could not be tokenised, started or exited badly.

    Any output captured before the failure is kept in 'output' (bytes).
    '''

    def __init__(self, message, cmd_line='', returncode=None, output=b''):

        super().__init__(message)
        self.cmd_line = cmd_line
        self.returncode = returncode
        self.output = output


class SubmissionError(HeDailyError):
    ''' A test result could not be posted to the portal '''
