"""
Exceptions raised by the invocation verifier.
"""


def describe(args):
    """
    Renders an argument list as a comma separated string.
    """
    return ', '.join(repr(arg) for arg in args)


class VerifyFailedError(AssertionError):
    """
    Raised when a verification is not satisfied by the recorded invocations.

    Derives from :class:`AssertionError` such that test runners report a
    failure rather than an error.

    Args:
        reason (str): Short phrase describing why the verification failed.
        expected (str): Optional description of what was expected.
        actual (str): Optional description of what was found instead.
    """

    def __init__(self, reason, expected=None, actual=None):
        self.reason = reason
        self.expected = expected
        self.actual = actual

        lines = ['verify failed: {:s}'.format(reason)]
        if expected is not None:
            lines.append('    expected: {:s}'.format(expected))
        if actual is not None:
            lines.append('    actual:   {:s}'.format(actual))

        super().__init__('\n'.join(lines))


class InvalidUsageError(ValueError):
    """
    Raised when the verifier API is used with invalid parameters.
    """
