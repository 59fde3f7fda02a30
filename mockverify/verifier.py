"""Invocation verifier.

Checks the invocations recorded for a mock method against expected
arguments. Every recorded invocation satisfies at most one verification:
a successful :meth:`InvocationVerifier.with_` or
:meth:`InvocationVerifier.with_in_order` removes the matched record from
the store.
"""

import collections
import inspect
import numbers

from twisted.logger import Logger

from mockverify.context import MockContext
from mockverify.error import InvalidUsageError, VerifyFailedError, describe
from mockverify.interfaces import IInvocationRecords
from mockverify.matcher import Literal, as_matcher

Verification = collections.namedtuple('Verification', ['args', 'in_order'])


def _caller_location():
    """
    Returns file and line of the first frame outside of this module.
    """
    frame = inspect.currentframe()
    try:
        while frame is not None and frame.f_globals.get('__name__') == __name__:
            frame = frame.f_back
        if frame is None:
            return 'unknown location'
        return '{:s}:{:d}'.format(frame.f_code.co_filename, frame.f_lineno)
    finally:
        del frame


def verify_invoked(method_name, context=None):
    """
    Returns a verifier for the invocations of a mock method.

    Args:
        method_name (str): Name of a mock method.
        context: An object providing
            :class:`mockverify.interfaces.IInvocationRecords`. Defaults to
            the innermost active :class:`mockverify.context.MockContext` of
            the current thread.

    Returns:
        :class:`InvocationVerifier`: A verifier bound to the records of the
        given method. A method which was never invoked has an empty store.

    Raises:
        mockverify.context.NoContextError: If no context is given and none
            is active.
    """
    if context is None:
        context = MockContext.top()
    assert IInvocationRecords.providedBy(context), 'Context must provide IInvocationRecords'
    return InvocationVerifier(context.records(method_name))


class InvocationVerifier:
    """
    Fluent verifier bound to the record store of one mock method.

    All verification methods return the verifier itself, such that calls can
    be chained. Any failing verification raises
    :class:`mockverify.error.VerifyFailedError` and leaves records consumed
    by preceding verifications removed from the store.

    Args:
        records (list): Argument tuples recorded for the mock method, oldest
            first. The list is shortened in place.
    """

    log = Logger()

    def __init__(self, records):
        self.records = records
        self.last_verification = None

    def with_(self, *args):
        """
        Expect the mock method was invoked with the given arguments.

        The oldest matching record is consumed.

        Args:
            *args: Expected arguments, literal values or
                :class:`mockverify.matcher.Matcher` instances.

        Returns:
            The verifier.
        """
        for index in range(len(self.records)):
            try:
                self._consume(args, index)
            except VerifyFailedError:
                continue
            else:
                break
        else:
            raise VerifyFailedError('has not been invoked with', describe(args))

        self.last_verification = Verification(args, False)
        return self

    def with_in_order(self, *args):
        """
        Expect the next recorded invocation was made with the given
        arguments.

        Only the oldest remaining record is considered and consumed if it
        matches.

        Args:
            *args: Expected arguments, literal values or
                :class:`mockverify.matcher.Matcher` instances.

        Returns:
            The verifier.
        """
        self._consume(args, 0)
        self.last_verification = Verification(args, True)
        return self

    def without(self, *args):
        """
        Expect the mock method was never invoked with the given arguments.

        Does not consume any record.

        Returns:
            The verifier.
        """
        expected = [as_matcher(arg) for arg in args]
        for record in self.records:
            if len(record) != len(expected):
                continue
            if all(e.matches(a) for e, a in zip(expected, record)):
                raise VerifyFailedError('was invoked with', describe(args))

        return self

    def with_times(self, expected_count):
        """
        Expect the given number of remaining recorded invocations.

        Returns:
            The verifier.
        """
        if expected_count != len(self.records):
            raise VerifyFailedError('invocation count mismatched',
                                    'times: {:d}'.format(expected_count),
                                    'times: {:d}'.format(len(self.records)))

        self.last_verification = None
        return self

    def times(self, count):
        """
        Expect several consecutive invocations with the same arguments.

        Repeats the preceding :meth:`with_` or :meth:`with_in_order`
        ``count - 1`` more times. When used without a preceding
        verification, falls back to :meth:`with_times` and logs a warning.

        Args:
            count (int): Total number of expected invocations, at least 2.

        Returns:
            The verifier.

        Raises:
            mockverify.error.InvalidUsageError: If count is less than 2.
        """
        if not isinstance(count, numbers.Integral) or count < 2:
            raise InvalidUsageError('times() requires a count equal or larger than 2, got {!r}'.format(count))

        if self.last_verification is None:
            self.log.warn(
                '[{location}] using "times()" without "with_()" or "with_in_order()" is not recommended, '
                'please use "with_times()" instead.', location=_caller_location())
            return self.with_times(count)

        args, in_order = self.last_verification
        for _ in range(count - 1):
            if in_order:
                self.with_in_order(*args)
            else:
                self.with_(*args)

        self.last_verification = None
        return self

    def _consume(self, args, index):
        """
        Removes the record at index if it matches the expected arguments.
        """
        if len(self.records) == 0:
            raise VerifyFailedError('has no more invocations')

        record = self.records[index]
        if len(record) != len(args):
            raise VerifyFailedError('parameter count mismatched', describe(args), describe(record))

        for position, (arg, actual) in enumerate(zip(args, record), 1):
            matcher = as_matcher(arg)
            if isinstance(matcher, Literal) and type(matcher.value) is not type(actual):
                raise VerifyFailedError('parameter {:d} type mismatch'.format(position),
                                        repr(type(matcher.value)), repr(type(actual)))
            if not matcher.matches(actual):
                raise VerifyFailedError('parameter {:d} mismatched'.format(position),
                                        describe(args), describe(record))

        del self.records[index]
        self.log.debug('Consumed invocation {record!r}', record=record)
