"""
Per-thread store of recorded mock invocations.
"""

import threading

from twisted.logger import Logger
from zope.interface import implementer

from mockverify.interfaces import IInvocationRecords


class NoContextError(Exception):
    """
    Raised when a mock context is expected but none is active.
    """


@implementer(IInvocationRecords)
class MockContext:
    """
    Holds the invocations recorded for mock methods during one test.

    Contexts are activated with a ``with`` statement. The stack of active
    contexts is kept per thread, tests running in parallel threads never
    see each other's invocations.

    Example:

        The following records two invocations and verifies them::

            from mockverify import MockContext, verify_invoked

            with MockContext() as ctx:
                ctx.record('fetch', 'http://example.com', 3)
                ctx.record('fetch', 'http://example.org', 5)

                verify_invoked('fetch').with_('http://example.org', 5).with_times(1)
    """

    log = Logger()

    _local = threading.local()

    def __init__(self):
        self.invocations = {}

    def __enter__(self):
        self.push(self)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.pop(self)
        return False

    def records(self, method_name):
        return self.invocations.setdefault(method_name, [])

    def record(self, method_name, *args):
        self.log.debug('Recording invocation of {method_name} with {args!r}', method_name=method_name, args=args)
        self.records(method_name).append(tuple(args))

    def clear(self):
        """
        Discards all recorded invocations.
        """
        self.invocations.clear()

    @classmethod
    def _stack(cls):
        try:
            return cls._local.stack
        except AttributeError:
            stack = cls._local.stack = []
            return stack

    @classmethod
    def push(cls, ctx):
        """
        Push the ctx onto the stack of the current thread.
        """
        assert isinstance(ctx, cls), 'Argument must be a MockContext'
        cls._stack().append(ctx)

    @classmethod
    def pop(cls, ctx):
        """
        Remove the ctx from the stack of the current thread.
        """
        top = cls._stack().pop()
        assert top is ctx, 'Unbalanced mock ctx stack'

    @classmethod
    def top(cls):
        """
        Returns the topmost ctx from the stack of the current thread.
        """
        try:
            return cls._stack()[-1]
        except IndexError:
            raise NoContextError()
