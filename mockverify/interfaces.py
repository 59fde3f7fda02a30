"""
Interfaces.
"""

from zope.interface import Interface


class IInvocationRecords(Interface):
    """
    Provides the invocations recorded for mock methods.
    """

    def records(method_name):
        """
        Returns the mutable list of argument tuples recorded for the given
        mock method, oldest first.
        """

    def record(method_name, *args):
        """
        Appends an invocation of the given mock method.
        """
