"""
Argument matchers.

An expected argument passed to the verifier is either a literal value or a
predicate. Literal values are compared by equality (sequences are compared
element by element), predicates decide on their own whether a recorded
value is acceptable.

Example:

    The following verifies that ``save`` was called with any string as the
    first argument and a positive number as the second one::

        from mockverify import verify_invoked
        from mockverify.matcher import any_string, satisfies

        verify_invoked('save').with_(any_string(), satisfies(lambda n: n > 0))

    Predicates can also be built from testtools matchers::

        from testtools import matchers
        from mockverify.matcher import that

        verify_invoked('save').with_(that(matchers.StartsWith('/tmp/')), 1)
"""

import collections.abc
import numbers
import re


def _is_sequence(value):
    return isinstance(value, collections.abc.Sequence) and \
        not isinstance(value, (str, bytes, bytearray))


def deep_equals(expected, actual):
    """
    Compares two values, descending into sequences.

    Returns:
        bool: True if both values are sequences of the same length with
        deeply equal items at every index, or if they are equal otherwise.
    """
    if _is_sequence(expected) and _is_sequence(actual):
        if len(expected) != len(actual):
            return False
        return all(deep_equals(e, a) for e, a in zip(expected, actual))

    return expected == actual


class Matcher:
    """
    Base class for expected arguments.
    """

    def matches(self, actual):
        """
        Return True if the recorded value is acceptable.
        """
        raise NotImplementedError()


class Literal(Matcher):
    """
    Matches recorded values equal to the given one.
    """

    def __init__(self, value):
        self.value = value

    def matches(self, actual):
        return deep_equals(self.value, actual)

    def __repr__(self):
        return repr(self.value)


class Predicate(Matcher):
    """
    Matches recorded values for which ``check`` returns a true value.

    Args:
        check (callable): A function taking the recorded value as its only
            argument.
        description (str): Human readable description used in failure
            messages. Defaults to the name of the function.
    """

    def __init__(self, check, description=None):
        self.check = check
        if description is None:
            description = getattr(check, '__name__', repr(check))
        self.description = description

    def matches(self, actual):
        return bool(self.check(actual))

    def __repr__(self):
        return '<{:s}>'.format(self.description)


def as_matcher(value):
    """
    Wraps plain values into a :class:`Literal`. Matchers are returned as-is.
    """
    if isinstance(value, Matcher):
        return value
    return Literal(value)


def satisfies(check, description=None):
    return Predicate(check, description)


def that(matcher):
    """
    Adapts a :class:`testtools.matchers.Matcher`.
    """
    return Predicate(lambda actual: matcher.match(actual) is None, str(matcher))


def any_value():
    return Predicate(lambda actual: True, 'any value')


def any_instance_of(*types):
    names = ' or '.join(t.__name__ for t in types)
    return Predicate(lambda actual: isinstance(actual, types), 'any ' + names)


def any_string():
    return any_instance_of(str)


def any_number():
    def _is_number(actual):
        return isinstance(actual, numbers.Number) and not isinstance(actual, bool)
    return Predicate(_is_number, 'any number')


def any_bool():
    return any_instance_of(bool)


def any_list():
    return any_instance_of(list)


def any_dict():
    return any_instance_of(dict)


def any_set():
    return any_instance_of(set, frozenset)


def any_sequence():
    return Predicate(_is_sequence, 'any sequence')


def is_none():
    return Predicate(lambda actual: actual is None, 'None')


def not_none():
    return Predicate(lambda actual: actual is not None, 'not None')


def contains(part):
    def _contains(actual):
        try:
            return part in actual
        except TypeError:
            return False
    return Predicate(_contains, 'contains {!r}'.format(part))


def starts_with(prefix):
    return Predicate(lambda actual: isinstance(actual, str) and actual.startswith(prefix),
                     'starts with {!r}'.format(prefix))


def ends_with(suffix):
    return Predicate(lambda actual: isinstance(actual, str) and actual.endswith(suffix),
                     'ends with {!r}'.format(suffix))


def matches(pattern):
    """
    Matches strings for which the regular expression matches in full.
    """
    regex = re.compile(pattern)
    return Predicate(lambda actual: isinstance(actual, str) and regex.fullmatch(actual) is not None,
                     'matches {!r}'.format(regex.pattern))
