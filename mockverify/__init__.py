"""
Verification of recorded mock invocations.
"""

from mockverify.context import MockContext, NoContextError
from mockverify.error import InvalidUsageError, VerifyFailedError
from mockverify.verifier import InvocationVerifier, verify_invoked
