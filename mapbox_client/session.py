"""
Session tokens for the Search Box suggest/retrieve workflow.
"""

import secrets
import uuid


def newSessionToken() -> str:
    """Generate a new UUIDv4 session token.

    Session tokens group a suggest call with the retrieve call(s) that follow
    it, so the same token should be reused for the whole autocomplete session.
    Randomness comes from the OS CSPRNG; if it is unavailable the error
    propagates, there is no fallback.

    Returns:
        Canonical lowercase 8-4-4-4-12 hex string, version 4, RFC 4122 variant
    """
    return str(uuid.UUID(bytes=secrets.token_bytes(16), version=4))
