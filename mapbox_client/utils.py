"""
Common utilities for the Mapbox client.
"""

from typing import Any, Dict


def maskToken(token: str) -> str:
    """
    Mask access token for logs and debugging output.

    Keeps the first and last 4 characters, tokens of 8 characters or less
    are masked completely.
    """
    if len(token) <= 8:
        return "****"
    return f"{token[:4]}...{token[-4:]}"


def maskParams(params: Dict[str, Any], secretKey: str) -> Dict[str, Any]:
    """
    Return a copy of query params with the secret value masked.
    """
    masked = dict(params)
    if secretKey in masked and masked[secretKey]:
        masked[secretKey] = maskToken(str(masked[secretKey]))
    return masked
