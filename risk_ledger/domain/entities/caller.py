"""Authenticated caller supplied by the identity collaborator."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Caller:
    """
    Identity of whoever is invoking a ledger operation.

    Attributes:
        identity: Already-authenticated caller identity
        is_owner: True if the caller holds the privileged owner role
    """

    identity: str
    is_owner: bool = False
