"""Platform biometric prompt consumed by the session layer."""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class BiometricAuthenticator(Protocol):
    """Capability probe and prompt offered by the host platform."""

    async def is_available(self) -> bool: ...

    async def authenticate(self, prompt: str) -> bool: ...


class NoBiometricAuthenticator:
    """Authenticator for hosts without biometric hardware.

    Reports the capability as unavailable and lets every prompt through, so
    a stored biometric flag never locks the user out on such hosts.
    """

    async def is_available(self) -> bool:
        return False

    async def authenticate(self, prompt: str) -> bool:
        return True
