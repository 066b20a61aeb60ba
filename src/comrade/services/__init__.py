# src/comrade/services/__init__.py
"""Business logic services for the Comrade data layer."""

from .auth import AuthService
from .biometric import BiometricAuthenticator, NoBiometricAuthenticator
from .comrades import ComradeService
from .messaging import MessagingService
from .organizations import OrganizationService
from .posts import PostService
from .store import LocalStore

__all__ = [
    "AuthService",
    "BiometricAuthenticator",
    "ComradeService",
    "LocalStore",
    "MessagingService",
    "NoBiometricAuthenticator",
    "OrganizationService",
    "PostService",
]
