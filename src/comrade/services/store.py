"""Facade wiring repositories and services over one key-value store."""
from __future__ import annotations

from comrade.repositories.entities import (
    CommentRepository,
    ComradeRepository,
    ConversationRepository,
    MembershipRepository,
    MessageRepository,
    OrganizationRepository,
    PostRepository,
)
from comrade.services.auth import AuthService
from comrade.services.biometric import BiometricAuthenticator
from comrade.services.comrades import ComradeService
from comrade.services.messaging import MessagingService
from comrade.services.organizations import OrganizationService
from comrade.services.posts import PostService
from comrade.storage.kv import KeyValueStore, build_key_value_store


class LocalStore:
    """Everything one device needs, sharing a single session.

    Example:
        store = LocalStore(MemoryKeyValueStore())
        await store.auth.login("Ada", "sf")
        post = await store.posts.create_post("Hello", "sf")
    """

    def __init__(
        self,
        kv: KeyValueStore,
        biometric: BiometricAuthenticator | None = None,
    ) -> None:
        self.kv = kv
        self.auth = AuthService(kv, biometric)
        self.posts = PostService(self.auth, PostRepository(kv), CommentRepository(kv))
        self.messaging = MessagingService(
            self.auth, ConversationRepository(kv), MessageRepository(kv)
        )
        self.organizations = OrganizationService(
            self.auth, OrganizationRepository(kv), MembershipRepository(kv)
        )
        self.comrades = ComradeService(self.auth, ComradeRepository(kv))

    @classmethod
    def from_settings(cls, biometric: BiometricAuthenticator | None = None) -> LocalStore:
        """Build a store on the medium selected by the application settings."""
        return cls(build_key_value_store(), biometric)
