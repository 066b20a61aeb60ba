"""Connections between the session user and other users."""
from __future__ import annotations

import logging

from comrade.repositories.entities import ComradeRepository
from comrade.schemas.user import Comrade
from comrade.services.auth import AuthService
from comrade.services.qr import parse_comrade_qr
from comrade.utils.ids import generate_id, now_ms

logger = logging.getLogger(__name__)


class ComradeService:
    """Directed comrade edges owned by the session user."""

    def __init__(self, auth: AuthService, comrades: ComradeRepository) -> None:
        self.auth = auth
        self.comrades = comrades

    async def list_comrades(self) -> list[Comrade]:
        return await self.comrades.list()

    async def add_comrade(self, comrade_user_id: str) -> Comrade:
        user = await self.auth.require_user()
        comrade = Comrade(
            id=generate_id(),
            user_id=user.id,
            comrade_id=comrade_user_id,
            added_at=now_ms(),
        )
        await self.comrades.add(comrade)
        logger.info("Added comrade %s", comrade_user_id)
        return comrade

    async def add_from_qr(self, payload: str) -> Comrade:
        """Add the comrade identified by a scanned QR payload."""
        return await self.add_comrade(parse_comrade_qr(payload))
