import logging
from typing import Any, Optional
from sqlalchemy import select

from database.models import Client
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class ClientRepository(BaseRepository):
    def get_client_by_id(self, client_id: Any) -> Optional[Client]:
        stmt = select(Client).where(Client.id == client_id)
        client = self.db.execute(stmt).scalar_one_or_none()
        if client is None:
            logger.debug(f"No client found for id {client_id}")
        return client
