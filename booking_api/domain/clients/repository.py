"""Client repository - Database operations for clients"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import Client


class ClientRepository:
    """Repository for client database operations"""

    @staticmethod
    def get_active_client(db: Session, email: str, provider_id: str) -> Optional[Client]:
        """Get the active client record for an (already normalized) email and provider"""
        return (
            db.query(Client)
            .filter(
                Client.email == email,
                Client.provider_id == provider_id,
                Client.is_active.is_(True),
            )
            .first()
        )
