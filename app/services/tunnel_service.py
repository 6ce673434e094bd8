"""Tunnel data access."""
import logging
from typing import List, Optional

from sqlalchemy import select

from app.core.database import DBConn
from app.models.tunnel import Tunnel
from app.schemas.tunnel import TunnelInDB

logger = logging.getLogger(__name__)

tunnels = Tunnel.__table__


class TunnelService:
    """Read-only access to tunnels; they are seeded by migrations."""

    async def load_tunnels(self, conn: DBConn) -> List[TunnelInDB]:
        """Return every tunnel in the order the database yields them."""
        try:
            rows = await conn.fetch_all(select(tunnels))
        except Exception as e:
            logger.error(f"Error querying tunnels: {e}")
            raise

        return [TunnelInDB.model_validate(dict(row)) for row in rows]

    async def load_tunnel_by_id(self, conn: DBConn, tunnel_id: int) -> Optional[TunnelInDB]:
        """Return the tunnel, or None if there is no such id."""
        try:
            row = await conn.fetch_one(select(tunnels).where(tunnels.c.id == tunnel_id))
        except Exception as e:
            logger.error(f"Error querying tunnel {tunnel_id}: {e}")
            raise

        if row is None:
            logger.info(f"No tunnel found with id: {tunnel_id}")
            return None

        return TunnelInDB.model_validate(dict(row))


# Singleton instance
tunnel_service = TunnelService()
