"""Tunnel endpoints."""
import logging
from typing import List

from fastapi import APIRouter, Depends, Response

from app.core.database import DBConn, get_conn
from app.schemas.tunnel import TunnelInDB
from app.services.tunnel_service import tunnel_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tunnels", tags=["tunnels"])


@router.get("", response_model=List[TunnelInDB])
async def list_tunnels(conn: DBConn = Depends(get_conn)):
    """List all tunnels."""
    try:
        return await tunnel_service.load_tunnels(conn)
    except Exception as e:
        logger.error(f"Error loading tunnel data: {e}")
        return Response(status_code=500)


@router.get("/{tunnel_id}", response_model=TunnelInDB)
async def get_tunnel(tunnel_id: int, conn: DBConn = Depends(get_conn)):
    """Get a specific tunnel by ID."""
    try:
        tunnel = await tunnel_service.load_tunnel_by_id(conn, tunnel_id)
    except Exception as e:
        logger.error(f"Error loading tunnel {tunnel_id}: {e}")
        return Response(status_code=500)

    if tunnel is None:
        return Response(status_code=404)

    return tunnel
