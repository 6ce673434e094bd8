"""Reservation endpoints."""
import logging
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response
from pydantic import AwareDatetime

from app.core.database import DBConn, get_conn
from app.core.errors import invalid_request
from app.schemas.reservation import ReservationCreate, ReservationUpdate, ReservationInDB
from app.services.reservation_service import reservation_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/reservations", tags=["reservations"])


@router.get("", response_model=List[ReservationInDB])
async def list_reservations(conn: DBConn = Depends(get_conn)):
    """List all reservations."""
    try:
        return await reservation_service.load_reservations(conn)
    except Exception as e:
        logger.error(f"Error loading reservation data: {e}")
        return Response(status_code=500)


@router.post("", response_model=ReservationInDB, status_code=201)
async def create_reservation(
    reservation: ReservationCreate,
    response: Response,
    conn: DBConn = Depends(get_conn),
):
    """
    Create a new reservation.

    Args:
        reservation: Reservation data
        response: Outgoing response, used to set Location
        conn: Database connection

    Returns:
        Created reservation
    """
    try:
        result = await reservation_service.insert_reservation(conn, reservation)
    except Exception as e:
        logger.error(f"Error inserting reservation: {e}")
        return Response(status_code=500)

    response.headers["Location"] = f"/api/reservations/{result.id}"
    return result


# Declared before /{reservation_id} so "search" is not read as an id
@router.get("/search", response_model=List[ReservationInDB])
async def search_reservations(
    from_time: AwareDatetime = Query(..., alias="from", description="Inclusive start of the window (RFC 3339)"),
    to_time: AwareDatetime = Query(..., alias="to", description="Exclusive end of the window (RFC 3339)"),
    tunnel_id: Optional[str] = Query(default=None, description="Only reservations on this tunnel; blank means any"),
    conn: DBConn = Depends(get_conn),
):
    """
    Search reservations by start time, optionally on one tunnel.

    Args:
        from_time: Window start
        to_time: Window end
        tunnel_id: Optional tunnel filter
        conn: Database connection

    Returns:
        Reservations starting inside the window, earliest first
    """
    if from_time > to_time:
        return invalid_request("'from' must be before or equal to 'to'")

    tunnel = None
    if tunnel_id:
        try:
            tunnel = int(tunnel_id)
        except ValueError:
            return invalid_request(f"query.tunnel_id: not an integer: {tunnel_id!r}")

    try:
        return await reservation_service.search_reservations(
            conn, from_time, to_time, tunnel
        )
    except Exception as e:
        logger.error(f"Error searching reservation data: {e}")
        return Response(status_code=500)


@router.get("/{reservation_id}", response_model=ReservationInDB)
async def get_reservation(reservation_id: UUID, conn: DBConn = Depends(get_conn)):
    """Get a specific reservation by ID."""
    try:
        reservation = await reservation_service.load_reservation_by_id(conn, reservation_id)
    except Exception as e:
        logger.error(f"Error loading reservation {reservation_id}: {e}")
        return Response(status_code=500)

    if reservation is None:
        logger.info(f"Could not find reservation with id: {reservation_id}")
        return Response(status_code=404)

    return reservation


@router.put("/{reservation_id}", response_model=ReservationInDB)
async def update_reservation(
    reservation_id: UUID,
    reservation_update: ReservationUpdate,
    conn: DBConn = Depends(get_conn),
):
    """
    Update a reservation.

    Fields left out of the body keep their stored values.

    Args:
        reservation_id: Reservation ID
        reservation_update: Fields to update
        conn: Database connection

    Returns:
        Updated reservation
    """
    try:
        reservation = await reservation_service.update_reservation(
            conn, reservation_id, reservation_update
        )
    except Exception as e:
        logger.error(f"Error updating reservation {reservation_id}: {e}")
        return Response(status_code=500)

    if reservation is None:
        logger.info(f"Cannot update reservation because it does not exist with id: {reservation_id}")
        return Response(status_code=404)

    return reservation


@router.delete("/{reservation_id}", status_code=204)
async def delete_reservation(reservation_id: UUID, conn: DBConn = Depends(get_conn)):
    """Delete a reservation."""
    try:
        rows_affected = await reservation_service.delete_reservation(conn, reservation_id)
    except Exception as e:
        logger.error(f"Error deleting reservation {reservation_id}: {e}")
        return Response(status_code=500)

    if rows_affected < 1:
        logger.info(f"Could not find reservation to delete with id: {reservation_id}")
        return Response(status_code=404)

    logger.info(f"Deleted reservation with id: {reservation_id}")
    return Response(status_code=204)
