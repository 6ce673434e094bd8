"""Coach endpoints."""
import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Response

from app.core.database import DBConn, get_conn
from app.schemas.coach import CoachCreate, CoachUpdate, CoachInDB
from app.services.coach_service import coach_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/coaches", tags=["coaches"])


@router.get("", response_model=List[CoachInDB])
async def list_coaches(conn: DBConn = Depends(get_conn)):
    """List all coaches."""
    try:
        return await coach_service.load_coaches(conn)
    except Exception as e:
        logger.error(f"Error loading coaches: {e}")
        return Response(status_code=500)


@router.post("", response_model=CoachInDB, status_code=201)
async def create_coach(
    coach: CoachCreate,
    response: Response,
    conn: DBConn = Depends(get_conn),
):
    """
    Create a new coach.

    The id, is_active flag and timestamps are assigned by the database.
    The Location header points at the new coach.

    Args:
        coach: Coach data
        response: Outgoing response, used to set Location
        conn: Database connection

    Returns:
        Created coach
    """
    try:
        result = await coach_service.insert_coach(conn, coach)
    except Exception as e:
        logger.error(f"Error inserting coach: {e}")
        return Response(status_code=500)

    response.headers["Location"] = f"/api/coaches/{result.id}"
    return result


@router.get("/{coach_id}", response_model=CoachInDB)
async def get_coach(coach_id: UUID, conn: DBConn = Depends(get_conn)):
    """Get a specific coach by ID."""
    try:
        coach = await coach_service.load_coach_by_id(conn, coach_id)
    except Exception as e:
        logger.error(f"Error loading coach {coach_id}: {e}")
        return Response(status_code=500)

    if coach is None:
        return Response(status_code=404)

    return coach


@router.put("/{coach_id}", response_model=CoachInDB)
async def update_coach(
    coach_id: UUID,
    coach_update: CoachUpdate,
    conn: DBConn = Depends(get_conn),
):
    """
    Update a coach's information.

    Fields left out of the body keep their stored values.

    Args:
        coach_id: Coach ID
        coach_update: Fields to update
        conn: Database connection

    Returns:
        Updated coach
    """
    try:
        coach = await coach_service.update_coach(conn, coach_id, coach_update)
    except Exception as e:
        logger.error(f"Error updating coach {coach_id}: {e}")
        return Response(status_code=500)

    if coach is None:
        logger.info(f"Cannot update coach because it does not exist with id: {coach_id}")
        return Response(status_code=404)

    return coach


@router.delete("/{coach_id}", status_code=204)
async def delete_coach(coach_id: UUID, conn: DBConn = Depends(get_conn)):
    """Delete a coach."""
    try:
        rows_affected = await coach_service.delete_coach(conn, coach_id)
    except Exception as e:
        logger.error(f"Error deleting coach {coach_id}: {e}")
        return Response(status_code=500)

    if rows_affected < 1:
        logger.info(f"Could not find coach to delete with id: {coach_id}")
        return Response(status_code=404)

    logger.info(f"Deleted coach with id: {coach_id}")
    return Response(status_code=204)
