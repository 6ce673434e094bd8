"""Reservation data access."""
import logging
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import bindparam, delete, insert, select, update
from sqlalchemy.sql import func

from app.core.database import DBConn
from app.models.reservation import Reservation
from app.schemas.reservation import ReservationCreate, ReservationUpdate, ReservationInDB
from app.services.partial_update import changed_values

logger = logging.getLogger(__name__)

reservations = Reservation.__table__

NULLABLE_FIELDS = {"tunnel_id", "coach_id", "customer_email", "notes"}


class ReservationService:
    """Service for reading, writing and searching reservations."""

    async def load_reservations(self, conn: DBConn) -> List[ReservationInDB]:
        """Return every reservation; an empty list when there are none."""
        try:
            rows = await conn.fetch_all(select(reservations))
        except Exception as e:
            logger.error(f"Error querying reservations: {e}")
            raise

        return [ReservationInDB.model_validate(dict(row)) for row in rows]

    async def load_reservation_by_id(
        self, conn: DBConn, reservation_id: UUID
    ) -> Optional[ReservationInDB]:
        """Return the reservation, or None if no row has this id."""
        try:
            row = await conn.fetch_one(
                select(reservations).where(reservations.c.id == reservation_id)
            )
        except Exception as e:
            logger.error(f"Error querying reservation {reservation_id}: {e}")
            raise

        if row is None:
            logger.info(f"No reservation found with id: {reservation_id}")
            return None

        return ReservationInDB.model_validate(dict(row))

    async def insert_reservation(
        self, conn: DBConn, reservation: ReservationCreate
    ) -> ReservationInDB:
        """
        Insert a reservation and return the stored row.

        Args:
            conn: Database connection
            reservation: Client supplied reservation fields

        Returns:
            The reservation as persisted, with its server-assigned id
        """
        stmt = (
            insert(reservations)
            .values(
                reservation_kind=reservation.kind,
                tunnel_id=reservation.tunnel_id,
                coach_id=reservation.coach_id,
                customer_first_name=reservation.customer_first_name,
                customer_last_name=reservation.customer_last_name,
                customer_phone=reservation.customer_phone,
                customer_email=reservation.customer_email,
                start_time=reservation.start_time,
                duration_minutes=reservation.duration_minutes,
                end_time=reservation.end_time,
                status=reservation.status,
                notes=reservation.notes,
            )
            .returning(*reservations.c)
        )

        try:
            row = await conn.fetch_one(stmt)
        except Exception as e:
            logger.error(f"Error inserting reservation: {e}")
            raise

        return ReservationInDB.model_validate(dict(row))

    async def update_reservation(
        self,
        conn: DBConn,
        reservation_id: UUID,
        updates: ReservationUpdate,
    ) -> Optional[ReservationInDB]:
        """
        Apply a partial update to a reservation.

        Args:
            conn: Database connection
            reservation_id: Reservation ID
            updates: Fields to update

        Returns:
            Updated reservation, or None if the reservation does not exist
        """
        values = changed_values(updates, NULLABLE_FIELDS)
        if "kind" in values:
            values["reservation_kind"] = values.pop("kind")

        stmt = (
            update(reservations)
            .where(reservations.c.id == reservation_id)
            .values(**values, updated_at=func.now())
            .returning(*reservations.c)
        )

        try:
            row = await conn.fetch_one(stmt)
        except Exception as e:
            logger.error(f"Error updating reservation {reservation_id}: {e}")
            raise

        if row is None:
            logger.info(f"Could not find reservation to update with id: {reservation_id}")
            return None

        return ReservationInDB.model_validate(dict(row))

    async def delete_reservation(self, conn: DBConn, reservation_id: UUID) -> int:
        """Delete a reservation and return the number of rows removed (0 or 1)."""
        try:
            return await conn.execute(
                delete(reservations).where(reservations.c.id == reservation_id)
            )
        except Exception as e:
            logger.error(f"Error deleting reservation {reservation_id}: {e}")
            raise

    async def search_reservations(
        self,
        conn: DBConn,
        from_time: datetime,
        to_time: datetime,
        tunnel_id: Optional[int] = None,
    ) -> List[ReservationInDB]:
        """
        Find reservations starting in [from_time, to_time), earliest first.

        Args:
            conn: Database connection
            from_time: Inclusive lower bound on start_time
            to_time: Exclusive upper bound on start_time
            tunnel_id: Restrict to one tunnel when given

        Returns:
            Matching reservations ordered by start_time
        """
        query = select(reservations).where(
            reservations.c.start_time >= bindparam("from_time"),
            reservations.c.start_time < bindparam("to_time"),
        )
        params = {"from_time": from_time, "to_time": to_time}

        if tunnel_id is not None:
            query = query.where(reservations.c.tunnel_id == bindparam("tunnel_id"))
            params["tunnel_id"] = tunnel_id

        query = query.order_by(reservations.c.start_time.asc())

        try:
            rows = await conn.fetch_all(query, params)
        except Exception as e:
            logger.error(f"Error searching reservations: {e}")
            raise

        if not rows:
            logger.info(
                f"No reservations matched the search - from: {from_time}, "
                f"to: {to_time}, tunnel_id: {tunnel_id}"
            )

        return [ReservationInDB.model_validate(dict(row)) for row in rows]


# Singleton instance
reservation_service = ReservationService()
