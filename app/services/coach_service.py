"""Coach data access."""
import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, insert, select, update
from sqlalchemy.sql import func

from app.core.database import DBConn
from app.models.coach import Coach
from app.schemas.coach import CoachCreate, CoachUpdate, CoachInDB
from app.services.partial_update import changed_values

logger = logging.getLogger(__name__)

coaches = Coach.__table__

NULLABLE_FIELDS = {"email"}


class CoachService:
    """Service for reading and writing coaches."""

    async def load_coaches(self, conn: DBConn) -> List[CoachInDB]:
        """Return every coach; an empty list when there are none."""
        try:
            rows = await conn.fetch_all(select(coaches))
        except Exception as e:
            logger.error(f"Error querying coaches: {e}")
            raise

        return [CoachInDB.model_validate(dict(row)) for row in rows]

    async def load_coach_by_id(self, conn: DBConn, coach_id: UUID) -> Optional[CoachInDB]:
        """Return the coach, or None if no row has this id."""
        try:
            row = await conn.fetch_one(select(coaches).where(coaches.c.id == coach_id))
        except Exception as e:
            logger.error(f"Error querying coach {coach_id}: {e}")
            raise

        if row is None:
            logger.info(f"No coach found with id: {coach_id}")
            return None

        return CoachInDB.model_validate(dict(row))

    async def insert_coach(self, conn: DBConn, coach: CoachCreate) -> CoachInDB:
        """
        Insert a coach and return the stored row.

        The id, is_active and timestamps come from column defaults.

        Args:
            conn: Database connection
            coach: Client supplied coach fields

        Returns:
            The coach as persisted
        """
        stmt = (
            insert(coaches)
            .values(
                first_name=coach.first_name,
                last_name=coach.last_name,
                phone=coach.phone,
                email=coach.email,
                specialties=coach.specialties,
            )
            .returning(*coaches.c)
        )

        try:
            row = await conn.fetch_one(stmt)
        except Exception as e:
            logger.error(f"Error inserting coach: {e}")
            raise

        return CoachInDB.model_validate(dict(row))

    async def update_coach(
        self,
        conn: DBConn,
        coach_id: UUID,
        updates: CoachUpdate,
    ) -> Optional[CoachInDB]:
        """
        Apply a partial update to a coach.

        Only fields present in the payload are written; updated_at is
        always moved to the database's current time.

        Args:
            conn: Database connection
            coach_id: Coach ID
            updates: Fields to update

        Returns:
            Updated coach, or None if the coach does not exist
        """
        values = changed_values(updates, NULLABLE_FIELDS)

        stmt = (
            update(coaches)
            .where(coaches.c.id == coach_id)
            .values(**values, updated_at=func.now())
            .returning(*coaches.c)
        )

        try:
            row = await conn.fetch_one(stmt)
        except Exception as e:
            logger.error(f"Error updating coach {coach_id}: {e}")
            raise

        if row is None:
            logger.info(f"Could not find coach to update with id: {coach_id}")
            return None

        return CoachInDB.model_validate(dict(row))

    async def delete_coach(self, conn: DBConn, coach_id: UUID) -> int:
        """Delete a coach and return the number of rows removed (0 or 1)."""
        try:
            return await conn.execute(delete(coaches).where(coaches.c.id == coach_id))
        except Exception as e:
            logger.error(f"Error deleting coach {coach_id}: {e}")
            raise


# Singleton instance
coach_service = CoachService()
