import logging
from datetime import timezone
from typing import List, Optional

from sqlalchemy import select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine

from school_finder.core.errors import StoreError
from school_finder.db.models import Base, SchoolRow
from school_finder.services.domain import NewSchool, School


"""Record store backed by a relational database through SQLAlchemy asyncio.

SchoolStore owns the engine (connection pool). It is created once, opened at
startup, closed at shutdown and handed to the services that need it.
- store
"""

logger = logging.getLogger(__name__)


def _to_school(row: SchoolRow) -> School:
    created_at = row.created_at
    # rows hold naive UTC
    if created_at is not None and created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return School(
        id=row.id,
        name=row.name,
        address=row.address,
        latitude=float(row.latitude),
        longitude=float(row.longitude),
        created_at=created_at,
    )


class SchoolStore:
    """Insert-one / fetch-all access to the schools table. - school_store"""

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.echo = echo
        self._engine: Optional[AsyncEngine] = None
        self._sessions: Optional[async_sessionmaker] = None

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    async def open(self) -> None:
        """Create the engine and the schools table if it does not exist. - open"""
        if self._engine is not None:
            return
        engine = create_async_engine(self.database_url, echo=self.echo, pool_pre_ping=True)
        try:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except (SQLAlchemyError, OSError) as exc:
            await engine.dispose()
            raise StoreError(f"Could not initialise the record store: {exc}") from exc

        self._engine = engine
        self._sessions = async_sessionmaker(engine, expire_on_commit=False)
        logger.info("Record store opened (%s)", engine.url.render_as_string(hide_password=True))

    async def close(self) -> None:
        """Dispose the connection pool. - close"""
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._sessions = None
        logger.info("Record store closed")

    def _session_factory(self) -> async_sessionmaker:
        if self._sessions is None:
            raise StoreError("Record store is not open")
        return self._sessions

    async def add(self, new_school: NewSchool) -> School:
        """Insert one school and return it with its assigned id. - add"""
        sessions = self._session_factory()
        row = SchoolRow(
            name=new_school.name,
            address=new_school.address,
            latitude=new_school.latitude,
            longitude=new_school.longitude,
        )
        try:
            async with sessions() as session:
                session.add(row)
                await session.commit()
        except (SQLAlchemyError, OSError) as exc:
            raise StoreError(f"Insert failed: {exc}") from exc
        return _to_school(row)

    async def list_all(self) -> List[School]:
        """Fetch every school in insertion order. - list_all"""
        sessions = self._session_factory()
        try:
            async with sessions() as session:
                result = await session.execute(select(SchoolRow).order_by(SchoolRow.id))
                rows = result.scalars().all()
        except (SQLAlchemyError, OSError) as exc:
            raise StoreError(f"Fetch failed: {exc}") from exc
        return [_to_school(row) for row in rows]

    async def ping(self) -> bool:
        """Return True when a trivial query succeeds. Never raises. - ping"""
        if self._engine is None:
            return False
        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError):
            logger.warning("Record store ping failed", exc_info=True)
            return False
        return True
