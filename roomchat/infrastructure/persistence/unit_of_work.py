"""SQLAlchemy Unit of Work - commits the request's AsyncSession."""

from sqlalchemy.ext.asyncio import AsyncSession

from roomchat.domain.ports.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        await self._session.rollback()
