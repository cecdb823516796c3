import asyncio
from contextlib import asynccontextmanager
from sqlalchemy.ext.asyncio import AsyncSession

@asynccontextmanager
async def unit_of_work(session: AsyncSession):
    """
    Run the block as one atomic unit of work on `session`.

    Commits when the block exits normally. Any other exit (domain error,
    unexpected failure, task cancellation) rolls the whole unit back before
    the exception propagates, so nothing is ever committed partially.
    """
    if not session.in_transaction():
        await session.begin()
    try:
        yield session
    except BaseException:
        # shield: a cancelled task must still release its row locks
        await asyncio.shield(session.rollback())
        raise
    else:
        await session.commit()
