import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from loguru import logger
from sqlmodel.ext.asyncio.session import AsyncSession

_player_locks: dict[int, asyncio.Lock] = {}
# Holders plus waiters per player; the lock is dropped when it reaches 0
_lock_users: dict[int, int] = {}


@asynccontextmanager
async def player_lock(player_id: int) -> AsyncIterator[None]:
    """Serialize roster-mutating operations of a single player.

    Different players never contend with each other.
    """
    lock = _player_locks.setdefault(player_id, asyncio.Lock())
    _lock_users[player_id] = _lock_users.get(player_id, 0) + 1
    try:
        if lock.locked():
            logger.debug(f"Waiting for roster lock of player {player_id}")
        async with lock:
            yield
    finally:
        _lock_users[player_id] -= 1
        if _lock_users[player_id] == 0:
            del _lock_users[player_id]
            del _player_locks[player_id]


@asynccontextmanager
async def player_transaction(db: AsyncSession, player_id: int) -> AsyncIterator[None]:
    """Run one logical roster operation: lock, mutate, commit once.

    Any exception discards every pending change of the block.
    """
    async with player_lock(player_id):
        try:
            yield
        except BaseException:
            await db.rollback()
            raise
        await db.commit()
