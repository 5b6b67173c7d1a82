"""User Service: listing, login and registration.

Invariants:
    - Registration checks for an existing username before hashing and inserting
    - Login failure is one error for both unknown username and wrong password
    - Unknown usernames still pay for one bcrypt comparison
    - bcrypt work runs in a worker thread, off the event loop
    - Returned dicts are sanitized (User.to_response), never raw ORM rows
"""

import asyncio
import logging

from ideaboard.core import security
from ideaboard.core.errors import InvalidCredentialsError, UsernameTakenError
from ideaboard.core.repository_protocols import UserRepository
from ideaboard.schemas.user import UserCredentials

logger = logging.getLogger(__name__)


class UserService:
    """User use cases."""

    def __init__(self, users: UserRepository):
        self.users = users

    async def show_all(self) -> list[dict]:
        users = await self.users.list_all()
        return [user.to_response(include_token=False) for user in users]

    async def login(self, data: UserCredentials) -> dict:
        user = await self.users.get_by_username(data.username)
        if user is None:
            await asyncio.to_thread(security.verify_against_dummy, data.password)
            logger.info("Login failed", extra={"username": data.username})
            raise InvalidCredentialsError()
        if not await asyncio.to_thread(user.verify_password, data.password):
            logger.info("Login failed", extra={"username": data.username})
            raise InvalidCredentialsError()
        logger.info("User logged in", extra={"user_id": str(user.id)})
        return user.to_response()

    async def register(self, data: UserCredentials) -> dict:
        existing = await self.users.get_by_username(data.username)
        if existing is not None:
            raise UsernameTakenError(data.username)
        user = await self.users.create(
            username=data.username,
            password_hash=await asyncio.to_thread(security.hash_password, data.password),
        )
        logger.info("User registered", extra={"user_id": str(user.id)})
        return user.to_response()
