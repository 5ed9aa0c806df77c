"""Request handlers for user management.

Each handler takes the request's parameter bag, validates it, runs at most
one statement through UserService, and returns exactly one Envelope.
Persistence failures are not caught here.
"""

import logging

from user_api.entities import Envelope
from user_api.services import UserService
from user_api.utils import Params, bad_request, is_blank, not_found, ok, parse_int, require_fields

logger = logging.getLogger(__name__)

NAME_AND_LOGIN_REQUIRED = "Name and login name are required"
INVALID_USER_ID = "User ID must be an integer"
USER_ID_REQUIRED = "User ID is required"
USER_NOT_FOUND = "User not found"


class UserHandler:
    """Handlers for POST /api/user/saveUser and POST /api/user/getDetail.

    Example:
        ```python
        from user_api.handlers import UserHandler
        from user_api.repositories import SqliteDatabase
        from user_api.services import UserService

        handler = UserHandler(user_service=UserService(SqliteDatabase.create()))

        handler.save_user({"name": "Alice", "loginName": "alice01"})
        # Envelope(code=200, message="success", data={"success": True})

        handler.get_detail({"id": "1"})
        # Envelope(code=200, message="success", data={"id": 1, "name": "Alice", ...})
        ```
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize the user handler.

        Args:
            user_service: The persistence service (required).
        """
        self._users = user_service

    def save_user(self, params: Params) -> Envelope:
        """Create a user, or update one when a non-zero ``id`` is given.

        Args:
            params: Raw request parameters: ``name``, ``loginName``, optional ``id``

        Returns:
            Success envelope with ``{"success": True}``, or a 400 envelope
        """
        missing = require_fields(params, "name", "loginName")
        if missing:
            logger.debug("saveUser rejected, missing %s", missing)
            return bad_request(NAME_AND_LOGIN_REQUIRED)

        name = params["name"]
        login_name = params["loginName"]

        raw_id = params.get("id")
        user_id = 0
        if not is_blank(raw_id):
            parsed = parse_int(raw_id)
            if not parsed.ok:
                logger.debug("saveUser rejected, %s", parsed.error)
                return bad_request(INVALID_USER_ID)
            user_id = parsed.value

        if user_id:
            self._users.update(user_id, name, login_name)
            logger.info("Updated user %d", user_id)
        else:
            self._users.create(name, login_name)
            logger.info("Created user with login name %r", login_name)

        return ok({"success": True})

    def get_detail(self, params: Params) -> Envelope:
        """Fetch one user by ``id``.

        Args:
            params: Raw request parameters: ``id``

        Returns:
            Envelope whose data is the first matching row, or a 400/404 envelope
        """
        parsed = parse_int(params.get("id"))
        if not parsed.ok or not parsed.value:
            logger.debug("getDetail rejected, id=%r", params.get("id"))
            return bad_request(USER_ID_REQUIRED)

        rows = self._users.find_by_id(parsed.value)
        if not rows:
            return not_found(USER_NOT_FOUND)

        # id is treated as unique, but only the first row is surfaced
        return ok(rows[0])
