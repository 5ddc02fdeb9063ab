from fastapi import Depends, Header, HTTPException

from ra_board.errors import NotFoundError
from ra_board.models.user import User, UserRole
from ra_board.services.board_store import board_store


async def current_user(x_user_id: str = Header(...)) -> User:
    # Mock identity: whichever canned user the header names is trusted as-is.
    try:
        return board_store.get_user(x_user_id)
    except NotFoundError:
        raise HTTPException(status_code=401, detail="Unknown user")


def require_role(*roles: UserRole):
    async def _require(user: User = Depends(current_user)) -> User:
        if user.role not in roles:
            allowed = ", ".join(r.value.lower() for r in roles)
            raise HTTPException(status_code=403, detail=f"Only {allowed} accounts can do this")
        return user

    return _require


require_professor = require_role(UserRole.PROFESSOR)
require_student = require_role(UserRole.STUDENT)
