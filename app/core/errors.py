from fastapi import HTTPException, status


class GameError(HTTPException):
    """Base class for rule violations raised by the game services.

    Raised before any state is touched, so the caller's session has nothing
    to roll back besides reads.
    """

    code: str = "game_error"
    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str) -> None:
        super().__init__(status_code=self.status_code, detail=detail)


class InsufficientResourceError(GameError):
    code = "insufficient_resource"

    def __init__(self, resource: str, *, owned: int, required: int) -> None:
        self.resource = resource
        self.owned = owned
        self.required = required
        super().__init__(f"{resource}不足。擁有: {owned}, 需要: {required}")


class PreconditionError(GameError):
    code = "precondition_failed"


class NotFoundError(GameError):
    code = "not_found"
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str, entity_id: int | str | None = None) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"找不到{entity}" if entity_id is None else f"找不到{entity} (#{entity_id})")
