import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import Response
from pydantic import ValidationError
from starlette.requests import ClientDisconnect

from users_api.domain.errors import (
    UserAlreadyExistsError,
    UserIdMismatchError,
    UserNotFoundError,
    UserValidationError,
)
from users_api.domain.user import User
from users_api.entrypoints.schemas.user import UserInfo, new_json_response
from users_api.services.data.unit_of_work import UserUoW
from users_api.services.handlers.users import (
    create_new_user,
    delete_exist_user,
    get_user_info,
    get_user_list,
    update_exist_user,
)

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"

router = APIRouter()


def get_uow(request: Request) -> UserUoW:
    return UserUoW(request.app.state.users)


def json_message(status_code: int, text: str) -> Response:
    return Response(content=new_json_response(text), status_code=status_code, media_type=JSON_MEDIA_TYPE)


def require_json(request: Request) -> None:
    media_type = request.headers.get("content-type", "").split(";", 1)[0].strip().lower()
    if media_type != JSON_MEDIA_TYPE:
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail="Content-Type must be application/json",
        )


async def read_user(request: Request) -> User:
    try:
        body = await request.body()
    except ClientDisconnect as error:
        logger.warning(f"could not read body: {error!r}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Unable to parse the request body")
    try:
        payload = UserInfo.model_validate_json(body)
    except ValidationError as error:
        logger.warning(f"could not unmarshal JSON: {error}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Unable to unmarshal JSON")
    return payload.to_domain()


def invalid_request(error: UserValidationError) -> HTTPException:
    logger.warning(f"{error=}")
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="invalid request")


def user_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="user not found")


@router.get("/", response_model=List[UserInfo], status_code=200)
async def list_users(uow: UserUoW = Depends(get_uow)) -> List[UserInfo]:
    return [UserInfo.from_domain(user) for user in get_user_list(uow)]


@router.post("/", status_code=201)
async def create_user(request: Request, uow: UserUoW = Depends(get_uow)) -> Response:
    require_json(request)
    user = await read_user(request)
    try:
        create_new_user(user, uow)
    except UserValidationError as error:
        raise invalid_request(error)
    except UserAlreadyExistsError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="user already exists")
    return json_message(status.HTTP_201_CREATED, "user created")


@router.get("/{id}", response_model=UserInfo, status_code=200)
async def get_user(id: str, uow: UserUoW = Depends(get_uow)) -> UserInfo:
    try:
        return UserInfo.from_domain(get_user_info(id, uow))
    except UserNotFoundError:
        raise user_not_found()


@router.put("/{id}", status_code=200)
async def update_user(id: str, request: Request, uow: UserUoW = Depends(get_uow)) -> Response:
    try:
        get_user_info(id, uow)
    except UserNotFoundError:
        raise user_not_found()
    require_json(request)
    user = await read_user(request)
    try:
        update_exist_user(id, user, uow)
    except UserNotFoundError:
        raise user_not_found()
    except UserValidationError as error:
        raise invalid_request(error)
    except UserIdMismatchError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="ID in the body does not match the path")
    return json_message(status.HTTP_200_OK, "user updated")


@router.delete("/{id}", status_code=200)
async def delete_user(id: str, uow: UserUoW = Depends(get_uow)) -> Response:
    try:
        delete_exist_user(id, uow)
    except UserNotFoundError:
        raise user_not_found()
    return json_message(status.HTTP_200_OK, "user deleted")
