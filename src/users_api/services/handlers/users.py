import logging
import sys
from typing import List

from users_api.domain.errors import UserAlreadyExistsError, UserIdMismatchError, UserNotFoundError
from users_api.domain.user import User
from users_api.services.data.unit_of_work import IUoW

logging.basicConfig(stream=sys.stdout, level=logging.INFO)
logger = logging.getLogger(__name__)


def get_user_list(uow: IUoW) -> List[User]:
    logger.info("start get_user_list")
    with uow:
        users = uow.users.list()
    logger.info(f"finish get_user_list: {len(users)} users")
    return users


def get_user_info(user_id: str, uow: IUoW) -> User:
    logger.info("start get_user_info")
    logger.info(f"{user_id=}")
    with uow:
        user = uow.users.get(user_id)
    logger.info("finish get_user_info")
    return user


def create_new_user(user: User, uow: IUoW) -> None:
    logger.info("start create_new_user")
    logger.info(f"{user=}")
    user.validate()
    with uow:
        try:
            uow.users.get(user.id)
        except UserNotFoundError:
            uow.users.create(user)
            uow.commit()
        else:
            raise UserAlreadyExistsError(user.id)
    logger.info("finish create_new_user")


def update_exist_user(user_id: str, user: User, uow: IUoW) -> None:
    logger.info("start update_exist_user")
    logger.info(f"{user_id=} {user=}")
    with uow:
        uow.users.get(user_id)
        user.validate()
        if user.id != user_id:
            raise UserIdMismatchError(user_id, user.id)
        uow.users.update(user_id, user)
        uow.commit()
    logger.info("finish update_exist_user")


def delete_exist_user(user_id: str, uow: IUoW) -> None:
    logger.info("start delete_exist_user")
    logger.info(f"{user_id=}")
    with uow:
        uow.users.get(user_id)
        uow.users.delete(user_id)
        uow.commit()
    logger.info("finish delete_exist_user")
