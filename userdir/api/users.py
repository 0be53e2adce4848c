from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
from userdir.core.config import DEFAULT_PAGE_SIZE, MAX_PAGE, MAX_PAGE_SIZE
from userdir.core.db import get_db
from userdir.schemas.user import UserPayload, UserResponse, UsernameAvailability, to_user_response
from userdir.services import users as user_service

router = APIRouter()


@router.get("", response_model=List[UserResponse])
def list_users(
    page: int = Query(1, ge=1, le=MAX_PAGE),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, alias="pageSize"),
    db: Session = Depends(get_db),
):
    """Список пользователей с названием группы, по фамилии и имени"""
    users = user_service.list_users(db, page=page, page_size=page_size)
    return [to_user_response(u) for u in users]


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserPayload, response: Response, db: Session = Depends(get_db)):
    user = user_service.create_user(db, payload)
    response.headers["Location"] = f"/api/users/{user.id}"
    return to_user_response(user)


# Объявлен до /{user_id}, иначе путь перехватывается
@router.get("/check-username", response_model=UsernameAvailability)
def check_username(username: Optional[str] = None, db: Session = Depends(get_db)):
    """available=true, если имя свободно"""
    return UsernameAvailability(available=user_service.is_username_available(db, username))


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, db: Session = Depends(get_db)):
    return to_user_response(user_service.get_user(db, user_id))


@router.put("/{user_id}", response_model=UserResponse)
def update_user(user_id: int, payload: UserPayload, db: Session = Depends(get_db)):
    return to_user_response(user_service.update_user(db, user_id, payload))


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, db: Session = Depends(get_db)):
    user_service.delete_user(db, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
