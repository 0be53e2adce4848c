from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from userdir.core.db import get_db
from userdir.schemas.user import LoginRequest, UserResponse, to_user_response
from userdir.services.users import authenticate

router = APIRouter()


@router.post("/login", response_model=UserResponse)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """Авторизация пользователя: профиль и название группы"""
    user = authenticate(db, credentials.username, credentials.password)
    return to_user_response(user)
