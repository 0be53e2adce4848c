import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from pydantic import BaseModel, ConfigDict, Field
from userdir.core.errors import ValidationError
from userdir.lite.db import get_db
from userdir.lite.models import User

logger = logging.getLogger(__name__)

router = APIRouter()

# Pydantic схемы
class UserCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    email: Optional[str] = None


class UserResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email: str


def _to_response(user: User) -> UserResponse:
    return UserResponse(id=user.id, first_name=user.first_name, last_name=user.last_name, email=user.email)


@router.get("", response_model=List[UserResponse])
def list_users(db: Session = Depends(get_db)):
    return [_to_response(u) for u in db.query(User).order_by(User.id).all()]


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(user_data: UserCreate, response: Response, db: Session = Depends(get_db)):
    """Создание пользователя, все поля обязательны"""
    values = [user_data.first_name, user_data.last_name, user_data.email]
    if any(v is None or not v.strip() for v in values):
        raise ValidationError("Все поля обязательны для заполнения")

    new_user = User(
        first_name=user_data.first_name.strip(),
        last_name=user_data.last_name.strip(),
        email=user_data.email.strip(),
    )
    db.add(new_user)
    db.commit()
    db.refresh(new_user)

    logger.info(f"✅ Создан пользователь id={new_user.id}")
    response.headers["Location"] = f"/api/users/{new_user.id}"
    return _to_response(new_user)
