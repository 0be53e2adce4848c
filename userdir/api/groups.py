from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from pydantic import BaseModel
from userdir.core.db import get_db
from userdir.schemas.user import UserResponse, to_user_response
from userdir.services import groups as group_service

router = APIRouter()

# Pydantic-модель для возврата JSON
class GroupResponse(BaseModel):
    id: int
    name: str


@router.get("", response_model=List[GroupResponse])
def list_groups(db: Session = Depends(get_db)):
    """Все группы, по названию"""
    return [GroupResponse(id=g.id, name=g.name) for g in group_service.list_groups(db)]


@router.get("/{group_id}/users", response_model=List[UserResponse])
def list_group_users(group_id: int, db: Session = Depends(get_db)):
    return [to_user_response(u) for u in group_service.list_group_users(db, group_id)]
