from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from userdir.core.db import Base

class Group(Base):
    __tablename__ = "groups"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)

    # Обратная связь только для поиска, группа не владеет пользователями
    users = relationship("User", back_populates="group")
