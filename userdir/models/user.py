from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from userdir.core.db import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, nullable=False)
    first_name = Column(String, nullable=False, default="")
    last_name = Column(String, nullable=False, default="")
    email = Column(String, nullable=False, default="")
    password_hash = Column(String, nullable=False)

    # Ссылка на группу не проверяется при создании/обновлении
    group_id = Column(Integer, ForeignKey("groups.id"), nullable=True)

    group = relationship("Group", back_populates="users")

    @property
    def group_name(self):
        return self.group.name if self.group is not None else None
