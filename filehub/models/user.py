from sqlalchemy import Column, Integer, String

from filehub.models.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    # Doubles as the name of the user's storage directory
    username = Column(String(50), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)
