from sqlalchemy import Column, Integer, String
from database import Base

class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    description = Column(String)

    def __repr__(self):
        return f"<Task {self.id}: {self.description!r}>"
