"""
SQLAlchemy ORM models.

Tables
------
* ``schools`` -- registered schools with their coordinates

No spatial index: listing reads every row and ranks in Python.
"""

from sqlalchemy import Column, Float, Integer, String

from .database import Base


class SchoolModel(Base):
    __tablename__ = "schools"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    address = Column(String(255), nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
