"""
SQLAlchemy ORM models.

Tables
------
* ``schools`` -- registered schools with their coordinates

Coordinates are double-precision floats; distances are computed in Python, so no
spatial column or index is needed.
"""

from sqlalchemy import Column, Double, Integer, String

from .database import Base


class SchoolModel(Base):
    __tablename__ = "schools"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    address = Column(String(255), nullable=False)
    latitude = Column(Double, nullable=False)
    longitude = Column(Double, nullable=False)
