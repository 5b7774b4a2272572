from datetime import datetime
from sqlalchemy import Column, String, Integer, Float, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from schooladmin.database import Base


class Teacher(Base):
    __tablename__ = "teachers"

    id = Column(String, primary_key=True, index=True)
    seq = Column(Integer, nullable=False, index=True)
    name = Column(String, nullable=False)
    gender = Column(String, nullable=False)
    dob = Column(Date, nullable=False)
    contact_details = Column(String, nullable=False)
    salary = Column(Float, nullable=False, default=0)

    assigned_class_id = Column(String, ForeignKey("classes.id"), nullable=True)
    assigned_class = relationship("SchoolClass", foreign_keys=[assigned_class_id])

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
