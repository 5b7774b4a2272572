from datetime import datetime
from sqlalchemy import Column, String, Integer, Float, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from schooladmin.database import Base


class Student(Base):
    __tablename__ = "students"

    id = Column(String, primary_key=True, index=True)
    seq = Column(Integer, nullable=False, index=True)
    name = Column(String, nullable=False)
    gender = Column(String, nullable=False)
    dob = Column(Date, nullable=False)
    contact_details = Column(String, nullable=False)
    fees_paid = Column(Float, nullable=False, default=0)

    class_id = Column(String, ForeignKey("classes.id"), nullable=True, index=True)
    class_ = relationship("SchoolClass", back_populates="students")

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
