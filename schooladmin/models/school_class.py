from datetime import datetime
from sqlalchemy import Column, String, Integer, Float, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from schooladmin.database import Base


class SchoolClass(Base):
    __tablename__ = "classes"

    id = Column(String, primary_key=True, index=True)
    seq = Column(Integer, nullable=False, index=True)  # insertion order
    name = Column(String, nullable=False)
    year = Column(Integer, nullable=False)
    student_fees = Column(Float, nullable=False, default=0)

    # classes <-> teachers reference each other, so this side is added after both tables exist
    teacher_id = Column(
        String,
        ForeignKey("teachers.id", use_alter=True, name="fk_classes_teacher_id"),
        nullable=True,
    )

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    students = relationship("Student", back_populates="class_", order_by="Student.seq")

    @property
    def enrolled_count(self) -> int:
        return len(self.students)
