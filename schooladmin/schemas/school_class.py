from pydantic import BaseModel, Field
from typing import List, Optional

from schooladmin.schemas.student import StudentOut
from schooladmin.schemas.teacher import TeacherOut

class ClassCreate(BaseModel):
    name: str = Field(..., min_length=1)
    year: int = Field(..., ge=1, le=9999)
    student_fees: float = Field(..., ge=0, allow_inf_nan=False, alias="studentFees")
    teacher_id: Optional[str] = Field(None, alias="teacher")
    class Config:
        populate_by_name = True

class ClassUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    year: Optional[int] = Field(None, ge=1, le=9999)
    student_fees: Optional[float] = Field(None, ge=0, allow_inf_nan=False, alias="studentFees")
    teacher_id: Optional[str] = Field(None, alias="teacher")
    class Config:
        populate_by_name = True

class ClassOut(BaseModel):
    id: str
    name: str
    year: int
    student_fees: float = Field(..., alias="studentFees")
    teacher_id: Optional[str] = Field(None, alias="teacher")
    enrolled_count: int = Field(0, alias="studentCount")
    class Config:
        from_attributes = True
        populate_by_name = True

class ClassDetails(BaseModel):
    """Class with its teacher and enrolled students resolved."""
    id: str
    name: str
    year: int
    student_fees: float = Field(..., alias="studentFees")
    teacher: Optional[TeacherOut] = None
    students: List[StudentOut] = []
    class Config:
        populate_by_name = True
