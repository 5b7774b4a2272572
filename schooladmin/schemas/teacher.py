from datetime import date
from pydantic import BaseModel, Field
from typing import Optional

class TeacherCreate(BaseModel):
    name: str = Field(..., min_length=1)
    gender: str = Field(..., min_length=1)
    dob: date
    contact_details: str = Field(..., min_length=1, alias="contactDetails")
    salary: float = Field(..., ge=0, allow_inf_nan=False)
    assigned_class_id: Optional[str] = Field(None, alias="assignedClass")
    class Config:
        populate_by_name = True

class TeacherUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    gender: Optional[str] = Field(None, min_length=1)
    dob: Optional[date] = None
    contact_details: Optional[str] = Field(None, min_length=1, alias="contactDetails")
    salary: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    assigned_class_id: Optional[str] = Field(None, alias="assignedClass")
    class Config:
        populate_by_name = True

class TeacherOut(BaseModel):
    id: str
    name: str
    gender: str
    dob: date
    contact_details: str = Field(..., alias="contactDetails")
    salary: float
    assigned_class_id: Optional[str] = Field(None, alias="assignedClass")
    class Config:
        from_attributes = True
        populate_by_name = True
