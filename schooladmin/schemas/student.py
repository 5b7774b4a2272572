from datetime import date
from pydantic import BaseModel, Field
from typing import Optional

class StudentCreate(BaseModel):
    name: str = Field(..., min_length=1)
    gender: str = Field(..., min_length=1)
    dob: date
    contact_details: str = Field(..., min_length=1, alias="contactDetails")
    fees_paid: float = Field(0, ge=0, allow_inf_nan=False, alias="feesPaid")
    class_id: Optional[str] = Field(None, alias="class")
    class Config:
        populate_by_name = True

class StudentUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    gender: Optional[str] = Field(None, min_length=1)
    dob: Optional[date] = None
    contact_details: Optional[str] = Field(None, min_length=1, alias="contactDetails")
    fees_paid: Optional[float] = Field(None, ge=0, allow_inf_nan=False, alias="feesPaid")
    class_id: Optional[str] = Field(None, alias="class")
    class Config:
        populate_by_name = True

class StudentOut(BaseModel):
    id: str
    name: str
    gender: str
    dob: date
    contact_details: str = Field(..., alias="contactDetails")
    fees_paid: float = Field(..., alias="feesPaid")
    class_id: Optional[str] = Field(None, alias="class")
    class Config:
        from_attributes = True
        populate_by_name = True
