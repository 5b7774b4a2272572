from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from schooladmin.database import get_db
from schooladmin.repositories import ClassRepository
from schooladmin.schemas.school_class import ClassCreate, ClassDetails, ClassOut, ClassUpdate
from schooladmin.schemas.student import StudentOut
from schooladmin.schemas.teacher import TeacherOut
from schooladmin.utils.access import require
from schooladmin.utils.analytics import class_details

router = APIRouter(prefix="/classes", tags=["Classes"])


@router.get("", response_model=List[ClassOut], dependencies=[Depends(require("classes.read"))])
def list_classes(db: Session = Depends(get_db)):
    return ClassRepository(db).list()


@router.get("/{class_id}", response_model=ClassDetails, dependencies=[Depends(require("classes.details"))])
def get_class(class_id: str, db: Session = Depends(get_db)):
    """
    Class with its teacher and enrolled students, for the class analytics page.
    Staff only: the embedded records carry salary, contact and fee details.
    """
    details = class_details(db, class_id)
    teacher = details["teacher"]
    return ClassDetails(
        id=details["id"],
        name=details["name"],
        year=details["year"],
        student_fees=details["student_fees"],
        teacher=TeacherOut.model_validate(teacher) if teacher else None,
        students=[StudentOut.model_validate(s) for s in details["students"]],
    )


@router.post("", response_model=ClassOut, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require("classes.create"))])
def create_class(payload: ClassCreate, db: Session = Depends(get_db)):
    return ClassRepository(db).create(payload.model_dump())


@router.put("/{class_id}", response_model=ClassOut, dependencies=[Depends(require("classes.update"))])
def update_class(class_id: str, payload: ClassUpdate, db: Session = Depends(get_db)):
    return ClassRepository(db).update(class_id, payload.model_dump(exclude_unset=True))


@router.delete("/{class_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(require("classes.delete"))])
def delete_class(class_id: str, db: Session = Depends(get_db)):
    """
    Refused with 409 while any student or teacher still references the class.
    """
    ClassRepository(db).delete(class_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
