from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from schooladmin.database import get_db
from schooladmin.repositories import StudentRepository
from schooladmin.schemas.student import StudentCreate, StudentOut, StudentUpdate
from schooladmin.utils.access import require

router = APIRouter(prefix="/students", tags=["Students"])


@router.get("", response_model=List[StudentOut], dependencies=[Depends(require("students.read"))])
def list_students(db: Session = Depends(get_db)):
    return StudentRepository(db).list()


@router.get("/{student_id}", response_model=StudentOut, dependencies=[Depends(require("students.read"))])
def get_student(student_id: str, db: Session = Depends(get_db)):
    return StudentRepository(db).get(student_id)


@router.post("", response_model=StudentOut, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require("students.create"))])
def create_student(payload: StudentCreate, db: Session = Depends(get_db)):
    return StudentRepository(db).create(payload.model_dump())


@router.put("/{student_id}", response_model=StudentOut, dependencies=[Depends(require("students.update"))])
def update_student(student_id: str, payload: StudentUpdate, db: Session = Depends(get_db)):
    return StudentRepository(db).update(student_id, payload.model_dump(exclude_unset=True))


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(require("students.delete"))])
def delete_student(student_id: str, db: Session = Depends(get_db)):
    StudentRepository(db).delete(student_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
