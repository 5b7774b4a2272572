from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from schooladmin.database import get_db
from schooladmin.repositories import TeacherRepository
from schooladmin.schemas.teacher import TeacherCreate, TeacherOut, TeacherUpdate
from schooladmin.utils.access import require

router = APIRouter(prefix="/teachers", tags=["Teachers"])


@router.get("", response_model=List[TeacherOut], dependencies=[Depends(require("teachers.read"))])
def list_teachers(db: Session = Depends(get_db)):
    return TeacherRepository(db).list()


@router.get("/{teacher_id}", response_model=TeacherOut, dependencies=[Depends(require("teachers.read"))])
def get_teacher(teacher_id: str, db: Session = Depends(get_db)):
    return TeacherRepository(db).get(teacher_id)


@router.post("", response_model=TeacherOut, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require("teachers.create"))])
def create_teacher(payload: TeacherCreate, db: Session = Depends(get_db)):
    return TeacherRepository(db).create(payload.model_dump())


@router.put("/{teacher_id}", response_model=TeacherOut, dependencies=[Depends(require("teachers.update"))])
def update_teacher(teacher_id: str, payload: TeacherUpdate, db: Session = Depends(get_db)):
    return TeacherRepository(db).update(teacher_id, payload.model_dump(exclude_unset=True))


@router.delete("/{teacher_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(require("teachers.delete"))])
def delete_teacher(teacher_id: str, db: Session = Depends(get_db)):
    TeacherRepository(db).delete(teacher_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
