from __future__ import annotations

from typing import Dict

from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from schooladmin.models import SchoolClass, Student, Teacher
from schooladmin.repositories import ClassRepository

GENDERS = ("male", "female", "other")


def normalize_gender(value: str | None) -> str:
    """'Male' / ' FEMALE ' -> male / female; anything else counts as other."""
    g = (value or "").strip().lower()
    if g in ("male", "m"):
        return "male"
    if g in ("female", "f"):
        return "female"
    return "other"


def gender_distribution(db: Session, class_id: str) -> Dict[str, int]:
    """
    Student counts per gender for one class.
    Recomputed from the current rows on every call.
    """
    ClassRepository(db).get(class_id)  # NotFoundError for unknown class

    counts = {g: 0 for g in GENDERS}
    rows = db.query(Student.gender).filter(Student.class_id == class_id).all()
    for (gender,) in rows:
        counts[normalize_gender(gender)] += 1
    return counts


def financial_summary(db: Session, other_income: float = 0, other_expenses: float = 0) -> Dict[str, float]:
    """
    totalFees  = sum over classes of studentFees * enrolled students
    netProfit  = (totalFees + other_income) - (totalSalaries + other_expenses)

    other_income / other_expenses are categories the caller tracks elsewhere.
    """
    total_salaries = float(db.query(func.coalesce(func.sum(Teacher.salary), 0)).scalar() or 0)

    total_fees = 0.0
    classes = db.query(SchoolClass).options(selectinload(SchoolClass.students)).all()
    for cls in classes:
        total_fees += (cls.student_fees or 0) * cls.enrolled_count

    total_income = total_fees + other_income
    total_expenses = total_salaries + other_expenses
    return {
        "total_salaries": total_salaries,
        "total_fees": total_fees,
        "total_income": total_income,
        "total_expenses": total_expenses,
        "net_profit": total_income - total_expenses,
    }


def class_details(db: Session, class_id: str) -> Dict:
    """Class row with its teacher and enrolled students resolved."""
    cls = ClassRepository(db).get(class_id)
    teacher = db.get(Teacher, cls.teacher_id) if cls.teacher_id else None
    return {
        "id": cls.id,
        "name": cls.name,
        "year": cls.year,
        "student_fees": cls.student_fees,
        "teacher": teacher,
        "students": list(cls.students),
    }
