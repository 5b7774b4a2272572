from typing import List

from schooladmin.exceptions import ConflictError, ValidationError
from schooladmin.models import SchoolClass, Student, Teacher
from schooladmin.repositories.base import Repository

MAX_YEAR = 9999


class ClassRepository(Repository[SchoolClass]):
    model = SchoolClass
    entity_name = "Class"

    required_fields = ("name", "year", "student_fees")
    text_fields = ("name",)
    non_negative_fields = ("student_fees",)
    references = {"teacher_id": (Teacher, "Teacher")}

    def _validate(self, values):
        super()._validate(values)
        year = values.get("year")
        if year is not None and (isinstance(year, bool) or not isinstance(year, int) or year < 1 or year > MAX_YEAR):
            raise ValidationError("year", f"must be an integer between 1 and {MAX_YEAR}")

    def _check_delete(self, obj: SchoolClass) -> None:
        # Block policy: a class with students or an assigned teacher stays
        students: List[str] = [s.id for s in self.db.query(Student.id).filter(Student.class_id == obj.id)]
        teachers: List[str] = [t.id for t in self.db.query(Teacher.id).filter(Teacher.assigned_class_id == obj.id)]
        if students or teachers:
            raise ConflictError(
                "Class is still referenced",
                details={"students": students, "teachers": teachers},
            )
