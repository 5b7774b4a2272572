from schooladmin.exceptions import ConflictError
from schooladmin.models import SchoolClass, Teacher
from schooladmin.repositories.base import Repository


class TeacherRepository(Repository[Teacher]):
    model = Teacher
    entity_name = "Teacher"

    required_fields = ("name", "gender", "dob", "contact_details", "salary")
    text_fields = ("name", "gender", "contact_details")
    non_negative_fields = ("salary",)
    date_fields = ("dob",)
    references = {"assigned_class_id": (SchoolClass, "Class")}

    def _check_delete(self, obj: Teacher) -> None:
        classes = [c.id for c in self.db.query(SchoolClass.id).filter(SchoolClass.teacher_id == obj.id)]
        if classes:
            raise ConflictError("Teacher is still referenced", details={"classes": classes})
