from schooladmin.models import SchoolClass, Student
from schooladmin.repositories.base import Repository


class StudentRepository(Repository[Student]):
    model = Student
    entity_name = "Student"

    required_fields = ("name", "gender", "dob", "contact_details", "fees_paid")
    text_fields = ("name", "gender", "contact_details")
    non_negative_fields = ("fees_paid",)
    date_fields = ("dob",)
    references = {"class_id": (SchoolClass, "Class")}
