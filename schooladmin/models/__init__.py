from schooladmin.models.user import User, ROLES
from schooladmin.models.school_class import SchoolClass
from schooladmin.models.teacher import Teacher
from schooladmin.models.student import Student

__all__ = ["User", "ROLES", "SchoolClass", "Teacher", "Student"]
