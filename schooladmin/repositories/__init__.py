from schooladmin.repositories.base import Repository
from schooladmin.repositories.school_class import ClassRepository
from schooladmin.repositories.teacher import TeacherRepository
from schooladmin.repositories.student import StudentRepository

__all__ = ["Repository", "ClassRepository", "TeacherRepository", "StudentRepository"]
