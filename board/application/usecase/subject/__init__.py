"""Subject use cases."""

from .create_subject import (
    CreateSubjectRequest,
    CreateSubjectResponse,
    CreateSubjectUseCase,
)
from .get_subject import GetSubjectRequest, GetSubjectResponse, GetSubjectUseCase
from .list_subjects import (
    ListSubjectsRequest,
    ListSubjectsResponse,
    ListSubjectsUseCase,
)
from .subject_item import SubjectItem

__all__ = [
    "CreateSubjectRequest",
    "CreateSubjectResponse",
    "CreateSubjectUseCase",
    "GetSubjectRequest",
    "GetSubjectResponse",
    "GetSubjectUseCase",
    "ListSubjectsRequest",
    "ListSubjectsResponse",
    "ListSubjectsUseCase",
    "SubjectItem",
]
