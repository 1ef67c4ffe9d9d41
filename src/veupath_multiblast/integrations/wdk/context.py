"""Resolve the WDK question a BLAST plugin request was issued for.

Only the interfaces of the WDK model are described here; a deployment
supplies the registry that loads one model per project.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

from veupath_multiblast.platform.errors import ErrorCode, NotFoundError
from veupath_multiblast.platform.logging import get_logger

logger = get_logger(__name__)

# Request context key holding the full name of the question being answered.
QUERY_CTX_QUESTION = "wdk-question"


class WdkRecordClass(Protocol):
    @property
    def full_name(self) -> str: ...


class WdkQuestion(Protocol):
    @property
    def full_name(self) -> str: ...

    @property
    def record_class(self) -> WdkRecordClass: ...


class WdkModel(Protocol):
    def get_question_by_full_name(self, full_name: str) -> WdkQuestion | None: ...


class WdkModelRegistry(Protocol):
    """Hands out the (singleton) WDK model of a project."""

    def get_model(self, project_id: str) -> WdkModel: ...


def get_wdk_model(registry: WdkModelRegistry, project_id: str) -> WdkModel:
    return registry.get_model(project_id)


def get_context_question(
    registry: WdkModelRegistry, project_id: str, context: Mapping[str, str]
) -> WdkQuestion:
    """Look up the question named in a plugin request's context.

    :param registry: WDK model registry.
    :param project_id: Project the request was issued against.
    :param context: Request context values.
    :returns: Question the request answers.
    :raises NotFoundError: If the context names no question, or the project
        model has no question by that name.
    """
    question_full_name = context.get(QUERY_CTX_QUESTION)
    question = (
        get_wdk_model(registry, project_id).get_question_by_full_name(
            question_full_name
        )
        if question_full_name
        else None
    )
    if question is None:
        logger.warning(
            "Context question not found",
            project_id=project_id,
            question=question_full_name,
        )
        raise NotFoundError(
            code=ErrorCode.QUESTION_NOT_FOUND,
            title="Question not found",
            detail=f"Could not find context question: {question_full_name}",
        )
    return question


def get_record_class(
    registry: WdkModelRegistry, project_id: str, context: Mapping[str, str]
) -> WdkRecordClass:
    """Record class of the question named in a plugin request's context."""
    return get_context_question(registry, project_id, context).record_class
