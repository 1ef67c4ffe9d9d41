from dataclasses import dataclass, field

import pytest

from veupath_multiblast.integrations.wdk.context import (
    QUERY_CTX_QUESTION,
    get_context_question,
    get_record_class,
)
from veupath_multiblast.platform.errors import ErrorCode, NotFoundError


@dataclass(frozen=True)
class FakeRecordClass:
    full_name: str


@dataclass(frozen=True)
class FakeQuestion:
    full_name: str
    record_class: FakeRecordClass


@dataclass
class FakeModel:
    questions: dict[str, FakeQuestion]

    def get_question_by_full_name(self, full_name: str) -> FakeQuestion | None:
        return self.questions.get(full_name)


@dataclass
class FakeRegistry:
    models: dict[str, FakeModel]
    requested: list[str] = field(default_factory=list)

    def get_model(self, project_id: str) -> FakeModel:
        self.requested.append(project_id)
        return self.models[project_id]


GENE_BLAST = FakeQuestion(
    full_name="GeneQuestions.GenesBySimilarity",
    record_class=FakeRecordClass(full_name="TranscriptRecordClasses.TranscriptRecordClass"),
)


@pytest.fixture
def registry() -> FakeRegistry:
    return FakeRegistry(
        models={"PlasmoDB": FakeModel(questions={GENE_BLAST.full_name: GENE_BLAST})}
    )


def test_context_question_is_looked_up_in_project_model(registry: FakeRegistry) -> None:
    context = {QUERY_CTX_QUESTION: "GeneQuestions.GenesBySimilarity"}
    assert get_context_question(registry, "PlasmoDB", context) is GENE_BLAST
    assert registry.requested == ["PlasmoDB"]


def test_record_class_of_context_question(registry: FakeRegistry) -> None:
    context = {QUERY_CTX_QUESTION: "GeneQuestions.GenesBySimilarity"}
    record_class = get_record_class(registry, "PlasmoDB", context)
    assert record_class.full_name == "TranscriptRecordClasses.TranscriptRecordClass"


@pytest.mark.parametrize(
    "context", [{QUERY_CTX_QUESTION: "GeneQuestions.Nope"}, {}]
)
def test_unknown_context_question_is_not_found(
    registry: FakeRegistry, context: dict[str, str]
) -> None:
    with pytest.raises(NotFoundError) as exc_info:
        get_context_question(registry, "PlasmoDB", context)
    assert exc_info.value.code == ErrorCode.QUESTION_NOT_FOUND
    assert exc_info.value.status == 404
