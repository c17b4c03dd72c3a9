from pydantic import BaseModel, ConfigDict, Field

from diagnosis_engine.models.enumerations import QuestionCategory


class AnswerRecord(BaseModel):
    """
    One answered survey question, as submitted by the survey collaborator.

    Validation happens when the record is built from a payload; the scoring
    functions trust the records they receive.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    question_id: str = Field(
        ...,
        alias="questionId",
        min_length=1,
        description="Identifier of the answered question"
    )

    score: int = Field(
        ...,
        ge=1,
        le=7,
        description="Likert answer on the 1-7 scale"
    )

    category: QuestionCategory = Field(
        ...,
        description="Category the question belongs to"
    )

    is_reverse: bool = Field(
        default=False,
        alias="isReverse",
        description="Reverse-coded item: scored as 8 - score before aggregation"
    )
