from pydantic import BaseModel, ConfigDict
from typing import List

from honyaku.api.schemas.common import SentenceId, UtcDateTime

class CheckAnswerRequest(BaseModel):
    sentence_id: SentenceId
    user_answer: str

class AnswerHistoryResponse(BaseModel):
    id: int
    incorrect_answer: str
    created_at: UtcDateTime

    model_config = ConfigDict(
        from_attributes=True
    )

class CheckAnswerResponse(BaseModel):
    is_correct: bool
    correct_answer: str
    histories: List[AnswerHistoryResponse]
