from typing import List
from sqlalchemy.orm import Session
from sqlalchemy import desc

from honyaku.models.answer_history import AnswerHistory
from honyaku.repositories.base import BaseRepository


class AnswerHistoryRepository(BaseRepository[AnswerHistory]):
    def __init__(self, db: Session):
        super().__init__(db, AnswerHistory)

    def get_incorrect_histories(self, sentence_id: int) -> List[AnswerHistory]:
        """获取句子的答错记录，最新的在前"""
        return self.db.query(AnswerHistory).filter(
            AnswerHistory.sentence_id == sentence_id,
            AnswerHistory.is_correct.is_(False)
        ).order_by(desc(AnswerHistory.created_at), desc(AnswerHistory.id)).all()

    def create_history(self, sentence_id: int, is_correct: bool, incorrect_answer: str) -> AnswerHistory:
        """新增一条答题记录"""
        return self.create(
            sentence_id=sentence_id,
            is_correct=is_correct,
            incorrect_answer=incorrect_answer
        )
