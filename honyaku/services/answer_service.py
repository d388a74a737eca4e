import logging
from typing import Optional, Dict, Any
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from honyaku.repositories.sentence_repository import SentenceRepository
from honyaku.repositories.answer_history_repository import AnswerHistoryRepository

logger = logging.getLogger(__name__)


def normalize_answer(text: str) -> str:
    """去掉首尾空白并转为小写"""
    return text.strip().lower()


class AnswerService:
    """答案判定服务"""

    def __init__(self, db: Session):
        self.db = db
        self.sentence_repo = SentenceRepository(db)
        self.history_repo = AnswerHistoryRepository(db)

    def check_answer(self, sentence_id: int, user_answer: str) -> Optional[Dict[str, Any]]:
        """
        判定用户译文并记录答题结果

        返回的答错记录只包含本次提交之前的记录。
        写入答题记录失败只记日志，不影响判定结果的返回。

        Args:
            sentence_id: 句子ID
            user_answer: 用户提交的英文译文

        Returns:
            Optional[Dict]: is_correct、correct_answer、histories；句子不存在时返回None
        """
        sentence = self.sentence_repo.get_by_id(sentence_id)
        if not sentence:
            logger.info(f"判定答案时句子 {sentence_id} 不存在")
            return None

        correct_answer = sentence.english
        # 先取历史再写入，保证本次提交不出现在返回结果中
        histories = [h.to_dict() for h in self.history_repo.get_incorrect_histories(sentence_id)]

        is_correct = normalize_answer(user_answer) == normalize_answer(correct_answer)
        incorrect_answer = "" if is_correct else user_answer

        try:
            self.history_repo.create_history(sentence_id, is_correct, incorrect_answer)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"写入答题记录失败: 句子{sentence_id}, {e}")

        logger.info(f"句子 {sentence_id} 判定结果: {'正确' if is_correct else '错误'}")
        return {
            "is_correct": is_correct,
            "correct_answer": correct_answer,
            "histories": histories
        }
