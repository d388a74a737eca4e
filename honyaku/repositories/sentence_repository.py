from typing import List, Dict, Any
from sqlalchemy.orm import Session
from sqlalchemy import case, func

from honyaku.models.sentence import Sentence
from honyaku.models.answer_history import AnswerHistory
from honyaku.repositories.base import BaseRepository


class SentenceRepository(BaseRepository[Sentence]):
    """
    句子Repository类，管理句子数据的访问操作
    """

    def __init__(self, db: Session):
        """
        初始化SentenceRepository

        Args:
            db: SQLAlchemy会话对象
        """
        super().__init__(db, Sentence)

    def get_eligible_sentences(self, mastery_threshold: int) -> List[Dict[str, Any]]:
        """
        获取可出题的句子及其答对/答错次数

        未被举报，且 答对次数 - 答错次数 < mastery_threshold。
        没有答题记录的句子两项计数都为0。

        Args:
            mastery_threshold: 掌握阈值

        Returns:
            List[Dict]: 句子字段加 correct_count、incorrect_count
        """
        correct_count = func.coalesce(
            func.sum(case((AnswerHistory.is_correct.is_(True), 1), else_=0)), 0
        )
        incorrect_count = func.coalesce(
            func.sum(case((AnswerHistory.is_correct.is_(False), 1), else_=0)), 0
        )

        rows = (
            self.db.query(
                Sentence,
                correct_count.label("correct_count"),
                incorrect_count.label("incorrect_count"),
            )
            .outerjoin(AnswerHistory, AnswerHistory.sentence_id == Sentence.id)
            .filter(Sentence.is_reported.is_(False))
            .group_by(Sentence.id)
            .having(correct_count - incorrect_count < mastery_threshold)
            .order_by(Sentence.id)
            .all()
        )

        results = []
        for sentence, correct, incorrect in rows:
            data = sentence.to_dict()
            data["correct_count"] = int(correct)
            data["incorrect_count"] = int(incorrect)
            results.append(data)
        return results

    def mark_reported(self, sentence_id: int) -> int:
        """
        将句子标记为已举报

        Args:
            sentence_id: 句子ID

        Returns:
            int: 匹配到的行数，ID不存在时为0
        """
        matched = (
            self.db.query(Sentence)
            .filter(Sentence.id == sentence_id)
            .update({Sentence.is_reported: True}, synchronize_session=False)
        )
        self.db.commit()
        return matched

    def batch_create_sentences(self, sentences_data: List[dict]) -> List[Sentence]:
        """
        批量创建句子

        Args:
            sentences_data: 句子数据列表，每个元素包含japanese, english, page

        Returns:
            List[Sentence]: 创建的句子对象列表
        """
        sentences = [
            Sentence(
                japanese=data["japanese"],
                english=data["english"],
                page=data["page"],
                is_reported=data.get("is_reported", False)
            )
            for data in sentences_data
        ]
        self.db.add_all(sentences)
        self.db.commit()
        return sentences
