from sqlalchemy import Column, Integer, ForeignKey, Boolean, Text
from sqlalchemy.orm import relationship
from .base import BaseModel


"""
答题记录模型
每次提交答案都会新增一条：是否正确，以及答错时用户的原始输入（答对时为空字符串）。
记录只增不改、不删。
"""

class AnswerHistory(BaseModel):
    __tablename__ = "answer_histories"

    sentence_id = Column(Integer, ForeignKey("sentences.id"), nullable=False, index=True)
    is_correct = Column(Boolean, nullable=False)
    incorrect_answer = Column(Text, nullable=False, default="")

    sentence = relationship("Sentence", back_populates="answer_histories")

    def to_dict(self):
        return {
            "id": self.id,
            "incorrect_answer": self.incorrect_answer,
            "created_at": self.created_at
        }
