from sqlalchemy import Column, String, Boolean, Text, false
from sqlalchemy.orm import relationship
from .base import BaseModel

"""
句子模型
日语原句、标准英文译文、教材页码，以及是否被举报。
被举报的句子不再参与随机抽题。
"""
class Sentence(BaseModel):
    __tablename__ = "sentences"

    japanese = Column(Text, nullable=False)
    english = Column(Text, nullable=False)
    page = Column(String(50), nullable=False)
    is_reported = Column(Boolean, nullable=False, default=False, server_default=false())

    answer_histories = relationship("AnswerHistory", back_populates="sentence")

    def to_dict(self):
        return {
            "id": self.id,
            "japanese": self.japanese,
            "english": self.english,
            "page": self.page,
            "created_at": self.created_at,
            "updated_at": self.updated_at
        }
