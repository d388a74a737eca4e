import logging
import random
from typing import Optional, Dict, Any
from sqlalchemy.orm import Session

from honyaku.repositories.sentence_repository import SentenceRepository
from honyaku.config.settings import settings

logger = logging.getLogger(__name__)

# 进程内共用的随机源，不在每次抽题时重新播种
_random_source = random.Random()


class SentenceService:
    """句子服务，负责随机抽题和举报"""

    def __init__(self, db: Session, rng: Optional[random.Random] = None,
                 mastery_threshold: Optional[int] = None):
        self.db = db
        self.sentence_repo = SentenceRepository(db)
        self.rng = rng or _random_source
        if mastery_threshold is None:
            mastery_threshold = settings.MASTERY_THRESHOLD
        self.mastery_threshold = mastery_threshold

    def get_random_sentence(self) -> Optional[Dict[str, Any]]:
        """
        从可出题的句子中等概率随机抽取一个

        Returns:
            Optional[Dict]: 句子及其答对/答错次数，没有可出题的句子时返回None
        """
        candidates = self.sentence_repo.get_eligible_sentences(self.mastery_threshold)
        if not candidates:
            logger.info("没有可出题的句子")
            return None

        sentence = self.rng.choice(candidates)
        logger.debug(f"抽取句子 {sentence['id']}，候选数 {len(candidates)}")
        return sentence

    def report_sentence(self, sentence_id: int) -> int:
        """
        举报句子，之后不再参与抽题

        句子不存在或已被举报都不算错误。

        Args:
            sentence_id: 句子ID

        Returns:
            int: 受影响的句子数量
        """
        matched = self.sentence_repo.mark_reported(sentence_id)
        if matched:
            logger.info(f"句子 {sentence_id} 已被举报")
        else:
            logger.info(f"举报的句子 {sentence_id} 不存在，忽略")
        return matched
