import logging
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from honyaku.utils.database import get_db
from honyaku.services.sentence_service import SentenceService
from honyaku.api.schemas.sentence_schemas import SentenceResponse, ReportSentenceRequest

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("/random", response_model=SentenceResponse)
def get_random_sentence(db: Session = Depends(get_db)):
    """
    随机获取一个可出题的句子
    """
    try:
        sentence_service = SentenceService(db)
        sentence = sentence_service.get_random_sentence()
        if not sentence:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="没有可出题的句子"
            )
        return sentence
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"随机获取句子失败: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="内部服务器错误"
        )

@router.post("/report", status_code=status.HTTP_204_NO_CONTENT)
def report_sentence(request: ReportSentenceRequest, db: Session = Depends(get_db)):
    """
    举报句子，句子不存在时同样返回204
    """
    try:
        sentence_service = SentenceService(db)
        sentence_service.report_sentence(request.sentence_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except Exception as e:
        logger.error(f"举报句子失败: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="内部服务器错误"
        )
