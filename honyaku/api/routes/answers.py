import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from honyaku.utils.database import get_db
from honyaku.services.answer_service import AnswerService
from honyaku.api.schemas.answer_schemas import CheckAnswerRequest, CheckAnswerResponse

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/check", response_model=CheckAnswerResponse)
def check_answer(request: CheckAnswerRequest, db: Session = Depends(get_db)):
    """
    判定用户译文，返回正确答案和此前的答错记录
    """
    try:
        answer_service = AnswerService(db)
        result = answer_service.check_answer(request.sentence_id, request.user_answer)
        if result is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="句子不存在"
            )
        return result
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"判定答案失败: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="内部服务器错误"
        )
