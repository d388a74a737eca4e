from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from honyaku.utils.database import get_db, check_db_connection

router = APIRouter()

@router.get("/liveness", response_class=PlainTextResponse)
async def liveness():
    """存活检查"""
    return "OK\n"

@router.get("/readiness", response_class=PlainTextResponse)
def readiness(db: Session = Depends(get_db)):
    """就绪检查，数据库不可用时返回503"""
    if not check_db_connection(db):
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="数据库未就绪"
        )
    return "OK\n"
