from pydantic import BaseModel

from honyaku.api.schemas.common import SentenceId, UtcDateTime

class SentenceResponse(BaseModel):
    id: int
    japanese: str
    english: str
    page: str
    correct_count: int
    incorrect_count: int
    created_at: UtcDateTime
    updated_at: UtcDateTime

class ReportSentenceRequest(BaseModel):
    # 必填；缺少 sentence_id 按无效请求体返回400，而不是当作ID 0处理
    sentence_id: SentenceId
