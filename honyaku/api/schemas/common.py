from datetime import datetime
from typing import Annotated

from pydantic import Field, PlainSerializer, StrictInt

from honyaku.utils.helpers import format_timestamp

# 只接受JSON整数，范围限定在64位有符号整数内；字符串和布尔值都视为无效请求体
SentenceId = Annotated[StrictInt, Field(ge=-2**63, le=2**63 - 1)]

UtcDateTime = Annotated[datetime, PlainSerializer(format_timestamp, return_type=str)]
