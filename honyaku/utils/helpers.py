from datetime import datetime

import pytz

def format_timestamp(dt: datetime) -> str:
    """格式化为UTC的ISO8601时间戳，无时区信息的时间按UTC处理"""
    if dt.tzinfo is None:
        dt = pytz.utc.localize(dt)
    return dt.astimezone(pytz.utc).replace(tzinfo=None).isoformat() + "Z"
