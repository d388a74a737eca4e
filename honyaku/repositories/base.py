from typing import Optional, TypeVar, Generic
from sqlalchemy.orm import Session

T = TypeVar('T')

class BaseRepository(Generic[T]):
    """基础Repository类，提供通用的CRUD操作"""

    def __init__(self, db: Session, model_class: T):
        self.db = db
        self.model_class = model_class

    def get_by_id(self, id: int) -> Optional[T]:
        """根据ID获取记录"""
        return self.db.query(self.model_class).filter(self.model_class.id == id).first()

    def count(self) -> int:
        """记录总数"""
        return self.db.query(self.model_class).count()

    def create(self, **kwargs) -> T:
        """创建新记录"""
        instance = self.model_class(**kwargs)
        self.db.add(instance)
        self.db.commit()
        self.db.refresh(instance)
        return instance

