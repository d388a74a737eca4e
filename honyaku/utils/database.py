from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker, Session
import logging

from honyaku.config.settings import settings

logger = logging.getLogger(__name__)

# 创建数据库引擎（进程内唯一，自带连接池）
engine = create_engine(
    settings.get_database_url(),
    echo=settings.DEBUG,  # 在DEBUG模式下输出SQL语句
    pool_pre_ping=True,
    pool_recycle=3600,
)

# 创建SessionLocal类
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db():
    """获取数据库会话，每个请求一个"""
    db = SessionLocal()
    try:
        yield db
    except Exception as e:
        logger.error(f"数据库会话错误: {e}")
        db.rollback()
        raise
    finally:
        db.close()


def get_db_session() -> Session:
    """
    直接获取数据库会话
    在启动初始化等非请求场景中使用
    """
    return SessionLocal()


def check_db_connection(db: Session) -> bool:
    """检查数据库连接是否正常"""
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"数据库连接检查失败: {e}")
        return False

def init_db():
    """初始化数据库表"""
    try:
        from honyaku.models.base import Base
        from honyaku.models.sentence import Sentence
        from honyaku.models.answer_history import AnswerHistory

        # 创建所有表
        Base.metadata.create_all(bind=engine)
        logger.info("数据库表初始化完成")

        if settings.SEED_SAMPLE_DATA:
            db = SessionLocal()
            try:
                init_sentences(db)
            finally:
                db.close()

    except Exception as e:
        logger.error(f"数据库初始化失败: {e}")
        raise


# 示例句子，仅在句子表为空时写入
SAMPLE_SENTENCES = [
    {"japanese": "時間がありません。", "english": "I don't have time.", "page": "12"},
    {"japanese": "今日は暑いです。", "english": "It's hot today.", "page": "15"},
    {"japanese": "明日は雨が降るでしょう。", "english": "It will rain tomorrow.", "page": "23"},
]


def init_sentences(db: Session) -> int:
    """
    初始化句子表数据

    Args:
        db: 数据库会话

    Returns:
        int: 新增的句子数量
    """
    from honyaku.repositories.sentence_repository import SentenceRepository

    sentence_repo = SentenceRepository(db)
    if sentence_repo.count() > 0:
        logger.debug("句子表已有数据，跳过初始化")
        return 0

    try:
        sentences = sentence_repo.batch_create_sentences(SAMPLE_SENTENCES)
    except Exception as e:
        db.rollback()
        logger.error(f"初始化句子表数据失败: {e}")
        raise

    logger.info(f"句子表数据初始化完成，新增{len(sentences)}个句子")
    return len(sentences)
