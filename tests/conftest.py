import os

# 测试环境使用内存SQLite，需在导入应用之前设置
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SEED_SAMPLE_DATA", "false")

import random
from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from honyaku.main import app
from honyaku.models.base import Base
from honyaku.models.sentence import Sentence
from honyaku.models.answer_history import AnswerHistory
from honyaku.utils.database import get_db

# 测试数据库
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

@pytest.fixture(scope="function")
def db_session():
    """创建测试数据库会话"""
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
    Base.metadata.drop_all(bind=engine)

@pytest.fixture(scope="function")
def client(db_session):
    """创建测试客户端"""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()

@pytest.fixture
def rng():
    return random.Random(1234)

@pytest.fixture
def make_sentence(db_session):
    """创建句子"""
    def _make(japanese="時間がありません。", english="I don't have time.", page="12",
              is_reported=False):
        sentence = Sentence(japanese=japanese, english=english, page=page, is_reported=is_reported)
        db_session.add(sentence)
        db_session.commit()
        db_session.refresh(sentence)
        return sentence
    return _make

@pytest.fixture
def add_answers(db_session):
    """
    为句子批量写入答题记录

    created_at 依次递增一分钟，方便验证排序
    """
    def _add(sentence, correct=0, incorrect=None, start=None):
        start = start or datetime(2024, 6, 28, 10, 0, 0)
        rows = []
        for i in range(correct):
            rows.append(AnswerHistory(sentence_id=sentence.id, is_correct=True, incorrect_answer=""))
        for answer in incorrect or []:
            rows.append(AnswerHistory(sentence_id=sentence.id, is_correct=False, incorrect_answer=answer))
        for i, row in enumerate(rows):
            row.created_at = start + timedelta(minutes=i)
            row.updated_at = row.created_at
        db_session.add_all(rows)
        db_session.commit()
        return rows
    return _add
