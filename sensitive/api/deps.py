# 依赖注入（获取 DB 会话）
from sensitive.core.database import SessionLocal


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
