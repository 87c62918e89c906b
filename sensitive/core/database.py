# 数据库连接池生成器
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from sensitive.core.config import settings

SQLALCHEMY_DATABASE_URL = settings.DATABASE_URL

# SQLite 连接默认只允许创建它的线程使用，FastAPI 的线程池需要关掉这个检查
connect_args = {"check_same_thread": False} if SQLALCHEMY_DATABASE_URL.startswith("sqlite") else {}

# pool_pre_ping=True: 每次从池子里拿连接前先 ping 一下，确保连接是活的
engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args=connect_args,
    pool_pre_ping=True,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# 所有的 Model 都继承这个类
Base = declarative_base()
