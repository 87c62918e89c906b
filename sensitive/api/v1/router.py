# 路由汇总
from fastapi import APIRouter

from sensitive.censor.routers import censor

api_router = APIRouter()

# 挂载敏感词模块 (访问地址: /api/v1/censor/...)
api_router.include_router(censor.router, prefix="/censor", tags=["敏感词模块"])
