from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from sensitive.api.deps import get_db
from sensitive.core.config import settings
from sensitive.censor.schemas import (
    AffectedResponse,
    ApiResponse,
    BatchValidateResponse,
    FindAllResponse,
    FindInResponse,
    NoisePatternRequest,
    NoisePatternResponse,
    ReloadResponse,
    ReplaceRequest,
    TextRequest,
    TextResponse,
    TextsRequest,
    ValidateResponse,
    WordsRequest,
)
from sensitive.censor.services import SensitiveService

router = APIRouter()
service = SensitiveService(noise_pattern=settings.NOISE_PATTERN, mask_char=settings.MASK_CHAR)


@router.post("/words/add", response_model=ApiResponse[AffectedResponse])
def add_words(payload: WordsRequest, db: Session = Depends(get_db)) -> ApiResponse[AffectedResponse]:
    n = service.add_words(db, payload.words, updated_by=payload.updated_by)
    return ApiResponse(data=AffectedResponse(affected=n))


@router.post("/words/delete", response_model=ApiResponse[AffectedResponse])
def delete_words(payload: WordsRequest, db: Session = Depends(get_db)) -> ApiResponse[AffectedResponse]:
    n = service.delete_words(db, payload.words, updated_by=payload.updated_by)
    return ApiResponse(data=AffectedResponse(affected=n))


@router.post("/words/reload", response_model=ApiResponse[ReloadResponse])
def reload_words(db: Session = Depends(get_db)) -> ApiResponse[ReloadResponse]:
    """
    从数据库重建词库（同时回收软删除留下的节点）。
    """
    return ApiResponse(data=ReloadResponse(count=service.reload(db)))


@router.post("/validate", response_model=ApiResponse[ValidateResponse])
def validate_text(payload: TextRequest, db: Session = Depends(get_db)) -> ApiResponse[ValidateResponse]:
    valid, word = service.validate(db, payload.text)
    return ApiResponse(data=ValidateResponse(valid=valid, word=word))


@router.post("/find-in", response_model=ApiResponse[FindInResponse])
def find_in_text(payload: TextRequest, db: Session = Depends(get_db)) -> ApiResponse[FindInResponse]:
    found, word = service.find_in(db, payload.text)
    return ApiResponse(data=FindInResponse(found=found, word=word))


@router.post("/find-all", response_model=ApiResponse[FindAllResponse])
def find_all_in_text(payload: TextRequest, db: Session = Depends(get_db)) -> ApiResponse[FindAllResponse]:
    return ApiResponse(data=FindAllResponse(words=service.find_all(db, payload.text)))


@router.post("/filter", response_model=ApiResponse[TextResponse])
def filter_text(payload: TextRequest, db: Session = Depends(get_db)) -> ApiResponse[TextResponse]:
    return ApiResponse(data=TextResponse(text=service.filter_text(db, payload.text)))


@router.post("/replace", response_model=ApiResponse[TextResponse])
def replace_text(payload: ReplaceRequest, db: Session = Depends(get_db)) -> ApiResponse[TextResponse]:
    try:
        text = service.replace(db, payload.text, payload.mask_char)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return ApiResponse(data=TextResponse(text=text))


@router.post("/batch/validate", response_model=ApiResponse[BatchValidateResponse])
def validate_texts(payload: TextsRequest, db: Session = Depends(get_db)) -> ApiResponse[BatchValidateResponse]:
    valid, words = service.validate_slice(db, payload.texts)
    return ApiResponse(data=BatchValidateResponse(valid=valid, words=words))


@router.post("/batch/find-in", response_model=ApiResponse[FindInResponse])
def find_in_texts(payload: TextsRequest, db: Session = Depends(get_db)) -> ApiResponse[FindInResponse]:
    found, word = service.find_in_slice(db, payload.texts)
    return ApiResponse(data=FindInResponse(found=found, word=word))


@router.post("/batch/find-all", response_model=ApiResponse[FindAllResponse])
def find_all_in_texts(payload: TextsRequest, db: Session = Depends(get_db)) -> ApiResponse[FindAllResponse]:
    return ApiResponse(data=FindAllResponse(words=service.find_all_in_slice(db, payload.texts)))


@router.post("/noise", response_model=ApiResponse[NoisePatternResponse])
def update_noise_pattern(payload: NoisePatternRequest) -> ApiResponse[NoisePatternResponse]:
    """
    更新去噪规则：规则无效时返回 400，旧规则继续生效。
    """
    try:
        service.update_noise_pattern(payload.pattern)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return ApiResponse(data=NoisePatternResponse(pattern=service.filter.noise_pattern))
