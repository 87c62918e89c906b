from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Tuple

from loguru import logger
from sqlalchemy.orm import Session

from sensitive.censor.enums import WordSource
from sensitive.censor.filter import SensitiveFilter
from sensitive.censor.loader import read_word_dict
from sensitive.censor.noise import DEFAULT_NOISE_PATTERN
from sensitive.censor.repositories import WordRepository
from sensitive.censor.trie import Trie


class SensitiveService:
    """
    词库服务（进程内单例）：
    - 词库以数据库为准，首次使用时加载进前缀树
    - 增删词条同时写数据库与前缀树，立即生效
    - 匹配操作全部委托给 SensitiveFilter
    - 不加锁：并发的首次加载、reload 与增删词条之间没有同步，需要时由调用方自行加锁
    """

    def __init__(
        self,
        repo: WordRepository | None = None,
        noise_pattern: str = DEFAULT_NOISE_PATTERN,
        mask_char: str = "*",
    ) -> None:
        self._repo = repo or WordRepository()
        self._filter = SensitiveFilter(noise_pattern=noise_pattern)
        self._mask_char = mask_char
        self._loaded = False

    @property
    def filter(self) -> SensitiveFilter:
        return self._filter

    @property
    def mask_char(self) -> str:
        return self._mask_char

    def _ensure_loaded(self, db: Session) -> SensitiveFilter:
        if not self._loaded:
            self.reload(db)
        return self._filter

    def reload(self, db: Session) -> int:
        """从数据库重建前缀树，顺带丢弃软删除遗留的节点。"""
        words = [row.word for row in self._repo.list_active(db)]
        self._filter.trie = Trie(words)
        self._loaded = True
        logger.info(f"敏感词库已加载: {self._filter.trie.phrase_count} 个词条")
        return self._filter.trie.phrase_count

    def add_words(self, db: Session, words: Sequence[str], *, updated_by: str | None = None) -> int:
        sf = self._ensure_loaded(db)
        n = self._repo.upsert_many(db, words, updated_by=updated_by)
        sf.add_word(*words)
        return n

    def delete_words(self, db: Session, words: Sequence[str], *, updated_by: str | None = None) -> int:
        sf = self._ensure_loaded(db)
        n = self._repo.disable_many(db, words, updated_by=updated_by)
        sf.del_word(*words)
        return n

    def import_word_dict(self, db: Session, path: str | Path, *, updated_by: str | None = None) -> int:
        sf = self._ensure_loaded(db)
        words = read_word_dict(path)
        n = self._repo.upsert_many(db, words, source=WordSource.file, updated_by=updated_by)
        sf.add_word(*words)
        return n

    def count(self, db: Session) -> int:
        return self._ensure_loaded(db).trie.phrase_count

    def update_noise_pattern(self, pattern: str) -> None:
        self._filter.update_noise_pattern(pattern)

    def validate(self, db: Session, text: str) -> Tuple[bool, str]:
        return self._ensure_loaded(db).validate(text)

    def find_in(self, db: Session, text: str) -> Tuple[bool, str]:
        return self._ensure_loaded(db).find_in(text)

    def find_all(self, db: Session, text: str) -> List[str]:
        return self._ensure_loaded(db).find_all(text)

    def filter_text(self, db: Session, text: str) -> str:
        return self._ensure_loaded(db).filter(text)

    def replace(self, db: Session, text: str, mask_char: str | None = None) -> str:
        return self._ensure_loaded(db).replace(text, mask_char or self._mask_char)

    def validate_slice(self, db: Session, texts: Sequence[str]) -> Tuple[bool, List[str]]:
        return self._ensure_loaded(db).validate_slice(texts)

    def find_in_slice(self, db: Session, texts: Sequence[str]) -> Tuple[bool, str]:
        return self._ensure_loaded(db).find_in_slice(texts)

    def find_all_in_slice(self, db: Session, texts: Sequence[str]) -> List[str]:
        return self._ensure_loaded(db).find_all_in_slice(texts)
