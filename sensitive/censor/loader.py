from __future__ import annotations

from pathlib import Path
from typing import IO, Iterable, List

from loguru import logger


def read_words(lines: IO[str] | Iterable[str]) -> List[str]:
    """
    读取词库：每行一个词条，去掉首尾空白，跳过空行。
    """
    words: List[str] = []
    for line in lines:
        word = line.strip()
        if word:
            words.append(word)
    return words


def read_word_dict(path: str | Path) -> List[str]:
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        words = read_words(f)
    logger.info(f"从 {path} 读取 {len(words)} 个词条")
    return words
