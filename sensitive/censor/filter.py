from __future__ import annotations

from pathlib import Path
from typing import IO, Iterable, List, Sequence, Tuple

from loguru import logger

from sensitive.censor.loader import read_word_dict, read_words
from sensitive.censor.noise import DEFAULT_NOISE_PATTERN, NoiseRemover
from sensitive.censor.trie import Trie


class SensitiveFilter:
    """
    敏感词过滤器：前缀树 + 可替换的去噪规则。

    注意两类操作对噪音的处理不同：
    - find_in / validate 及所有 *_slice 批量接口：先去噪再匹配，能识别 "b|a d" 这类拆分写法
    - filter / replace / find_all：直接在原文上匹配，保留原文格式
    """

    def __init__(self, trie: Trie | None = None, noise_pattern: str = DEFAULT_NOISE_PATTERN) -> None:
        self.trie = trie if trie is not None else Trie()
        self._noise = NoiseRemover(noise_pattern)

    @property
    def noise_pattern(self) -> str:
        return self._noise.pattern

    def update_noise_pattern(self, pattern: str) -> None:
        self._noise.update(pattern)
        logger.debug(f"去噪规则已更新: {pattern!r}")

    def remove_noise(self, text: str) -> str:
        return self._noise.remove(text)

    def add_word(self, *words: str) -> None:
        self.trie.insert(*words)

    def del_word(self, *words: str) -> None:
        self.trie.delete(*words)

    def load(self, lines: IO[str] | Iterable[str]) -> int:
        words = read_words(lines)
        self.trie.insert(*words)
        return len(words)

    def load_word_dict(self, path: str | Path) -> int:
        words = read_word_dict(path)
        self.trie.insert(*words)
        return len(words)

    def filter(self, text: str) -> str:
        return self.trie.filter(text)

    def replace(self, text: str, mask_char: str = "*") -> str:
        return self.trie.replace(text, mask_char)

    def find_in(self, text: str) -> Tuple[bool, str]:
        return self.trie.find_in(self.remove_noise(text))

    def find_all(self, text: str) -> List[str]:
        return self.trie.find_all(text)

    def validate(self, text: str) -> Tuple[bool, str]:
        return self.trie.validate(self.remove_noise(text))

    def find_in_slice(self, texts: Sequence[str]) -> Tuple[bool, str]:
        for text in texts:
            found, word = self.trie.find_in(self.remove_noise(text))
            if found:
                return True, word
        return False, ""

    def find_all_in_slice(self, texts: Sequence[str]) -> List[str]:
        """各条文本分别去重，合并结果时不再跨文本去重。"""
        matches: List[str] = []
        for text in texts:
            matches.extend(self.trie.find_all(self.remove_noise(text)))
        return matches

    def validate_slice(self, texts: Sequence[str]) -> Tuple[bool, List[str]]:
        for text in texts:
            valid, word = self.trie.validate(self.remove_noise(text))
            if not valid:
                return False, [word]
        return True, []
