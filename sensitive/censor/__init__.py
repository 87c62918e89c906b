"""
敏感词模块：前缀树匹配、去噪、词库加载、持久化与接口。
"""

from .filter import SensitiveFilter
from .noise import DEFAULT_NOISE_PATTERN, NoisePatternError
from .trie import Node, Trie

__all__ = ["DEFAULT_NOISE_PATTERN", "Node", "NoisePatternError", "SensitiveFilter", "Trie"]
