"""
敏感词过滤：
- 前缀树词库（增加 / 软删除）
- 四种匹配：validate / find_all / filter / replace
- 可替换的去噪规则与批量接口
"""

from sensitive.censor import NoisePatternError, SensitiveFilter, Trie

__all__ = ["NoisePatternError", "SensitiveFilter", "Trie"]
