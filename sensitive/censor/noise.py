from __future__ import annotations

import re

# 默认去噪规则：竖线、& % $ @ * 以及所有空白
DEFAULT_NOISE_PATTERN = r"[|\s&%$@*]+"


class NoisePatternError(ValueError):
    """去噪规则无法编译。"""


def compile_noise_pattern(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except (re.error, TypeError) as exc:
        raise NoisePatternError(f"去噪规则无效: {pattern!r} ({exc})") from exc


class NoiseRemover:
    """
    基于正则的去噪器：删除所有匹配 pattern 的片段。

    update() 先编译再替换，编译失败时抛出 NoisePatternError，旧规则保持不变。
    """

    def __init__(self, pattern: str = DEFAULT_NOISE_PATTERN) -> None:
        self._regex = compile_noise_pattern(pattern)

    @property
    def pattern(self) -> str:
        return self._regex.pattern

    def update(self, pattern: str) -> None:
        self._regex = compile_noise_pattern(pattern)

    def remove(self, text: str) -> str:
        return self._regex.sub("", text)
