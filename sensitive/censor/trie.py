from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Tuple

from loguru import logger

# 匹配算法（前缀树 + 回退重扫）


class Node:
    """Trie 上的一个节点，children 以单个字符（code point）为键。"""

    __slots__ = ("is_root", "is_phrase_end", "value", "children")

    def __init__(self, value: str = "", is_root: bool = False) -> None:
        self.is_root = is_root
        self.is_phrase_end = False
        self.value = value
        self.children: Dict[str, Node] = {}

    def is_leaf(self) -> bool:
        return not self.children

    def soft_delete(self) -> None:
        self.is_phrase_end = False


class Trie:
    """
    敏感词前缀树。

    - 删除只是软删除（清除结束标记），节点永不回收；需要回收时用 compact() 重建
    - 四种匹配：validate / find_all / filter / replace，共享同一套扫描与回退规则
    - 不做任何归一化，按原始字符匹配
    """

    def __init__(self, phrases: Iterable[str] = ()) -> None:
        self.root = Node(is_root=True)
        self._phrase_count = 0
        self.insert(*phrases)

    @property
    def phrase_count(self) -> int:
        return self._phrase_count

    def __len__(self) -> int:
        return self._phrase_count

    def __contains__(self, phrase: object) -> bool:
        if not isinstance(phrase, str) or not phrase:
            return False
        node = self._walk(phrase)
        return node is not None and node.is_phrase_end

    def insert(self, *phrases: str) -> None:
        for phrase in phrases:
            if not isinstance(phrase, str) or not phrase:
                logger.debug(f"跳过无效词条: {phrase!r}")
                continue
            node = self.root
            for ch in phrase:
                nxt = node.children.get(ch)
                if nxt is None:
                    nxt = Node(ch)
                    node.children[ch] = nxt
                node = nxt
            if not node.is_phrase_end:
                node.is_phrase_end = True
                self._phrase_count += 1

    def delete(self, *phrases: str) -> None:
        for phrase in phrases:
            if not isinstance(phrase, str) or not phrase:
                continue
            node = self._walk(phrase)
            if node is None or not node.is_phrase_end:
                continue
            node.soft_delete()
            self._phrase_count -= 1

    def _walk(self, phrase: str) -> Node | None:
        node = self.root
        for ch in phrase:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def phrases(self) -> Iterator[str]:
        """按子节点插入顺序遍历所有未删除的词条（迭代 DFS）。"""
        stack: List[Tuple[Node, str]] = [(self.root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.is_phrase_end:
                yield prefix
            for ch in reversed(list(node.children)):
                stack.append((node.children[ch], prefix + ch))

    def compact(self) -> "Trie":
        """用当前有效词条重建一棵新树，丢弃软删除遗留的节点。"""
        return Trie(self.phrases())

    def validate(self, text: str) -> Tuple[bool, str]:
        """
        验证文本是否合法。

        不合法时返回 (False, 第一个命中的词)；命中即返回，不会继续延伸去找更长的词。
        """
        root = self.root
        parent = root
        length = len(text)
        left = 0
        position = 0

        while position < length:
            current = parent.children.get(text[position])

            if current is None or (not current.is_phrase_end and position == length - 1):
                parent = root
                left += 1
                position = left
                continue

            if current.is_phrase_end:
                return False, text[left : position + 1]

            parent = current
            position += 1

        return True, ""

    def find_in(self, text: str) -> Tuple[bool, str]:
        valid, first = self.validate(text)
        return not valid, first

    def find_all(self, text: str) -> List[str]:
        """
        找出文本中所有命中的词（去重，保持首次出现顺序）。

        命中后不会回到根节点，而是沿着当前节点继续延伸，
        因此 "bad" 与 "badword" 可以在同一起点都被命中。
        """
        root = self.root
        parent = root
        length = len(text)
        left = 0
        position = 0
        matches: List[str] = []

        while position < length:
            current = parent.children.get(text[position])

            if current is None:
                parent = root
                left += 1
                position = left
                continue

            if current.is_phrase_end:
                matches.append(text[left : position + 1])

            if position == length - 1:
                parent = root
                left += 1
                position = left
                continue

            parent = current
            position += 1

        return list(dict.fromkeys(matches))

    def filter(self, text: str) -> str:
        """直接删除文本中的敏感词，其余字符原样保留。"""
        root = self.root
        parent = root
        length = len(text)
        left = 0
        position = 0
        kept: List[str] = []

        while position < length:
            current = parent.children.get(text[position])

            if current is None or (not current.is_phrase_end and position == length - 1):
                kept.append(text[left])
                parent = root
                left += 1
                position = left
                continue

            if current.is_phrase_end:
                left = position + 1
                parent = root
            else:
                parent = current
            position += 1

        kept.append(text[left:])
        return "".join(kept)

    def replace(self, text: str, mask_char: str) -> str:
        """把命中的敏感词逐字替换为 mask_char，输出长度与输入一致。"""
        if not isinstance(mask_char, str) or len(mask_char) != 1:
            raise ValueError(f"mask_char 必须是单个字符: {mask_char!r}")
        root = self.root
        parent = root
        chars = list(text)
        length = len(chars)
        left = 0
        position = 0

        while position < length:
            current = parent.children.get(chars[position])

            if current is None or (not current.is_phrase_end and position == length - 1):
                parent = root
                left += 1
                position = left
                continue

            if current.is_phrase_end:
                for i in range(left, position + 1):
                    chars[i] = mask_char
                left = position + 1
                parent = root
            else:
                parent = current
            position += 1

        return "".join(chars)
