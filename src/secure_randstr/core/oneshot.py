"""一次性生成：构造生成器、调用一次、丢弃。"""

from collections.abc import Iterable
from typing import Optional

from .alphabet import DEFAULT_ALPHABET, Alphabet
from .entropy import EntropySource, SystemEntropySource
from .errors import InvalidLength
from .generator import DEFAULT_LENGTH, StringGenerator


def _build(
    length: int,
    entropy_source: Optional[EntropySource],
    alphabet: "str | Iterable[str] | Alphabet",
    allow_empty: bool,
) -> StringGenerator:
    if entropy_source is None:
        entropy_source = SystemEntropySource()
    return StringGenerator(length, entropy_source, alphabet, allow_empty=allow_empty)


def generate(
    length: int = DEFAULT_LENGTH,
    entropy_source: Optional[EntropySource] = None,
    alphabet: "str | Iterable[str] | Alphabet" = DEFAULT_ALPHABET,
    *,
    allow_empty: bool = False,
) -> str:
    """生成单个随机字符串。entropy_source 为 None 时使用新的安全熵源。"""
    return _build(length, entropy_source, alphabet, allow_empty).next()


def generate_many(
    count: int,
    length: int = DEFAULT_LENGTH,
    entropy_source: Optional[EntropySource] = None,
    alphabet: "str | Iterable[str] | Alphabet" = DEFAULT_ALPHABET,
    *,
    allow_empty: bool = False,
) -> list[str]:
    """用同一个生成器生成 count 个随机字符串。"""
    if isinstance(count, bool) or not isinstance(count, int) or count < 0:
        raise InvalidLength(f"数量必须是非负整数: {count!r}")
    generator = _build(length, entropy_source, alphabet, allow_empty)
    return [generator.next() for _ in range(count)]
