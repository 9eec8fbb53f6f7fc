"""安全随机字符串生成器。"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional

from .alphabet import DEFAULT_ALPHABET, Alphabet
from .entropy import EntropySource, SystemEntropySource, require_entropy_source
from .errors import EntropySourceFailure, InvalidLength, RandstrError

DEFAULT_LENGTH = 8


class _DefaultSource:
    """构造参数占位：表示使用新的 SystemEntropySource。"""

    def __repr__(self) -> str:
        return "<default entropy source>"


_DEFAULT_SOURCE = _DefaultSource()


@dataclass
class GeneratorOptions:
    """生成器配置。每个字段均可独立使用默认值。"""

    length: int = DEFAULT_LENGTH
    entropy_source: Optional[EntropySource] = field(default_factory=SystemEntropySource)
    alphabet: "str | Iterable[str] | Alphabet" = DEFAULT_ALPHABET
    allow_empty: bool = False


def _check_length(length: object, allow_empty: bool) -> int:
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidLength(f"长度必须是整数: {length!r}")
    minimum = 0 if allow_empty else 1
    if length < minimum:
        raise InvalidLength(f"长度不能小于 {minimum}: {length}")
    return length


class StringGenerator:
    """按给定字母表生成固定长度的安全随机字符串。

    内部缓冲区在每次 next() 调用时原地覆写，不随调用次数增长。
    实例不是线程安全的：并发使用时每个线程持有独立实例，
    或在调用方对 next() 加锁。

    Args:
        length: 生成字符串的长度，默认 8。
        entropy_source: 提供 randbelow(n) 的熵源，省略时新建 SystemEntropySource。
        alphabet: 可出现的字符，默认为大小写字母加数字。
        allow_empty: 为 True 时允许 length 为 0（生成空字符串）。

    Raises:
        InvalidLength: 长度非整数、为负，或在 allow_empty=False 时为 0。
        InvalidAlphabet: 字母表为空。
        NullEntropySource: 熵源为 None 或缺少 randbelow。
    """

    def __init__(
        self,
        length: int = DEFAULT_LENGTH,
        entropy_source: "EntropySource | _DefaultSource | None" = _DEFAULT_SOURCE,
        alphabet: "str | Iterable[str] | Alphabet" = DEFAULT_ALPHABET,
        *,
        allow_empty: bool = False,
    ) -> None:
        self._length = _check_length(length, allow_empty)
        self._alphabet = Alphabet(alphabet)
        if isinstance(entropy_source, _DefaultSource):
            entropy_source = SystemEntropySource()
        self._source = require_entropy_source(entropy_source)
        self._allow_empty = allow_empty
        self._symbols = self._alphabet.symbols
        self._buffer: list[str] = [""] * self._length

    @classmethod
    def from_options(cls, options: GeneratorOptions) -> "StringGenerator":
        return cls(
            options.length,
            options.entropy_source,
            options.alphabet,
            allow_empty=options.allow_empty,
        )

    @property
    def length(self) -> int:
        return self._length

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def entropy_source(self) -> EntropySource:
        return self._source

    @property
    def allow_empty(self) -> bool:
        return self._allow_empty

    def next(self) -> str:
        """生成一个新的随机字符串。

        Raises:
            EntropySourceFailure: 熵源抛出异常或返回越界的下标。
        """
        symbols = self._symbols
        size = len(symbols)
        buffer = self._buffer
        for i in range(self._length):
            try:
                idx = self._source.randbelow(size)
            except RandstrError:
                raise
            except Exception as e:
                raise EntropySourceFailure(f"熵源调用失败: {e}") from e
            if isinstance(idx, bool) or not isinstance(idx, int) or not 0 <= idx < size:
                raise EntropySourceFailure(f"熵源返回了越界的下标: {idx!r} (上界 {size})")
            buffer[i] = symbols[idx]
        return "".join(buffer)

    def __iter__(self) -> "StringGenerator":
        return self

    def __next__(self) -> str:
        return self.next()

    def __repr__(self) -> str:
        return (
            f"StringGenerator(length={self._length}, alphabet={self._alphabet!r}, "
            f"entropy_source={self._source!r})"
        )
