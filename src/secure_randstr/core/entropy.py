"""熵源抽象与基于操作系统 CSPRNG 的默认实现。"""

import secrets
from typing import Protocol, runtime_checkable

from .errors import EntropySourceFailure, NullEntropySource


@runtime_checkable
class EntropySource(Protocol):
    """能给出 [0, n) 内均匀分布整数的对象。"""

    def randbelow(self, n: int) -> int: ...


class SystemEntropySource:
    """基于 secrets.SystemRandom（os.urandom）的安全熵源。

    可在多个线程、多个生成器之间共享。
    """

    def __init__(self) -> None:
        self._rng = secrets.SystemRandom()

    def randbelow(self, n: int) -> int:
        if n < 1:
            raise ValueError(f"上界必须为正整数: {n}")
        try:
            return self._rng.randrange(n)
        except (OSError, NotImplementedError) as e:
            raise EntropySourceFailure(f"系统熵源不可用: {e}") from e

    # 无内部状态可复制，共享同一个实例
    def __copy__(self) -> "SystemEntropySource":
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> "SystemEntropySource":
        return self

    def __reduce__(self) -> tuple[type["SystemEntropySource"], tuple[()]]:
        return (SystemEntropySource, ())

    def __repr__(self) -> str:
        return "SystemEntropySource()"


def require_entropy_source(source: object) -> EntropySource:
    """校验熵源对象，缺失或不具备 randbelow 能力时抛出 NullEntropySource。"""
    if source is None:
        raise NullEntropySource("未提供熵源")
    if not callable(getattr(source, "randbelow", None)):
        raise NullEntropySource(
            f"熵源必须提供 randbelow(n) 方法: {type(source).__name__}"
        )
    return source  # type: ignore[return-value]
