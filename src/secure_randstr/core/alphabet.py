"""预定义字母表与字母表对象。"""

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from .errors import InvalidAlphabet

UPPER_CASE_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWER_CASE_LETTERS = UPPER_CASE_LETTERS.lower()
DIGITS = "0123456789"
SPECIAL_CHARACTERS = "!#$%&'()*+,-./:;<=>?@[]^_`{|}~\""

DEFAULT_ALPHABET = UPPER_CASE_LETTERS + LOWER_CASE_LETTERS + DIGITS

PREDEFINED_ALPHABETS = MappingProxyType(
    {
        "upper": UPPER_CASE_LETTERS,
        "lower": LOWER_CASE_LETTERS,
        "digits": DIGITS,
        "special": SPECIAL_CHARACTERS,
        "default": DEFAULT_ALPHABET,
    }
)


def resolve_alphabet(names: str) -> str:
    """把 "upper+digits" 这样的名称组合展开为字符串。

    Raises:
        InvalidAlphabet: 出现未知名称或组合为空。
    """
    parts = [p.strip().lower() for p in names.split("+") if p.strip()]
    if not parts:
        raise InvalidAlphabet("字母表名称不能为空")
    unknown = [p for p in parts if p not in PREDEFINED_ALPHABETS]
    if unknown:
        known = ", ".join(PREDEFINED_ALPHABETS)
        raise InvalidAlphabet(f"未知的字母表: {', '.join(unknown)} (可选: {known})")
    return "".join(PREDEFINED_ALPHABETS[p] for p in parts)


class Alphabet:
    """不可变的有序符号序列，长度至少为 1。

    允许重复符号，重复只影响出现频率。
    """

    __slots__ = ("_symbols",)

    def __init__(self, symbols: "str | Iterable[str] | Alphabet") -> None:
        if isinstance(symbols, Alphabet):
            materialized = symbols.symbols
        elif isinstance(symbols, str):
            materialized = tuple(symbols)
        else:
            try:
                materialized = tuple(symbols)
            except TypeError as e:
                raise InvalidAlphabet(f"字母表必须是字符串或字符序列: {e}") from e
            for sym in materialized:
                if not isinstance(sym, str) or len(sym) != 1:
                    raise InvalidAlphabet(f"字母表元素必须是单个字符: {sym!r}")
        if not materialized:
            raise InvalidAlphabet("字母表不能为空")
        object.__setattr__(self, "_symbols", materialized)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Alphabet 是不可变对象")

    @property
    def symbols(self) -> tuple[str, ...]:
        return self._symbols

    def __getitem__(self, index: int) -> str:
        return self._symbols[index]

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._symbols

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Alphabet):
            return self._symbols == other._symbols
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._symbols)

    # 不可变对象，复制时直接共享
    def __copy__(self) -> "Alphabet":
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> "Alphabet":
        return self

    def __reduce__(self) -> tuple[type["Alphabet"], tuple[tuple[str, ...]]]:
        return (Alphabet, (self._symbols,))

    def __str__(self) -> str:
        return "".join(self._symbols)

    def __repr__(self) -> str:
        text = str(self)
        return f"Alphabet({text[:10]!r}{'...' if len(text) > 10 else ''}, size={len(self)})"
