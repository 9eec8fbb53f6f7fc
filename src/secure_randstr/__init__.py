"""secure-randstr: 基于安全随机源的固定长度随机字符串生成。"""

from .core.alphabet import (
    DEFAULT_ALPHABET,
    DIGITS,
    LOWER_CASE_LETTERS,
    PREDEFINED_ALPHABETS,
    SPECIAL_CHARACTERS,
    UPPER_CASE_LETTERS,
    Alphabet,
    resolve_alphabet,
)
from .core.entropy import EntropySource, SystemEntropySource
from .core.errors import (
    ConfigError,
    EntropySourceFailure,
    InvalidAlphabet,
    InvalidLength,
    MissingDependency,
    NullEntropySource,
    RandstrError,
)
from .core.generator import DEFAULT_LENGTH, GeneratorOptions, StringGenerator
from .core.oneshot import generate, generate_many

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_ALPHABET",
    "DEFAULT_LENGTH",
    "DIGITS",
    "LOWER_CASE_LETTERS",
    "PREDEFINED_ALPHABETS",
    "SPECIAL_CHARACTERS",
    "UPPER_CASE_LETTERS",
    "Alphabet",
    "ConfigError",
    "EntropySource",
    "EntropySourceFailure",
    "GeneratorOptions",
    "InvalidAlphabet",
    "InvalidLength",
    "MissingDependency",
    "NullEntropySource",
    "RandstrError",
    "StringGenerator",
    "SystemEntropySource",
    "generate",
    "generate_many",
    "resolve_alphabet",
]
