"""随机字符串生成相关异常。"""


class RandstrError(Exception):
    """所有 secure-randstr 异常的基类。"""


class InvalidLength(RandstrError, ValueError):
    """输出长度不合法。"""


class InvalidAlphabet(RandstrError, ValueError):
    """字母表为空或格式错误。"""


class NullEntropySource(RandstrError, TypeError):
    """未提供可用的熵源。"""


MissingDependency = NullEntropySource


class EntropySourceFailure(RandstrError, RuntimeError):
    """熵源无法产生随机数。"""


class ConfigError(RandstrError):
    """配置文件内容不合法。"""
