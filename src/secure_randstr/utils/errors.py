from typing import Callable, ParamSpec, TypeVar

P = ParamSpec("P")
R = TypeVar("R")


def with_error_report(func: Callable[P, R]) -> Callable[P, R]:
    """把 RandstrError 转为终端错误信息并以状态码 1 退出。"""
    import functools
    import sys
    from ..core.errors import ConfigError, RandstrError
    from ..core.settings import config_path
    from .console import error, info

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except ConfigError as e:
            error(f"配置错误: {e}")
            info(f"请检查配置文件 {config_path()}，或执行 'randstr config reset'。")
            sys.exit(1)
        except RandstrError as e:
            error(str(e))
            sys.exit(1)

    return wrapper
