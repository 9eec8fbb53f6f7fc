"""secure-randstr CLI 入口。"""

import click

from . import __version__
from .commands.alphabets import alphabets
from .commands.config_cmd import config
from .commands.gen import gen


@click.group()
@click.version_option(version=__version__, prog_name="randstr")
def main() -> None:
    """randstr: 基于安全随机源的随机字符串生成工具

    支持自定义长度、字母表和默认配置。
    """
    pass


main.add_command(gen)
main.add_command(alphabets)
main.add_command(config)


if __name__ == "__main__":
    main()
