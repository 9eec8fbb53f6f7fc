"""gen 命令：生成安全随机字符串。"""

from dataclasses import replace

import click

from ..core.alphabet import resolve_alphabet
from ..core.errors import InvalidLength
from ..core.generator import StringGenerator
from ..core.settings import load_settings
from ..utils.errors import with_error_report


@click.command()
@click.option("-n", "--length", type=int, default=None, help="字符串长度")
@click.option("-c", "--count", type=int, default=1, show_default=True, help="生成数量")
@click.option("-a", "--alphabet", default=None, help="可用字符，直接给出字符串")
@click.option(
    "-s",
    "--set",
    "alphabet_set",
    default=None,
    help="预定义字母表组合，如 upper+digits",
)
@click.option(
    "--allow-empty/--no-allow-empty", default=None, help="是否允许长度为 0"
)
@with_error_report
def gen(
    length: int | None,
    count: int,
    alphabet: str | None,
    alphabet_set: str | None,
    allow_empty: bool | None,
) -> None:
    """生成随机字符串，每行一个。

    未指定的选项依次取配置文件和内置默认值。
    """
    if count < 0:
        raise InvalidLength(f"数量必须是非负整数: {count}")

    settings = load_settings()
    if alphabet_set is not None:
        # 命令行显式给出的组合优先于配置中的任何字母表
        settings = replace(
            settings, alphabet_set=None, alphabet=resolve_alphabet(alphabet_set)
        )
    elif alphabet is not None:
        settings = replace(settings, alphabet_set=None, alphabet=alphabet)
    if length is not None:
        settings = replace(settings, length=length)
    if allow_empty is not None:
        settings = replace(settings, allow_empty=allow_empty)

    generator = StringGenerator.from_options(settings.to_options())
    for _ in range(count):
        click.echo(generator.next())
