"""alphabets 命令：列出预定义字母表。"""

import click
from rich.markup import escape

from ..core.alphabet import PREDEFINED_ALPHABETS
from ..utils.console import console, create_table


@click.command()
def alphabets() -> None:
    """列出可用于 --set 的预定义字母表。"""
    table = create_table("名称", "字符数", "内容")
    for name, symbols in PREDEFINED_ALPHABETS.items():
        table.add_row(name, str(len(symbols)), escape(symbols))
    console.print(table)
    console.print("\n[dim]组合多个字母表: randstr gen --set upper+digits[/dim]")
