"""统一终端输出工具，基于 Rich。"""

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm
from rich.table import Table
from rich.theme import Theme

_theme = Theme(
    {
        "info": "cyan",
        "success": "bold green",
        "warning": "bold yellow",
        "error": "bold red",
    }
)

console = Console(theme=_theme)
# 状态信息走 stderr，保证 stdout 只有生成结果
err_console = Console(theme=_theme, stderr=True)


def info(msg: str) -> None:
    err_console.print(f"[info]ℹ[/info] {escape(msg)}")


def success(msg: str) -> None:
    err_console.print(f"[success]✔[/success] {escape(msg)}")


def warning(msg: str) -> None:
    err_console.print(f"[warning]⚠[/warning] {escape(msg)}")


def error(msg: str) -> None:
    err_console.print(f"[error]✖[/error] {escape(msg)}")


def confirm(msg: str, default: bool = False) -> bool:
    return Confirm.ask(msg, default=default, console=err_console)


def create_table(*columns: str) -> Table:
    table = Table(show_header=True, header_style="bold magenta")
    for col in columns:
        table.add_column(col)
    return table
