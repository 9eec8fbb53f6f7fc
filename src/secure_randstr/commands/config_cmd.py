"""config 命令：管理默认配置 config.yaml。"""

import click

from ..core.errors import ConfigError
from ..core.settings import (
    Settings,
    config_path,
    load_settings,
    reset_settings,
    update_setting,
)
from ..utils.console import confirm, console, create_table, info, success, warning
from ..utils.errors import with_error_report


@click.group(invoke_without_command=True)
@click.pass_context
def config(ctx: click.Context) -> None:
    """查看或修改生成默认值。

    不带子命令时等同于 `config show`。
    """
    if ctx.invoked_subcommand is None:
        ctx.invoke(show)


@config.command()
@with_error_report
def show() -> None:
    """显示当前生效的配置。"""
    path = config_path()
    if not path.exists():
        info(f"配置文件不存在，使用内置默认值: {path}")
    settings = load_settings()

    table = create_table("配置项", "值")
    for key in Settings.__dataclass_fields__:
        value = getattr(settings, key)
        table.add_row(key, "-" if value is None else repr(value))
    console.print(table)


@config.command()
@click.argument("key")
@with_error_report
def get(key: str) -> None:
    """读取单个配置项。"""
    if key not in Settings.__dataclass_fields__:
        raise ConfigError(f"未知的配置项: {key}")
    value = getattr(load_settings(), key)
    click.echo("" if value is None else str(value))


@config.command(name="set")
@click.argument("key")
@click.argument("value")
@with_error_report
def set_cmd(key: str, value: str) -> None:
    """修改单个配置项，例如: randstr config set length 16"""
    settings = update_setting(key, value)
    success(f"已设置 {key} = {getattr(settings, key)!r}")


@config.command()
@click.option("-y", "--yes", is_flag=True, default=False, help="跳过确认")
@with_error_report
def reset(yes: bool) -> None:
    """恢复内置默认值。"""
    path = config_path()
    if not path.exists():
        info("当前已是默认配置。")
        return
    if not yes and not confirm("确定要清空所有自定义配置吗?"):
        warning("已取消。")
        return
    reset_settings()
    success(f"配置已重置，已删除: {path}")
