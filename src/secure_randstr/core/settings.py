"""用户默认配置（config.yaml）管理。"""

import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional, cast

import yaml

from .alphabet import DEFAULT_ALPHABET, resolve_alphabet
from .errors import ConfigError
from .generator import DEFAULT_LENGTH, GeneratorOptions, StringGenerator

CONFIG_DIR_ENV = "RANDSTR_CONFIG_DIR"
CONFIG_FILENAME = "config.yaml"

# 这些键按原始字符串保存，不做 YAML 类型推断
STRING_KEYS = {"alphabet", "alphabet_set"}


@dataclass
class Settings:
    length: int = DEFAULT_LENGTH
    alphabet: Optional[str] = None
    alphabet_set: Optional[str] = None
    allow_empty: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> "Settings":
        """从配置字典构建，缺失的键使用默认值。

        Raises:
            ConfigError: 出现未知键或值类型错误。
        """
        known = set(cls.__dataclass_fields__)
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"未知的配置项: {', '.join(unknown)}")

        length = data.get("length", DEFAULT_LENGTH)
        if isinstance(length, bool) or not isinstance(length, int):
            raise ConfigError(f"length 必须是整数: {length!r}")

        allow_empty = data.get("allow_empty", False)
        if not isinstance(allow_empty, bool):
            raise ConfigError(f"allow_empty 必须是布尔值: {allow_empty!r}")

        for key in STRING_KEYS:
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise ConfigError(f"{key} 必须是字符串: {value!r}")

        return cls(
            length=length,
            alphabet=cast(Optional[str], data.get("alphabet")),
            alphabet_set=cast(Optional[str], data.get("alphabet_set")),
            allow_empty=allow_empty,
        )

    def to_dict(self) -> dict[str, object]:
        return {k: v for k, v in asdict(self).items() if v is not None}

    def effective_alphabet(self) -> str:
        """alphabet_set 优先于 alphabet，两者都未设置时使用默认字母表。"""
        if self.alphabet_set is not None:
            return resolve_alphabet(self.alphabet_set)
        if self.alphabet is not None:
            return self.alphabet
        return DEFAULT_ALPHABET

    def to_options(self) -> GeneratorOptions:
        return GeneratorOptions(
            length=self.length,
            alphabet=self.effective_alphabet(),
            allow_empty=self.allow_empty,
        )


def get_config_dir() -> Path:
    """返回配置目录，可通过 RANDSTR_CONFIG_DIR 覆盖。"""
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "secure-randstr"


def config_path() -> Path:
    return get_config_dir() / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """读取原始配置字典。文件不存在时返回空字典。"""
    path = config_path()
    if not path.exists():
        return {}

    try:
        with open(path, encoding="utf-8") as f:
            data: object = cast(object, yaml.safe_load(f))
    except yaml.YAMLError as e:
        raise ConfigError(f"无法解析配置文件 {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"配置文件顶层必须是映射: {path}")
    return cast(dict[str, object], data)


def load_settings() -> Settings:
    return Settings.from_dict(load_config())


def save_settings(settings: Settings) -> Path:
    """保存配置到 config.yaml，返回写入的路径。"""
    path = config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(  # type: ignore
            settings.to_dict(),
            f,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )
    return path


def parse_value(key: str, raw: str) -> object:
    """把命令行传入的字符串解析为配置值。"""
    if key in STRING_KEYS:
        return raw
    try:
        return cast(object, yaml.safe_load(raw))
    except yaml.YAMLError as e:
        raise ConfigError(f"无法解析值 {raw!r}: {e}") from e


def update_setting(key: str, raw: str) -> Settings:
    """修改单个配置项，校验通过后保存。"""
    data = load_config()
    data[key] = parse_value(key, raw)
    settings = Settings.from_dict(data)
    # 保存前按生成器规则校验长度和字母表
    StringGenerator.from_options(settings.to_options())
    save_settings(settings)
    return settings


def reset_settings() -> bool:
    """删除 config.yaml 以恢复内置默认值。文件本不存在时返回 False。"""
    path = config_path()
    if not path.exists():
        return False
    path.unlink()
    return True
