from dataclasses import dataclass, replace

from dynaconf import Dynaconf, Validator

settings = Dynaconf(
    envvar_prefix="YMLGEN",
    settings_files=["settings.yaml"],
    lowercase_read=True,
    validators=[
        Validator("encoding", default="UTF-8"),
        Validator("indent_string", default=""),
        Validator("output_file", "tmp_dir", default=None),
        Validator("strict", default=False),
    ],
)


@dataclass
class Settings:
    """Options of one `Generator`"""

    output_file: str | None = None
    encoding: str = "UTF-8"
    indent_string: str = ""
    tmp_dir: str | None = None
    strict: bool = False

    @classmethod
    def from_config(cls, config=settings) -> "Settings":
        """Builds `Settings` from a `Dynaconf` object"""
        return cls(
            output_file=config.get("output_file"),
            encoding=config.get("encoding", "UTF-8"),
            indent_string=config.get("indent_string", "") or "",
            tmp_dir=config.get("tmp_dir"),
            strict=bool(config.get("strict", False)),
        )


def load_settings(config=settings, **overrides) -> Settings:
    """
    Returns `Settings` from configuration, overridden by non-`None` values
    :param config: A `Dynaconf` object
    :param overrides: Options passed explicitly (e.g. from command line)
    """
    loaded = Settings.from_config(config)
    return replace(
        loaded, **{key: value for key, value in overrides.items() if value is not None}
    )
