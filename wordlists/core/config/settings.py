from __future__ import annotations

import logging
import os
import tomllib
from pydantic import BaseModel
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource


def _load_toml_settings() -> dict[str, object]:
    # Load from a TOML config if available.
    # Search: APP_CONFIG_FILE env, then ./config/wordlists.toml
    candidates: list[str] = []
    env_path = os.getenv("APP_CONFIG_FILE")
    if env_path:
        candidates.append(env_path)
    candidates.append(os.path.join(os.getcwd(), "config", "wordlists.toml"))
    for p in candidates:
        try:
            if os.path.exists(p):
                with open(p, "rb") as f:
                    raw = tomllib.load(f)
                if isinstance(raw, dict):
                    out: dict[str, object] = {}
                    for k, v in raw.items():
                        out[k] = v
                    return out
        except OSError:
            logging.getLogger(__name__).warning("Failed to read config file %s", p)
            return {}
    return {}


class LoggingConfig(BaseModel):
    level: str = "WARNING"

    model_config = {"extra": "forbid", "validate_assignment": True}


class SamplingConfig(BaseModel):
    # None draws the seed from system entropy
    seed: int | None = None

    model_config = {"extra": "forbid", "validate_assignment": True}


class IOConfig(BaseModel):
    encoding: str = "utf-8"

    model_config = {"extra": "forbid", "validate_assignment": True}


class ClassifierConfig(BaseModel):
    min_occurrences: int = 2

    model_config = {"extra": "forbid", "validate_assignment": True}


class Settings(BaseSettings):
    logging: LoggingConfig = LoggingConfig()
    sampling: SamplingConfig = SamplingConfig()
    io: IOConfig = IOConfig()
    classifier: ClassifierConfig = ClassifierConfig()

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "forbid",
        "env_nested_delimiter": "__",
    }

    @classmethod
    def settings_customise_sources(
        cls: type[Settings],
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        class TomlSettingsSource(PydanticBaseSettingsSource):
            def __init__(self: TomlSettingsSource, s_cls: type[BaseSettings]) -> None:
                super().__init__(s_cls)

            def __call__(self: TomlSettingsSource) -> dict[str, object]:
                return _load_toml_settings()

            def get_field_value(
                self: TomlSettingsSource, field: object, field_name: str
            ) -> tuple[object, str, bool]:
                data = self()
                if field_name in data:
                    return data[field_name], field_name, True
                return None, field_name, False

        # Precedence: env vars, .env file, TOML file, init kwargs, file secrets (unused)
        return (
            env_settings,
            dotenv_settings,
            TomlSettingsSource(settings_cls),
            init_settings,
            file_secret_settings,
        )
