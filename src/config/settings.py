"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use PREXENT_ prefix (e.g., PREXENT_MAX_INCLUDE_DEPTH=16).

Settings can also be loaded from a .env file in the project root.
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use PREXENT_ prefix.

    Examples:
        PREXENT_DEFAULT_CODE_LANG=bash
        PREXENT_DEFAULT_CODE_RUNNER=sh
        PREXENT_MAX_INCLUDE_DEPTH=16
    """

    model_config = SettingsConfigDict(
        env_prefix="PREXENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Segmenter configuration
    separator: str = Field(
        default="---",
        min_length=1,
        description="Line that splits the document into slides",
    )

    # Classifier configuration
    default_code_lang: str = Field(
        default="python",
        description="Language used by '!code <file>' when no language is given",
    )

    default_code_runner: str = Field(
        default="python",
        description="Runner used by '!code <file>' when no runner is given",
    )

    max_include_depth: int = Field(
        default=64,
        ge=0,
        description="Maximum nesting of '!include' directives before an error block is emitted",
    )

    markdown_extensions: List[str] = Field(
        default_factory=lambda: ["fenced_code", "tables", "codehilite"],
        description="Python-Markdown extensions used when rendering prose",
    )

    # Loader configuration
    file_encoding: str = Field(
        default="utf-8",
        description="Encoding used to read the root document and included files",
    )

    # Output configuration
    output_file: str = Field(
        default="slides.json",
        description="Default name of the JSON file written by the CLI",
    )

    debug_mode: bool = Field(
        default=False,
        description="Enable debug output during parsing",
    )

    @field_validator("separator")
    @classmethod
    def separator_check(cls, value: str) -> str:
        """Reject separators containing whitespace"""
        if any(ch.isspace() for ch in value):
            raise ValueError("separator must be a non-empty token without whitespace")
        return value


# Singleton instance - import this in your code
appsettings = AppSettings()
