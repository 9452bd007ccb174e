"""Configuration loading and validation."""

import argparse
import json

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from ladderpy.utils.constants import Constants
from ladderpy.utils.helpers import expand_file_path


class Config(BaseModel):
    """Settings for one ladder run.

    Values come from an optional JSON file, overridden by CLI arguments.
    """

    source: str
    target: str

    # Dictionary
    wordlist: str = Constants.DEFAULT_WORDLIST
    dictionary: str = "file"
    top_n: int | None = None
    exclude: str | None = None
    lowercase: bool = True

    # Output
    output_format: str = "path"
    output: str | None = None
    reports: str | None = None
    verify: bool = False

    # Search
    jobs: int = 1

    # Logging
    verbose: bool = False
    debug: bool = False
    debug_words: set[str] = Field(default_factory=set)

    @field_validator("debug_words", mode="before")
    @classmethod
    def parse_string_set(cls, value):
        """Accept a comma-separated string as well as a list of words."""
        if value is None:
            return set()
        if isinstance(value, str):
            return {word.strip() for word in value.split(",") if word.strip()}
        return value

    @field_validator("source", "target")
    @classmethod
    def require_word(cls, value: str) -> str:
        """Reject empty endpoints."""
        value = value.strip()
        if not value:
            raise ValueError("must be a non-empty word")
        return value

    @field_validator("wordlist", "exclude", "output", "reports")
    @classmethod
    def expand_path(cls, value: str | None) -> str | None:
        """Expand ~ in file and directory paths."""
        return expand_file_path(value) if value else value

    @model_validator(mode="after")
    def validate_cross_fields(self) -> "Config":
        """Check settings that depend on each other."""
        if self.dictionary not in Constants.DICTIONARY_SOURCES:
            raise ValueError(
                f"dictionary must be one of {', '.join(Constants.DICTIONARY_SOURCES)}"
            )
        if self.output_format not in Constants.OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {', '.join(Constants.OUTPUT_FORMATS)}"
            )
        if self.dictionary == "wordfreq" and not self.top_n:
            raise ValueError("the wordfreq dictionary requires top_n")
        if self.top_n is not None and self.top_n < 1:
            raise ValueError("top_n must be at least 1")
        if self.jobs < 1:
            raise ValueError("jobs must be at least 1")
        if self.debug:
            self.verbose = True
        if self.lowercase:
            self.source = self.source.lower()
            self.target = self.target.lower()
            self.debug_words = {word.lower() for word in self.debug_words}
        return self


def load_config(
    config_file: str | None,
    args: argparse.Namespace,
    parser: argparse.ArgumentParser,
) -> Config:
    """Load configuration from a JSON file and CLI arguments.

    CLI arguments that were given (not None) override values from the file.

    Args:
        config_file: Optional path to a JSON configuration file
        args: Parsed CLI arguments
        parser: Parser used to report errors

    Returns:
        Validated Config
    """
    values: dict = {}
    if config_file:
        config_path = expand_file_path(config_file)
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                values = json.load(f)
        except FileNotFoundError:
            parser.error(f"Config file not found: {config_file}")
        except json.JSONDecodeError as e:
            parser.error(f"Invalid JSON in config file {config_file}: {e}")

    for key, value in vars(args).items():
        if key == "config" or value is None:
            continue
        values[key] = value

    try:
        return Config(**values)
    except ValidationError as e:
        messages = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'config'}: {error['msg']}"
            for error in e.errors()
        )
        parser.error(f"Invalid configuration: {messages}")
