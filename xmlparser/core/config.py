from functools import lru_cache
from typing import Literal, Optional, Union

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Application
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"

    # Output
    encoding: str = "UTF-8"
    xml_declaration: bool = True
    indent_size: int = 2

    # Parsing
    keep_whitespace_text: bool = False
    resolve_entities: Optional[Union[bool, Literal["internal"]]] = None
    huge_tree: bool = False

    class Config:
        env_prefix = "XMLPARSER_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
