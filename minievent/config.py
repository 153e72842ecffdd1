import enum
import logging


class Config:
    """Base configuration."""

    DEBUG = False
    LOG_LEVEL = logging.INFO
    LOG_DIR = None
    MAX_LOG_FILES = 5


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = logging.DEBUG


class ProductionConfig(Config):
    """Production configuration."""

    LOG_LEVEL = logging.WARNING


class TestingConfig(Config):
    """Testing configuration."""

    TESTING = True
    LOG_LEVEL = logging.DEBUG
    MAX_LOG_FILES = 1


class ConfigType(enum.Enum):
    DEVELOPMENT = DevelopmentConfig
    PRODUCTION = ProductionConfig
    TESTING = TestingConfig


def get_config(name: str) -> type[Config]:
    """Resolve a configuration class by name, e.g. "development".

    Raises:
        ValueError: If the name does not match a ConfigType member.
    """
    try:
        return ConfigType[name.upper()].value
    except KeyError:
        choices = ", ".join(member.name.lower() for member in ConfigType)
        raise ValueError(f"Unknown config '{name}', expected one of: {choices}") from None
