# ABOUTME: Main configuration composition for the typea library.
# ABOUTME: Assembles all configuration classes into a single, accessible object.

from functools import lru_cache

from ._base import BaseTypeaSettings


class TypeaSettings(BaseTypeaSettings):
    """Represents the complete, composed configuration for the library.

    Extend it by inheritance when a downstream package needs additional
    settings of its own:

        class MyServiceSettings(BaseSettings):
            DEFAULT_PAGE_SIZE: int = 50

        class Settings(TypeaSettings, MyServiceSettings):
            pass

    The `get_settings` function provides a singleton instance of this class.
    """

    pass


@lru_cache
def get_settings() -> TypeaSettings:
    """Provides a singleton instance of the library settings.

    Returns:
        A single, cached instance of the TypeaSettings class.
    """
    return TypeaSettings()
