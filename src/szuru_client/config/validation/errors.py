"""Config validation – errors raised while building settings.

``setting_name`` is the dataclass field when a settings object rejects a
value, and the full environment variable (e.g. ``SZURU_DEFAULT_LIMIT``) when
the loader finds it missing.
"""
from szuru_client.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded, parsed or validated."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"{setting_name} is not set and has no default",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A value was parsed but is outside what the setting allows."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "value": value, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
