"""Config settings – env-based configuration for the query layer."""
from szuru_client.config.settings.base import Settings
from szuru_client.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from szuru_client.config.settings.search import SearchSettings

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SearchSettings", "Settings", "SettingsLoader"]
