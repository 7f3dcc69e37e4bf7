from .settings import Settings, get_settings, reload_settings, settings_or_defaults

__all__ = ["Settings", "get_settings", "reload_settings", "settings_or_defaults"]
