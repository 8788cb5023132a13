"""
Configuration module for the Dark Sky client.
"""

from darksky.config.settings import PRESET_LOCATIONS, Settings, get_settings, reload_settings

__all__ = ["PRESET_LOCATIONS", "Settings", "get_settings", "reload_settings"]
