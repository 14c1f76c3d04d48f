from atlas_foundry.config.settings import AtlasSettings, get_settings

__all__ = ["AtlasSettings", "get_settings"]
