from downsync.config.loader import DEFAULT_CONFIG_NAME, find_config, load_config

__all__ = ["DEFAULT_CONFIG_NAME", "find_config", "load_config"]
