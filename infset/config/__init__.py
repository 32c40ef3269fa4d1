from infset.config.sets_from_config_reader import SetsFromConfigReader

__all__ = ["SetsFromConfigReader"]
