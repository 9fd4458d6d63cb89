class LinkScrubError(Exception):
    pass

class ConfigError(LinkScrubError):
    pass

class InvalidConfigError(ConfigError):
    """Configuration file parsed but has the wrong shape."""
    pass
