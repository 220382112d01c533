class OmniURLError(Exception):
    pass

class ConfigError(OmniURLError):
    pass

class URLParseError(OmniURLError, ValueError):
    """Input could not be parsed as an absolute URL."""
    pass

class InvalidHostError(URLParseError):
    """Host component failed validation or IDNA conversion."""
    pass
