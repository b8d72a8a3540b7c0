# planeproducer/exceptions.py

class ConfigurationError(ValueError):
    """Invalid simulation configuration detected"""
    def __init__(self, config_name, message="Configuration error"):
        self.config_name = config_name
        super().__init__(f"{message}: {config_name}")
