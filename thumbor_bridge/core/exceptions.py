class ThumborBridgeError(Exception):
    pass


class InvalidSource(ThumborBridgeError, ValueError):
    def __init__(self, source_url):
        self.source_url = source_url
        super().__init__(f"Invalid source image URL: {source_url!r}")


class UnknownPreset(ThumborBridgeError, KeyError):
    def __init__(self, name):
        self.name = name
        super().__init__(name)

    def __str__(self):
        return f"Unknown image size preset: {self.name!r}"
