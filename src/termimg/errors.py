class TermImageError(Exception):
    """Base class for errors raised while encoding an image."""

    def __init__(self, path, message: str):
        super().__init__(f"{message}: {path}")
        self.path = str(path)


class FileReadError(TermImageError):
    """The source file is missing or cannot be read."""

    def __init__(self, path, message: str = "Cannot read file"):
        super().__init__(path, message)


class ImageDecodeError(TermImageError):
    """The source bytes are not a supported raster format, or are corrupt."""

    def __init__(self, path, message: str = "Cannot decode image"):
        super().__init__(path, message)
