from dataclasses import dataclass


@dataclass
class RenderOptions:
    """Sizing options passed to an encoder.

    Units depend on the protocol: kitty needs positive int pixel counts,
    iTerm2 accepts cell counts or its own unit strings ("auto", "400px", "50%").
    """

    width: int | str
    height: int | str | None = None
    preserve_aspect_ratio: bool = True  # iTerm2 only
