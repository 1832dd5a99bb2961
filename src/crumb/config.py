"""Codec configuration.

CodecConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CodecConfig:
    """Defaults applied to every write. Immutable after creation.

    Attributes given on an entry always win over these::

        config = CodecConfig(default_path="/", default_secure=True)
    """

    # Scope
    default_path: str | None = None
    default_domain: str | None = None

    # Security
    default_secure: bool = False

    # Expiration: True turns writes without expires/max_age into far-future cookies
    persistent_by_default: bool = False
