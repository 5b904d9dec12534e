"""Built-in locale definitions.

Registration order matters: a definition may only extend a locale that
appears before it. Region variants reuse the base definitions.
"""

from gbstranslator.types import LocaleDefinition, LocaleName

from .en import EN
from .en_gb import EN_GB
from .es import ES

__all__ = ["BUILTIN_LOCALES", "EN", "EN_GB", "ES"]

_ENGLISH_REGIONS: tuple[tuple[LocaleName, LocaleDefinition], ...] = (
    ("en-AU", EN_GB),
    ("en-BZ", EN),
    ("en-CA", EN_GB),
    ("en-CB", EN_GB),
    ("en-GB", EN_GB),
    ("en-IE", EN_GB),
    ("en-IN", EN_GB),
    ("en-JM", EN_GB),
    ("en-MT", EN_GB),
    ("en-MY", EN_GB),
    ("en-NZ", EN_GB),
    ("en-PH", EN_GB),
    ("en-SG", EN_GB),
    ("en-TT", EN_GB),
    ("en-US", EN),
    ("en-ZA", EN_GB),
    ("en-ZW", EN_GB),
)

_SPANISH_REGIONS: tuple[LocaleName, ...] = (
    "es-AR", "es-BO", "es-CL", "es-CO", "es-CR", "es-DO", "es-EC", "es-ES",
    "es-GT", "es-HN", "es-MX", "es-NI", "es-PA", "es-PE", "es-PR", "es-PY",
    "es-SV", "es-US", "es-UY", "es-VE",
)  # fmt: skip

BUILTIN_LOCALES: tuple[tuple[LocaleName, LocaleDefinition], ...] = (
    ("en", EN),
    *_ENGLISH_REGIONS,
    ("es", ES),
    *((region, ES) for region in _SPANISH_REGIONS),
)
