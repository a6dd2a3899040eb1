from streamscope.domain.enums.manifest_type import ManifestType
__all__ = [
    "ManifestType",
]
