"""Wire encodings for GELF records."""

from gelfkit.core.encoding.gelf_json import encode_gelf, encode_record, epoch_seconds

__all__ = ["encode_gelf", "encode_record", "epoch_seconds"]
