"""Local filesystem adapters: connections and byte streams."""

from fileconn.adapters.fs.local import LocalFileConnection
from fileconn.adapters.fs.streams import ByteInputStream, ByteOutputStream

__all__ = ["ByteInputStream", "ByteOutputStream", "LocalFileConnection"]
