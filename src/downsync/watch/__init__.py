from downsync.watch.connection import WatchConnection, WatchmanConnection
from downsync.watch.framing import FrameDecoder
from downsync.watch.protocol import parse_message
from downsync.watch.watcher import ChangeWatcher

__all__ = ["ChangeWatcher", "FrameDecoder", "WatchConnection", "WatchmanConnection", "parse_message"]
