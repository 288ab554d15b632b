"""Services composing board state with the remote backend."""

from lanesync.services.board import BoardService
from lanesync.services.sync import RemoteSyncAdapter

__all__ = ["BoardService", "RemoteSyncAdapter"]
