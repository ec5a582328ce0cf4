"""Veroeffentlichung des redigierten Logs als Gist."""

from .pipeline import CancellationToken, LogPublisher
from .status import PublishStatus, StatusSnapshot
from .upload_settings import UploadSettings

__all__ = ["CancellationToken", "LogPublisher", "PublishStatus", "StatusSnapshot", "UploadSettings"]
