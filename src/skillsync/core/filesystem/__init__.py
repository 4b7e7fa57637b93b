"""Filesystem integration for reading vendor trees and writing generated output."""

from skillsync.core.filesystem.abc import Filesystem
from skillsync.core.filesystem.dry_run import DryRunFilesystem
from skillsync.core.filesystem.real import RealFilesystem

__all__ = ["DryRunFilesystem", "Filesystem", "RealFilesystem"]
