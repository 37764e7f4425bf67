"""
Business entities representing core domain concepts.

Entities mirror the objects exposed by the media-server host. They are
immutable from the point of view of the intro provider.

Exports:
- MediaItem: An item of the host library (movie, episode, folder...)
- ItemType: Type tag of a MediaItem
- VirtualFolder: A library declared on the host
- User: The user requesting playback
- IntroInfo: Reference to an intro played before an item
"""

from src.core.entities.library import IntroInfo, ItemType, MediaItem, User, VirtualFolder

__all__ = [
    "IntroInfo",
    "ItemType",
    "MediaItem",
    "User",
    "VirtualFolder",
]
