"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Media attachment entities.
"""

from typing import Any, Dict, Optional

from tootwire.entities.base import Entity


class Focus(Entity):
    """Focal point of an image, each coordinate in [-1.0, 1.0]."""
    x: float
    y: float


class AttachmentMeta(Entity):
    """Metadata the server derived from an uploaded file."""
    focus: Optional[Focus] = None
    original: Optional[Dict[str, Any]] = None
    small: Optional[Dict[str, Any]] = None
    length: Optional[str] = None
    duration: Optional[float] = None


class Attachment(Entity):
    """A file uploaded for use in a status."""
    id: str
    type: str
    url: Optional[str] = None
    preview_url: Optional[str] = None
    remote_url: Optional[str] = None
    text_url: Optional[str] = None
    meta: Optional[AttachmentMeta] = None
    description: Optional[str] = None
    blurhash: Optional[str] = None
