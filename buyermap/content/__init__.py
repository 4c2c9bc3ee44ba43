"""
Content module - Read-only display copy
"""

from .copy import CONTENT, ContentRegistry, content_as_dict

__all__ = ['CONTENT', 'ContentRegistry', 'content_as_dict']
