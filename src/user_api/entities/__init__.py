"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by handlers and
helpers. They are NOT used for API contracts - use DTOs from the dto
package for that.
"""

from .envelope import Envelope

__all__ = ["Envelope"]
