"""
Zero-safe helpers on top of pygame.Vector2.

pygame raises ValueError when normalizing or rescaling a zero-length vector;
the engine needs both operations to be total.
"""

import pygame


def normalized(vector: pygame.Vector2) -> pygame.Vector2:
    """
    Return the unit vector in the direction of ``vector``.

    Args:
        vector: Vector to normalize

    Returns:
        Unit vector, or the zero vector when ``vector`` has no length
    """
    if vector.length_squared() == 0:
        return pygame.Vector2(0, 0)
    return vector.normalize()


def limit(vector: pygame.Vector2, max_length: float) -> pygame.Vector2:
    """
    Clamp the magnitude of a vector.

    Args:
        vector: Vector to clamp
        max_length: Largest allowed magnitude

    Returns:
        A copy of ``vector`` rescaled to ``max_length`` if it was longer
    """
    result = pygame.Vector2(vector)
    if result.length_squared() > 0 and result.length() > max_length:
        result.scale_to_length(max_length)
    return result
