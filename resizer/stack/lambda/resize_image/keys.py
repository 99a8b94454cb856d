class DerivedKeyError(ValueError):
    """Raised when a destination key would not be recognised as processed output."""


def is_processed(key: str, marker: str) -> bool:
    return marker in key


def resized_key_for(key: str, source_prefix: str, destination_prefix: str, marker: str) -> str:
    """Build the destination key for a resized copy of ``key``.

    Both substitutions only touch the first occurrence: the source prefix is
    swapped for the destination prefix, then the marker is placed in front of
    the first ``.`` (``original-images/photo.jpg`` ->
    ``resized-images/photo_resized.jpg``).

    The result must differ from ``key`` and carry the marker, otherwise writing
    it would trigger this function again on its own output.
    """
    resized_key = key.replace(source_prefix, destination_prefix, 1).replace('.', f"{marker}.", 1)

    if resized_key == key:
        raise DerivedKeyError(f"Destination key for {key} is identical to the source key")
    if not is_processed(resized_key, marker):
        raise DerivedKeyError(f"Destination key {resized_key} is missing marker {marker}")

    return resized_key
