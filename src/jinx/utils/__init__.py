"""Low-level helpers shared by the serializer."""
