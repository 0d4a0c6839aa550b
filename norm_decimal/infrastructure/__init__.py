"""Infrastructure adapters: engine context, settings, codecs and storage."""
