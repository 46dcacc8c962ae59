"""Core — models, configuration, engine and observability."""
