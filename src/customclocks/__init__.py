"""Self-drawing analog clock widget for Qt."""
