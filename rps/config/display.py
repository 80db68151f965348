"""Display and UI configuration constants."""

# Arena dimensions in pixels (the viewer window matches these)
ARENA_WIDTH = 1280
ARENA_HEIGHT = 720

# The frame rate for the viewer and backend loops, in frames per second
FRAME_RATE = 60

# Colours
BACKGROUND_COLOR = (24, 28, 36)
HUD_TEXT_COLOR = (230, 230, 230)
HUD_FONT_SIZE = 24

# UI Display Constants
SEPARATOR_WIDTH = 60  # Width of separator lines in console output
