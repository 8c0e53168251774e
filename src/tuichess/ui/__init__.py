"""Front ends: the frame projection, the event loop, curses and Qt renderers."""
