"""
The MODEL layer contains pure data structures and clock logic.
It has NO knowledge of the GUI (Qt).
It deals with Time, Hand Geometry, and the draw list.
"""
