"""
The MODEL layer contains pure data structures.
It has NO knowledge of the GUI (Qt) or of the solving rules.
"""
