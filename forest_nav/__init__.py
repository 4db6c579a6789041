"""
Phantom Forest Navigator.

Finds the shortest portal route between two maps of the Phantom Forest,
honouring routes that are only usable with the Map of Phantom Forest
or a mobility skill.
"""

__version__ = "0.1.0"
