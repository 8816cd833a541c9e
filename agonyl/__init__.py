"""
agonyl — binary codecs for the A3/Agonyl game data family.

Packages:
    questfile  — quest file codec (header, 7 objectives, continuation)
    bins       — flat record codecs (map, monster, NPC, spawn list)
    crypto     — legacy 562 XOR stream cipher
    data       — display name lookups
    protocol   — network message header records and pack/unpack helpers
    tools      — command-line inspector
"""

__version__ = "0.1.0"
