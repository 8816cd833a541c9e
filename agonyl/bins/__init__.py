"""
Flat record codecs for client/server bin files.

    mapbin      — counted map records
    monsterbin  — counted monster records
    npcfile     — single NPC record
    spawnlist   — uncounted spawn entries
"""

from .mapbin import MapBinItem
from .monsterbin import MonsterBinItem
from .npcfile import NPCAttack, NPCFileData
from .spawnlist import SpawnListItem

__all__ = ["MapBinItem", "MonsterBinItem", "NPCAttack", "NPCFileData", "SpawnListItem"]
