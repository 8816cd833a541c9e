"""
agonyl-dump — decode and print A3 data files.

Usage:
    agonyl-dump quest 1001.dat                 # header, objectives, continuation
    agonyl-dump quest 1001.dat --padding       # include padding regions
    agonyl-dump quest 1001.dat --hex           # hex dump of each objective block
    agonyl-dump mapbin MC.bin
    agonyl-dump spawnlist 0.n_ndt -v
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .. import questfile
from ..binary import hex_dump
from ..bins import mapbin, monsterbin, npcfile, spawnlist
from ..errors import CodecError
from ..questfile import HEADER_FIELDS, UNUSED_CONTINUATION, UNUSED_REWARD_ITEM_CODE, QuestFile

log = logging.getLogger("agonyl.dump")

KINDS = ("quest", "mapbin", "monsterbin", "npc", "spawnlist")


@dataclass
class DumpConfig:
    """Options for one dump run."""
    kind: str
    path: Path
    hex: bool = False
    show_padding: bool = False
    verbose: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> DumpConfig:
        return cls(
            kind=args.kind,
            path=Path(args.path),
            hex=args.hex,
            show_padding=args.padding,
            verbose=args.verbose,
        )


# ---- Quest rendering ----

def _fmt_value(value) -> str:
    if isinstance(value, bytes):
        return value.hex(" ")
    return str(value)


def _fmt_sentinel(value: int, sentinel: int) -> Text:
    if value == sentinel:
        return Text("unused", style="dim")
    return Text(str(value))


def render_quest(console: Console, quest: QuestFile, config: DumpConfig) -> None:
    h = quest.header
    title = f"Quest {h.quest_id}: {config.path.name} ({quest.encoded_size} bytes)"

    header = Table(title=title, title_justify="left")
    header.add_column("Offset", justify="right", style="bright_black")
    header.add_column("Field")
    header.add_column("Value")
    for fdef in HEADER_FIELDS.values():
        if fdef.type == "pad" and not config.show_padding:
            continue
        value = h.field_value(fdef.name)
        if fdef.name.startswith("reward_item_") and fdef.type != "pad":
            cell = _fmt_sentinel(value, UNUSED_REWARD_ITEM_CODE)
        else:
            cell = Text(_fmt_value(value), style="dim" if fdef.type == "pad" else "")
        header.add_row(str(fdef.offset), fdef.name, cell)
    console.print(header)

    objectives = Table(title="Objectives", title_justify="left")
    objectives.add_column("#", justify="right")
    objectives.add_column("Type")
    objectives.add_column("Map", justify="right")
    objectives.add_column("Monster", justify="right")
    objectives.add_column("Count", justify="right")
    objectives.add_column("Item", justify="right")
    objectives.add_column("Name")
    for slot, obj in enumerate(quest.objectives):
        if obj.is_unused:
            objectives.add_row(str(slot), Text("UNUSED", style="dim"), "", "", "", "", "")
            continue
        objectives.add_row(
            str(slot), obj.type_name, str(obj.map_id), str(obj.monster_id),
            str(obj.kill_count), str(obj.item_code), obj.name_text,
        )
    console.print(objectives)

    if config.hex:
        for slot, obj in enumerate(quest.objectives):
            console.print(f"[bold]objective {slot}[/bold]")
            console.print(hex_dump(obj.block), markup=False, highlight=False)

    cont = Text("Continuation: ")
    for i, value in enumerate(quest.continuation):
        if i:
            cont.append(", ")
        cont.append_text(_fmt_sentinel(value, UNUSED_CONTINUATION))
    console.print(cont)


# ---- Bin rendering ----

def _render_records(console: Console, title: str, records: list, columns: list[str]) -> None:
    table = Table(title=f"{title} ({len(records)} entries)", title_justify="left")
    for col in columns:
        table.add_column(col)
    for rec in records:
        table.add_row(*(_fmt_value(getattr(rec, col)) for col in columns))
    console.print(table)


def render(console: Console, config: DumpConfig) -> None:
    with open(config.path, "rb") as f:
        match config.kind:
            case "quest":
                render_quest(console, questfile.read(f), config)
            case "mapbin":
                _render_records(console, "Maps", mapbin.read(f), ["id", "name"])
            case "monsterbin":
                _render_records(console, "Monsters", monsterbin.read(f), ["id", "name"])
            case "npc":
                npc = npcfile.read(f)
                _render_records(
                    console, "NPC", [npc],
                    ["id", "name", "level", "hp", "respawn_rate", "player_exp"],
                )
            case "spawnlist":
                _render_records(
                    console, "Spawns", spawnlist.read(f),
                    ["id", "x", "y", "orientation", "spawn_step"],
                )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="agonyl-dump",
        description="Decode and print A3 data files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("kind", choices=KINDS, help="File format")
    parser.add_argument("path", help="File to decode")
    parser.add_argument("--hex", action="store_true",
                        help="Hex dump each quest objective block")
    parser.add_argument("--padding", action="store_true",
                        help="Show quest header padding regions")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    config = DumpConfig.from_args(parser.parse_args(argv))

    level = logging.DEBUG if config.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    console = Console()
    try:
        render(console, config)
    except (CodecError, OSError) as e:
        log.error("%s: %s", config.path, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
