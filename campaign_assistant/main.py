"""
Campaign Assistant - Command Line Entry Point

Rolls on the random tables, runs the composite generators and produces
backstories and campaign outlines from the shell. Every command prints a
readable summary; --export also writes the full record as JSON.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from campaign_assistant import __version__
from campaign_assistant.data_models import DiceRoller
from campaign_assistant.observability.run_log import RunLog
from campaign_assistant.story.backstory_generator import BackstoryGenerator
from campaign_assistant.story.narrative_engine import CharacterProfile, NarrativeEngine
from campaign_assistant.tables.random_tables_engine import RandomTablesEngine
from campaign_assistant.tables.table_registry import TableError
from campaign_assistant.tables.text_substitution import DEFAULT_MAX_DEPTH


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


logger = logging.getLogger(__name__)


# =============================================================================
# COMMANDS
# =============================================================================


def parse_parameters(pairs: Optional[list[str]]) -> dict[str, Any]:
    """
    Turn ["level=3", "race=elf"] into {"level": 3, "race": "elf"}.

    Integer-looking values become ints so range conditions can compare them.
    """
    parameters: dict[str, Any] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected key=value, got '{pair}'")
        try:
            parameters[key.strip()] = int(value)
        except ValueError:
            parameters[key.strip()] = value.strip()
    return parameters


def command_tables(engine: RandomTablesEngine, args: argparse.Namespace) -> tuple[str, Any]:
    if args.search:
        tables = engine.search_tables(args.search)
    elif args.category:
        tables = engine.get_tables_by_category(args.category)
    else:
        tables = [engine.get_table(table_id) for table_id in engine.get_available_tables()]

    lines = [
        f"{t.table_id:<32} {t.category.value:<22} {t.method.value:<12} {t.entry_count:>3}  {t.name}"
        for t in tables
    ]
    lines.append(f"\n{len(tables)} tables")
    return "\n".join(lines), [engine.get_table_info(t.table_id) for t in tables]


def command_roll(engine: RandomTablesEngine, args: argparse.Namespace) -> tuple[str, Any]:
    parameters = parse_parameters(args.param)
    if args.count > 1:
        results = engine.generate_multiple(args.table, args.count, parameters)
    else:
        results = [engine.generate_from_table(args.table, parameters, roll=args.roll)]

    text = "\n".join(result.get_full_description() for result in results)
    return text, [result.to_dict() for result in results]


def command_npc(engine: RandomTablesEngine, args: argparse.Namespace) -> tuple[str, Any]:
    npc = engine.generate_npc(parse_parameters(args.param))
    return npc.describe(), npc.to_dict()


def command_name(engine: RandomTablesEngine, args: argparse.Namespace) -> tuple[str, Any]:
    names = [engine.generate_name(args.race, args.gender) for _ in range(args.count)]
    return "\n".join(n.full_name for n in names), [n.to_dict() for n in names]


def command_adventure(engine: RandomTablesEngine, args: argparse.Namespace) -> tuple[str, Any]:
    adventure = engine.generate_adventure()
    text = "\n".join(
        [
            adventure.title,
            f"  Hook: {adventure.hook.text}",
            f"  Location: {adventure.location.text}",
            f"  Weather: {adventure.weather.text}",
        ]
    )
    return text, adventure.to_dict()


def command_backstory(engine: RandomTablesEngine, args: argparse.Namespace) -> tuple[str, Any]:
    generator = BackstoryGenerator(engine.dice)
    backstory = generator.generate_random_backstory(
        character_class=args.character_class,
        race=args.race,
        alignment=args.alignment,
    )
    return backstory.narrative, backstory.to_dict()


def command_outline(engine: RandomTablesEngine, args: argparse.Namespace) -> tuple[str, Any]:
    backstories = BackstoryGenerator(engine.dice)
    party = []
    for index in range(args.party):
        name = engine.generate_name()
        party.append(
            CharacterProfile.from_backstory(
                f"pc_{index + 1}", backstories.generate_random_backstory(), name.full_name
            )
        )

    outline = NarrativeEngine(engine.dice).generate_plot_outline(party, campaign_length=args.length)
    lines = [
        outline.title,
        f"  Pattern: {outline.pattern}",
        f"  Themes: {', '.join(outline.themes)}",
        f"  Resolution: {outline.resolution}",
    ]
    for act in outline.acts:
        lines.append(f"  Act {act.number}: {act.name} ({act.chapters} chapters)")
    for profile in party:
        lines.append(f"  {profile.name}: {outline.character_arcs[profile.character_id]}")
    return "\n".join(lines), outline.to_dict()


def command_validate(engine: RandomTablesEngine, args: argparse.Namespace) -> tuple[str, Any]:
    problems = engine.validate_tables()
    if not problems:
        return f"All {len(engine.get_available_tables())} tables valid", {}
    lines = []
    for table_id, issues in problems.items():
        lines.append(table_id)
        lines.extend(f"  - {issue}" for issue in issues)
    return "\n".join(lines), problems


COMMANDS = {
    "tables": command_tables,
    "roll": command_roll,
    "npc": command_npc,
    "name": command_name,
    "adventure": command_adventure,
    "backstory": command_backstory,
    "outline": command_outline,
    "validate": command_validate,
}


# =============================================================================
# CLI
# =============================================================================


def parse_arguments(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="campaign-assistant",
        description="Campaign Assistant - random tables and story tools for D&D 3.5",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  campaign-assistant tables --category npcs         # List NPC tables
  campaign-assistant roll characterNames --count 5  # Five first names
  campaign-assistant roll treasures --param level=3 # Treasure with context
  campaign-assistant --seed 7 npc                   # Reproducible NPC
  campaign-assistant outline --length 12 --export outline.json
        """
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    generation_group = parser.add_argument_group("Generation Options")
    generation_group.add_argument(
        "--seed",
        type=int,
        help="Seed the dice for reproducible output",
    )
    generation_group.add_argument(
        "--max-depth",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        help=f"Maximum nesting depth for sub-tables and substitution (default: {DEFAULT_MAX_DEPTH})",
    )

    content_group = parser.add_argument_group("Content Options")
    content_group.add_argument(
        "--tables-json",
        type=Path,
        action="append",
        help="JSON file of extra tables to load (may be repeated)",
    )
    content_group.add_argument(
        "--export",
        type=Path,
        help="Write the command's full result to this JSON file",
    )
    content_group.add_argument(
        "--run-log",
        type=Path,
        help="Write every roll and table lookup to this JSON file",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    tables = subparsers.add_parser("tables", help="List registered tables")
    tables.add_argument("--category", type=str, help="Only tables in this category")
    tables.add_argument("--search", type=str, help="Search ids, names, descriptions and categories")

    roll = subparsers.add_parser("roll", help="Resolve a table")
    roll.add_argument("table", type=str, help="Table id")
    roll.add_argument(
        "--param",
        action="append",
        metavar="KEY=VALUE",
        help="Generation parameter (may be repeated)",
    )
    roll.add_argument("--count", type=int, default=1, help="Number of results (default: 1)")
    roll.add_argument("--roll", type=int, help="Use this roll instead of the dice")

    npc = subparsers.add_parser("npc", help="Generate an NPC")
    npc.add_argument("--param", action="append", metavar="KEY=VALUE", help="Generation parameter")

    name = subparsers.add_parser("name", help="Generate character names")
    name.add_argument("--race", type=str, help="Restrict to this race")
    name.add_argument("--gender", type=str, help="Restrict to this gender")
    name.add_argument("--count", type=int, default=1, help="Number of names (default: 1)")

    subparsers.add_parser("adventure", help="Generate an adventure seed")

    backstory = subparsers.add_parser("backstory", help="Generate a character backstory")
    backstory.add_argument("--class", dest="character_class", type=str, help="Character class")
    backstory.add_argument("--race", type=str, help="Character race")
    backstory.add_argument("--alignment", type=str, help="Character alignment")

    outline = subparsers.add_parser("outline", help="Generate a campaign plot outline")
    outline.add_argument("--length", type=int, default=10, help="Number of chapters (default: 10)")
    outline.add_argument("--party", type=int, default=4, help="Number of player characters (default: 4)")

    subparsers.add_parser("validate", help="Check every table for gaps, overlaps and missing sub-tables")

    return parser.parse_args(argv)


def create_engine(args: argparse.Namespace, run_log: Optional[RunLog] = None) -> RandomTablesEngine:
    """Build the engine from parsed arguments, loading any extra table files."""
    dice = DiceRoller(seed=args.seed, run_log=run_log)
    engine = RandomTablesEngine(dice=dice, run_log=run_log, max_depth=args.max_depth)
    for path in args.tables_json or []:
        loaded = engine.registry.load_tables_from_json(path, replace=True)
        logger.info(f"Loaded {loaded} tables from {path}")
    return engine


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for CLI usage."""
    args = parse_arguments(argv)
    setup_logging(args.verbose)

    run_log = RunLog(seed=args.seed) if args.run_log else None
    try:
        engine = create_engine(args, run_log)
        text, payload = COMMANDS[args.command](engine, args)
    except (TableError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(text)

    if args.export:
        args.export.write_text(json.dumps(payload, indent=2, default=str))
        print(f"\nExported to {args.export}")
    if run_log is not None:
        run_log.save(str(args.run_log))
    return 0


if __name__ == "__main__":
    sys.exit(main())
