"""
Core D&D 3.5 random tables.

Names, encounters, treasure, settlements, weather, dungeons, adventure
hooks and NPC traits, plus a few context-driven tables (race-filtered
names, environment encounters, weighted NPC attitudes) that the composite
generators build on.
"""

from typing import Any, Optional

from campaign_assistant.tables.table_types import (
    RandomTable,
    ResolutionMethod,
    TableCategory,
    TableEntry,
    parameter_between,
    parameter_is,
)


def _row(
    roll_min: int,
    roll_max: int,
    text: str,
    dice: Optional[str] = None,
    sub_table: Optional[str] = None,
    **attributes: Any,
) -> TableEntry:
    return TableEntry(
        text=text,
        roll_min=roll_min,
        roll_max=roll_max,
        dice=dice,
        sub_table=sub_table,
        attributes=attributes,
    )


# =============================================================================
# NAMES
# =============================================================================


def _create_character_names_table() -> RandomTable:
    """Given names by race: human 1-40, elf 41-65, dwarf 66-85, halfling 86-100."""
    return RandomTable(
        table_id="characterNames",
        name="Character Names",
        dice_expression="1d100",
        method=ResolutionMethod.PERCENTILE,
        category=TableCategory.NAMES,
        description="Given names for common races",
        entries=[
            _row(1, 5, "Aerdrie", race="human", gender="female"),
            _row(6, 10, "Ahvain", race="human", gender="male"),
            _row(11, 15, "Aramil", race="human", gender="male"),
            _row(16, 20, "Berris", race="human", gender="female"),
            _row(21, 25, "Cithreth", race="human", gender="female"),
            _row(26, 30, "Drannor", race="human", gender="male"),
            _row(31, 35, "Enna", race="human", gender="female"),
            _row(36, 40, "Galinndan", race="human", gender="male"),
            _row(41, 45, "Halimath", race="elf", gender="male"),
            _row(46, 50, "Immeral", race="elf", gender="male"),
            _row(51, 55, "Ivellios", race="elf", gender="male"),
            _row(56, 60, "Korfel", race="elf", gender="male"),
            _row(61, 65, "Lamlis", race="elf", gender="female"),
            _row(66, 70, "Baern", race="dwarf", gender="male"),
            _row(71, 75, "Darrak", race="dwarf", gender="male"),
            _row(76, 80, "Eberk", race="dwarf", gender="male"),
            _row(81, 85, "Gunnloda", race="dwarf", gender="female"),
            _row(86, 90, "Alton", race="halfling", gender="male"),
            _row(91, 95, "Cora", race="halfling", gender="female"),
            _row(96, 100, "Garret", race="halfling", gender="male"),
        ],
    )


def _create_names_by_race_table(names: RandomTable) -> RandomTable:
    """Same names, picked uniformly among those matching the 'race' parameter."""
    return RandomTable(
        table_id="characterNamesByRace",
        name="Character Names by Race",
        dice_expression="1d20",
        method=ResolutionMethod.CONDITIONAL,
        category=TableCategory.NAMES,
        description="Given names filtered by the race parameter",
        entries=[
            TableEntry(
                text=entry.text,
                conditions=(parameter_is("race", entry.race),),
                attributes=dict(entry.attributes),
            )
            for entry in names.entries
        ],
    )


def _create_surnames_table() -> RandomTable:
    return RandomTable(
        table_id="surnames",
        name="Surnames",
        dice_expression="1d50",
        method=ResolutionMethod.STANDARD,
        category=TableCategory.NAMES,
        description="Elven and dwarven family names",
        entries=[
            _row(1, 3, "Amakir"),
            _row(4, 6, "Amakura"),
            _row(7, 9, "Galanodel"),
            _row(10, 12, "Holimion"),
            _row(13, 15, "Ilphelkiir"),
            _row(16, 18, "Liadon"),
            _row(19, 21, "Meliamne"),
            _row(22, 24, "Nailo"),
            _row(25, 27, "Siannodel"),
            _row(28, 30, "Xiloscient"),
            _row(31, 33, "Battlehammer"),
            _row(34, 36, "Brawnanvil"),
            _row(37, 39, "Dankil"),
            _row(40, 42, "Fireforge"),
            _row(43, 45, "Frostbeard"),
            _row(46, 48, "Gorunn"),
            _row(49, 49, "Holderhek"),
            _row(50, 50, "Ironfist"),
        ],
    )


# =============================================================================
# ENCOUNTERS
# =============================================================================


def _create_encounters_table() -> RandomTable:
    return RandomTable(
        table_id="encounters",
        name="Random Encounters",
        dice_expression="1d100",
        method=ResolutionMethod.PERCENTILE,
        category=TableCategory.ENCOUNTERS,
        description="General wilderness and road encounters",
        entries=[
            # Common animals
            _row(1, 5, "Badger", cr=0, type="animal", hostile=False),
            _row(6, 10, "Bear, Brown", cr=4, type="animal", hostile=True),
            _row(11, 15, "Boar", cr=2, type="animal", hostile=True),
            _row(16, 20, "Eagle", cr=1, type="animal", hostile=False),
            _row(21, 25, "Wolf", cr=1, type="animal", hostile=True),
            _row(26, 30, "Dire Wolf", cr=3, type="animal", hostile=True),
            # Humanoids
            _row(31, 35, "Bandits (1d4+1)", cr=2, type="humanoid", hostile=True),
            _row(36, 40, "Merchants with Guards", cr=3, type="humanoid", hostile=False),
            _row(41, 45, "Pilgrims", cr=1, type="humanoid", hostile=False),
            _row(46, 50, "Patrol (1d6 guards)", cr=4, type="humanoid", hostile=False),
            # Monsters
            _row(51, 55, "Goblin Scouts (1d4)", cr=2, type="humanoid", hostile=True),
            _row(56, 60, "Orc Warriors (1d3)", cr=3, type="humanoid", hostile=True),
            _row(61, 65, "Owlbear", cr=4, type="magical beast", hostile=True),
            _row(66, 70, "Skeleton Warriors (1d6)", cr=3, type="undead", hostile=True),
            _row(71, 75, "Giant Spider", cr=1, type="vermin", hostile=True),
            _row(76, 80, "Troll", cr=5, type="giant", hostile=True),
            _row(81, 85, "Wyvern", cr=6, type="dragon", hostile=True),
            # Rare
            _row(86, 90, "Unicorn", cr=4, type="magical beast", hostile=False),
            _row(91, 95, "Ancient Ruins", cr=0, type="location", hostile=False),
            _row(96, 98, "Mysterious Traveler", cr=5, type="humanoid", hostile=False),
            _row(99, 100, "Dragon (Young)", cr=8, type="dragon", hostile=True),
        ],
    )


def _create_animals_table() -> RandomTable:
    return RandomTable(
        table_id="animals",
        name="Animals",
        dice_expression="1d20",
        method=ResolutionMethod.STANDARD,
        category=TableCategory.ENCOUNTERS,
        entries=[
            _row(1, 2, "Badger", cr=0, size="Small"),
            _row(3, 4, "Bear, Black", cr=2, size="Medium"),
            _row(5, 6, "Bear, Brown", cr=4, size="Large"),
            _row(7, 8, "Boar", cr=2, size="Medium"),
            _row(9, 10, "Eagle", cr=1, size="Small"),
            _row(11, 12, "Hawk", cr=1 / 3, size="Tiny"),
            _row(13, 14, "Horse, Heavy", cr=1, size="Large"),
            _row(15, 16, "Lion", cr=3, size="Large"),
            _row(17, 18, "Owl", cr=1 / 4, size="Tiny"),
            _row(19, 20, "Wolf", cr=1, size="Medium"),
        ],
    )


def _create_humanoids_table() -> RandomTable:
    return RandomTable(
        table_id="humanoids",
        name="Humanoids",
        dice_expression="1d12",
        method=ResolutionMethod.STANDARD,
        category=TableCategory.ENCOUNTERS,
        entries=[
            _row(1, 2, "Commoner", cr=1 / 2, npc_class="Commoner"),
            _row(3, 4, "Warrior", cr=1, npc_class="Warrior"),
            _row(5, 6, "Adept", cr=1, npc_class="Adept"),
            _row(7, 8, "Expert", cr=1, npc_class="Expert"),
            _row(9, 10, "Aristocrat", cr=1, npc_class="Aristocrat"),
            _row(11, 12, "Guard", cr=1, npc_class="Warrior"),
        ],
    )


def _create_environment_encounters_table() -> RandomTable:
    """Routes the 'environment' parameter to the matching encounter table."""
    return RandomTable(
        table_id="environmentEncounters",
        name="Encounters by Environment",
        dice_expression="1d1",
        method=ResolutionMethod.CONDITIONAL,
        category=TableCategory.ENCOUNTERS,
        description="Environment-specific encounter chosen from the environment parameter",
        entries=[
            TableEntry("[TABLE:forest-encounters]", conditions=(parameter_is("environment", "forest"),)),
            TableEntry("[TABLE:urban-encounters]", conditions=(parameter_is("environment", "urban"),)),
            TableEntry("[TABLE:urban-encounters]", conditions=(parameter_is("environment", "city"),)),
            TableEntry("[TABLE:mountain-encounters]", conditions=(parameter_is("environment", "mountain"),)),
            TableEntry("[TABLE:swamp-encounters]", conditions=(parameter_is("environment", "swamp"),)),
            TableEntry("[TABLE:dungeonRooms]", conditions=(parameter_is("environment", "dungeon"),)),
        ],
    )


def _create_encounter_scale_table() -> RandomTable:
    """Size of the encountered group, keyed on 'party_level'."""
    return RandomTable(
        table_id="encounterScale",
        name="Encounter Scale",
        dice_expression="1d2",
        method=ResolutionMethod.CONDITIONAL,
        category=TableCategory.ENCOUNTERS,
        description="How many creatures turn up, scaled by party level",
        entries=[
            TableEntry("A lone creature", conditions=(parameter_between("party_level", 1, 3),),
                       attributes={"count": 1}),
            TableEntry("A pair", conditions=(parameter_between("party_level", 1, 3),),
                       attributes={"count": 2}),
            TableEntry("A small group of [ROLL:1d4+1]", conditions=(parameter_between("party_level", 4, 8),),
                       attributes={"count": "1d4+1"}),
            TableEntry("A band of [ROLL:2d4+2]", conditions=(parameter_between("party_level", 4, 8),),
                       attributes={"count": "2d4+2"}),
            TableEntry("A warband of [ROLL:3d6]", conditions=(parameter_between("party_level", 9, None),),
                       attributes={"count": "3d6"}),
            TableEntry("A horde of [ROLL:4d10]", conditions=(parameter_between("party_level", 9, None),),
                       attributes={"count": "4d10"}),
        ],
    )


# =============================================================================
# TREASURE AND ITEMS
# =============================================================================


def _create_treasures_table() -> RandomTable:
    """Hoard table; gem and magic rows continue on their sub-tables."""
    return RandomTable(
        table_id="treasures",
        name="Treasure Hoard",
        dice_expression="1d100",
        method=ResolutionMethod.NESTED,
        category=TableCategory.TREASURE,
        description="Treasure hoards with gem and magic item sub-tables",
        entries=[
            # Coins
            _row(1, 20, "Copper pieces", dice="4d6x10", type="coins", value="cp"),
            _row(21, 40, "Silver pieces", dice="3d6x10", type="coins", value="sp"),
            _row(41, 55, "Gold pieces", dice="2d6x10", type="coins", value="gp"),
            _row(56, 60, "Platinum pieces", dice="1d4x5", type="coins", value="pp"),
            # Gems
            _row(61, 65, "Semi-precious stones", dice="1d4", sub_table="gems", type="gems", value=10),
            _row(66, 70, "Fancy stones", dice="1d3", sub_table="gems", type="gems", value=50),
            _row(71, 75, "Precious stones", dice="1d2", sub_table="gems", type="gems", value=100),
            # Art objects
            _row(76, 80, "Decorative items", dice="1d3", type="art", value=25),
            _row(81, 85, "Fine artwork", dice="1d2", type="art", value=250),
            # Magic items
            _row(86, 90, "Potion", sub_table="magicItems", type="magic"),
            _row(91, 95, "Scroll", sub_table="magicItems", type="magic"),
            _row(96, 98, "Wand", sub_table="magicItems", type="magic"),
            _row(99, 100, "Wondrous item", sub_table="magicItems", type="magic"),
        ],
    )


def _create_magic_items_table() -> RandomTable:
    return RandomTable(
        table_id="magicItems",
        name="Magic Items",
        dice_expression="1d100",
        method=ResolutionMethod.PERCENTILE,
        category=TableCategory.TREASURE,
        entries=[
            # Potions
            _row(1, 10, "Potion of Cure Light Wounds", type="potion", caster_level=1),
            _row(11, 15, "Potion of Bull's Strength", type="potion", caster_level=3),
            _row(16, 20, "Potion of Cat's Grace", type="potion", caster_level=3),
            _row(21, 25, "Potion of Eagle's Splendor", type="potion", caster_level=3),
            _row(26, 30, "Potion of Invisibility", type="potion", caster_level=3),
            # Scrolls
            _row(31, 35, "Scroll of Magic Missile", type="scroll", spell_level=1),
            _row(36, 40, "Scroll of Shield", type="scroll", spell_level=1),
            _row(41, 45, "Scroll of Detect Magic", type="scroll", spell_level=0),
            _row(46, 50, "Scroll of Cure Moderate Wounds", type="scroll", spell_level=2),
            _row(51, 55, "Scroll of Web", type="scroll", spell_level=2),
            # Weapons and armor
            _row(56, 60, "+1 Longsword", type="weapon", enhancement=1),
            _row(61, 65, "+1 Chain Mail", type="armor", enhancement=1),
            _row(66, 70, "+1 Shield", type="shield", enhancement=1),
            _row(71, 75, "Masterwork Weapon", type="weapon", enhancement=0),
            _row(76, 80, "Masterwork Armor", type="armor", enhancement=0),
            # Wondrous items
            _row(81, 85, "Bag of Holding (Type I)", type="wondrous"),
            _row(86, 90, "Cloak of Resistance +1", type="wondrous"),
            _row(91, 95, "Boots of Elvenkind", type="wondrous"),
            _row(96, 98, "Ring of Protection +1", type="ring"),
            _row(99, 100, "Amulet of Natural Armor +1", type="wondrous"),
        ],
    )


def _create_gems_table() -> RandomTable:
    return RandomTable(
        table_id="gems",
        name="Gems and Jewels",
        dice_expression="1d20",
        method=ResolutionMethod.STANDARD,
        category=TableCategory.TREASURE,
        entries=[
            _row(1, 4, "Agate", value=10, type="semi-precious"),
            _row(5, 8, "Quartz", value=10, type="semi-precious"),
            _row(9, 12, "Amethyst", value=100, type="fancy"),
            _row(13, 16, "Garnet", value=100, type="fancy"),
            _row(17, 18, "Ruby", value=1000, type="precious"),
            _row(19, 20, "Diamond", value=5000, type="precious"),
        ],
    )


def _create_mundane_items_table() -> RandomTable:
    """Value in gp, weight_lb in pounds."""
    return RandomTable(
        table_id="mundaneItems",
        name="Mundane Items",
        dice_expression="1d100",
        method=ResolutionMethod.PERCENTILE,
        category=TableCategory.TREASURE,
        entries=[
            # Tools and equipment
            _row(1, 5, "Rope, hemp (50 ft.)", value=1, weight_lb=10),
            _row(6, 10, "Torch", value=0.01, weight_lb=1),
            _row(11, 15, "Backpack", value=2, weight_lb=2),
            _row(16, 20, "Bedroll", value=0.1, weight_lb=5),
            _row(21, 25, "Blanket", value=0.5, weight_lb=3),
            _row(26, 30, "Candle", value=0.01, weight_lb=0),
            _row(31, 35, "Chain (10 ft.)", value=30, weight_lb=20),
            _row(36, 40, "Crowbar", value=2, weight_lb=5),
            # Clothing
            _row(41, 45, "Cloak, common", value=0.5, weight_lb=1),
            _row(46, 50, "Clothes, common", value=0.5, weight_lb=2),
            _row(51, 55, "Clothes, noble's", value=75, weight_lb=10),
            _row(56, 60, "Hat", value=0.1, weight_lb=0),
            # Food and drink
            _row(61, 65, "Rations, trail (1 day)", value=0.5, weight_lb=1),
            _row(66, 70, "Waterskin", value=1, weight_lb=4),
            _row(71, 75, "Wine, common (pitcher)", value=0.2, weight_lb=6),
            _row(76, 80, "Ale, mug", value=0.04, weight_lb=1),
            # Miscellaneous
            _row(81, 85, "Flint and steel", value=1, weight_lb=0),
            _row(86, 90, "Lantern, hooded", value=7, weight_lb=2),
            _row(91, 95, "Mirror, small steel", value=10, weight_lb=0.5),
            _row(96, 100, "Spyglass", value=1000, weight_lb=1),
        ],
    )


# =============================================================================
# LOCATIONS
# =============================================================================


def _create_settlements_table() -> RandomTable:
    return RandomTable(
        table_id="settlements",
        name="Settlements",
        dice_expression="1d100",
        method=ResolutionMethod.PERCENTILE,
        category=TableCategory.LOCATIONS,
        entries=[
            _row(1, 10, "Thorp", size="thorp", population="20-80", government="council"),
            _row(11, 25, "Hamlet", size="hamlet", population="81-400", government="elder"),
            _row(26, 40, "Village", size="village", population="401-900", government="mayor"),
            _row(41, 55, "Small Town", size="small town", population="901-2000", government="council"),
            _row(56, 70, "Large Town", size="large town", population="2001-5000", government="mayor"),
            _row(71, 85, "Small City", size="small city", population="5001-12000", government="lord"),
            _row(86, 95, "Large City", size="large city", population="12001-25000", government="council"),
            _row(96, 98, "Metropolis", size="metropolis", population="25000+", government="overlord"),
            _row(99, 100, "Ruins", size="ruins", population="0", government="none"),
        ],
    )


def _create_buildings_table() -> RandomTable:
    return RandomTable(
        table_id="buildings",
        name="Buildings",
        dice_expression="1d100",
        method=ResolutionMethod.PERCENTILE,
        category=TableCategory.LOCATIONS,
        entries=[
            # Residential
            _row(1, 10, "Hovel", type="residential", quality="poor"),
            _row(11, 20, "House, average", type="residential", quality="average"),
            _row(21, 25, "House, good", type="residential", quality="good"),
            _row(26, 30, "Manor house", type="residential", quality="excellent"),
            # Commercial
            _row(31, 35, "Tavern", type="commercial", services=["food", "drink", "lodging"]),
            _row(36, 40, "Inn", type="commercial", services=["lodging", "food", "stables"]),
            _row(41, 45, "General Store", type="commercial", services=["goods"]),
            _row(46, 50, "Blacksmith", type="commercial", services=["weapons", "armor", "tools"]),
            _row(51, 55, "Alchemist", type="commercial", services=["potions", "components"]),
            _row(56, 60, "Temple", type="religious", services=["healing", "divination"]),
            # Special
            _row(61, 70, "Warehouse", type="storage", contents="trade goods"),
            _row(71, 80, "Guard post", type="military", occupants="2d4 guards"),
            _row(81, 85, "Wizard's tower", type="special", occupants="wizard"),
            _row(86, 90, "Noble's villa", type="residential", quality="luxury"),
            _row(91, 95, "Guildhall", type="special", services=["training", "information"]),
            _row(96, 100, "Ruins", type="abandoned", hazards="possible"),
        ],
    )


def _create_weather_table() -> RandomTable:
    return RandomTable(
        table_id="weather",
        name="Weather",
        dice_expression="1d100",
        method=ResolutionMethod.PERCENTILE,
        category=TableCategory.ENVIRONMENT,
        entries=[
            _row(1, 70, "Clear", temperature="normal", wind="light", precipitation="none"),
            _row(71, 80, "Overcast", temperature="normal", wind="light", precipitation="none"),
            _row(81, 85, "Fog", temperature="cool", wind="calm", visibility="limited"),
            _row(86, 90, "Rain", temperature="cool", wind="moderate", precipitation="rain"),
            _row(91, 95, "Storm", temperature="cool", wind="strong", precipitation="heavy rain"),
            _row(96, 98, "Blizzard", temperature="cold", wind="severe", precipitation="heavy snow"),
            _row(99, 100, "Hurricane", temperature="normal", wind="windstorm", precipitation="torrential"),
        ],
    )


def _create_terrain_table() -> RandomTable:
    return RandomTable(
        table_id="terrain",
        name="Terrain Features",
        dice_expression="1d20",
        method=ResolutionMethod.STANDARD,
        category=TableCategory.ENVIRONMENT,
        entries=[
            _row(1, 3, "Hills", movement="difficult", cover="partial"),
            _row(4, 6, "Forest", movement="difficult", cover="heavy", visibility="limited"),
            _row(7, 9, "Plains", movement="normal", cover="none", visibility="excellent"),
            _row(10, 12, "River", movement="special", hazards="drowning", width="2d6x10 feet"),
            _row(13, 15, "Mountains", movement="difficult", cover="heavy", hazards="falling"),
            _row(16, 17, "Swamp", movement="difficult", hazards="disease", visibility="limited"),
            _row(18, 19, "Desert", movement="normal", hazards="heat", water="scarce"),
            _row(20, 20, "Chasm", movement="impassable", hazards="falling", depth="2d6x10 feet"),
        ],
    )


# =============================================================================
# DUNGEONS
# =============================================================================


def _create_dungeon_rooms_table() -> RandomTable:
    return RandomTable(
        table_id="dungeonRooms",
        name="Dungeon Rooms",
        dice_expression="1d100",
        method=ResolutionMethod.PERCENTILE,
        category=TableCategory.DUNGEONS,
        entries=[
            _row(1, 12, "Empty Room", contents="none", size="small"),
            _row(13, 20, "Empty Room", contents="none", size="medium"),
            _row(21, 30, "Monster", dice="1d4", encounter=True, type="random"),
            _row(31, 40, "Monster with Treasure", encounter=True, treasure=True),
            _row(41, 50, "Undead", encounter=True, type="undead"),
            _row(51, 60, "Vermin Nest", encounter=True, type="vermin", number="2d6"),
            _row(61, 65, "Armory", contents="weapons and armor", state="varies"),
            _row(66, 70, "Library", contents="books and scrolls", knowledge="possible"),
            _row(71, 75, "Laboratory", contents="alchemical supplies", hazards="possible"),
            _row(76, 80, "Temple/Shrine", contents="religious items", blessing="possible"),
            _row(81, 85, "Tomb", contents="sarcophagus", undead="likely", treasure="possible"),
            _row(86, 90, "Trap", trap=True, type="mechanical"),
            _row(91, 95, "Magic Trap", trap=True, type="magical"),
            _row(96, 98, "Treasure Room", treasure=True, guardian="possible"),
            _row(99, 100, "Portal/Gate", type="magical transport", destination="unknown"),
        ],
    )


def _create_traps_table() -> RandomTable:
    return RandomTable(
        table_id="traps",
        name="Traps",
        dice_expression="1d20",
        method=ResolutionMethod.STANDARD,
        category=TableCategory.DUNGEONS,
        entries=[
            _row(1, 3, "Pit Trap", damage="1d6", save="Reflex DC 15", cr=1),
            _row(4, 6, "Spiked Pit", damage="2d6", save="Reflex DC 20", cr=2),
            _row(7, 9, "Poison Needle", damage="poison", save="Reflex DC 17", cr=2),
            _row(10, 12, "Crossbow Bolt", damage="1d8+1", save="Reflex DC 20", cr=1),
            _row(13, 15, "Crushing Wall", damage="6d6", save="Reflex DC 25", cr=5),
            _row(16, 17, "Lightning Bolt", damage="5d6", save="Reflex DC 16", cr=3),
            _row(18, 19, "Fireball", damage="6d6", save="Reflex DC 16", cr=4),
            _row(20, 20, "Teleportation Circle", effect="teleport", save="Will DC 19", cr=6),
        ],
    )


def _create_adventure_hooks_table() -> RandomTable:
    return RandomTable(
        table_id="adventureHooks",
        name="Adventure Hooks",
        dice_expression="1d100",
        method=ResolutionMethod.PERCENTILE,
        category=TableCategory.ADVENTURES,
        description="Adventure seeds that pull in settlements, terrain and encounters",
        entries=[
            # Rescue
            _row(1, 5, "Missing person needs rescue from [ROLL:1d4] (1=bandits, 2=monsters, 3=cultists, 4=rival)",
                 type="rescue"),
            _row(6, 10, "Kidnapped noble's child held for ransom in [TABLE:settlements]",
                 type="rescue", reward="high"),
            _row(11, 15, "Merchant caravan overdue, last seen near [TABLE:terrain]", type="rescue"),
            _row(16, 20, "Village elder trapped in ancient ruins by magical ward", type="rescue"),
            # Investigation
            _row(21, 25, "Mysterious murders plague [TABLE:settlements], suspect is [ROLL:1d6] "
                         "(1-2=cultist, 3-4=monster, 5-6=possessed)", type="mystery"),
            _row(26, 30, "Ancient artifact stolen from museum/temple, thieves fled to [TABLE:dungeonRooms]",
                 type="mystery"),
            _row(31, 35, "Strange lights seen in abandoned [TABLE:buildings], locals fear supernatural cause",
                 type="mystery"),
            _row(36, 40, "Livestock disappearing near forest, tracks lead to unknown creature", type="mystery"),
            # Exploration
            _row(41, 45, "Newly discovered dungeon entrance found after [TABLE:weather] revealed hidden door",
                 type="exploration"),
            _row(46, 50, "Map to lost treasure vault discovered in old [TABLE:magicItems], authenticity unknown",
                 type="exploration"),
            _row(51, 55, "Portal to unknown plane opens in [TABLE:terrain], magical energies attract monsters",
                 type="exploration"),
            _row(56, 60, "Ancient tower appears overnight in [TABLE:settlements], locals fear magic",
                 type="exploration"),
            # Protection
            _row(61, 65, "Bandits threaten trade route, [TABLE:settlements] offers reward for clearing path",
                 type="protection"),
            _row(66, 70, "Monster attacks threaten [TABLE:settlements], survivors report [TABLE:encounters]",
                 type="protection"),
            _row(71, 75, "Cult plans ritual sacrifice during next full moon, must be stopped before completion",
                 type="protection"),
            # Delivery
            _row(76, 80, "Important message must reach [TABLE:settlements] before enemy forces arrive",
                 type="delivery", urgent=True),
            _row(81, 85, "Sacred relic needs transport to distant temple through dangerous [TABLE:terrain]",
                 type="delivery"),
            # Political
            _row(86, 90, "Border dispute between [TABLE:settlements] and neighboring realm, mediation needed",
                 type="diplomatic"),
            _row(91, 95, "Succession crisis in [TABLE:settlements] as rightful heir has disappeared",
                 type="political"),
            # Epic
            _row(96, 98, "Ancient evil stirs beneath [TABLE:settlements], only legendary [TABLE:magicItems] "
                         "can stop it", type="epic"),
            _row(99, 100, "Planar convergence threatens reality itself, heroes must close rifts across "
                          "multiple planes", type="epic"),
        ],
    )


# =============================================================================
# NPCS
# =============================================================================


def _create_npc_personalities_table() -> RandomTable:
    return RandomTable(
        table_id="npcPersonalities",
        name="NPC Personalities",
        dice_expression="1d100",
        method=ResolutionMethod.PERCENTILE,
        category=TableCategory.NPCS,
        entries=[
            # Positive
            _row(1, 5, "Brave and courageous", modifier="fearless"),
            _row(6, 10, "Honest and trustworthy", modifier="reliable"),
            _row(11, 15, "Wise and insightful", modifier="good advice"),
            _row(16, 20, "Cheerful and optimistic", modifier="morale boost"),
            _row(21, 25, "Generous and kind", modifier="helpful"),
            _row(26, 30, "Scholarly and knowledgeable", modifier="information"),
            _row(31, 35, "Patient and understanding", modifier="good listener"),
            _row(36, 40, "Loyal and devoted", modifier="steadfast ally"),
            # Neutral
            _row(41, 45, "Curious and inquisitive", modifier="asks questions"),
            _row(46, 50, "Cautious and careful", modifier="risk averse"),
            _row(51, 55, "Ambitious and driven", modifier="goal focused"),
            _row(56, 60, "Reserved and quiet", modifier="speaks little"),
            # Negative
            _row(61, 65, "Greedy and selfish", modifier="wants payment"),
            _row(66, 70, "Cowardly and fearful", modifier="flees danger"),
            _row(71, 75, "Arrogant and prideful", modifier="condescending"),
            _row(76, 80, "Suspicious and paranoid", modifier="trusts no one"),
            _row(81, 85, "Hot-tempered and rash", modifier="quick to anger"),
            _row(86, 90, "Lazy and unmotivated", modifier="avoids work"),
            _row(91, 95, "Dishonest and deceitful", modifier="lies frequently"),
            _row(96, 100, "Cruel and vindictive", modifier="seeks revenge"),
        ],
    )


def _create_motivations_table() -> RandomTable:
    return RandomTable(
        table_id="motivations",
        name="NPC Motivations",
        dice_expression="1d20",
        method=ResolutionMethod.STANDARD,
        category=TableCategory.NPCS,
        entries=[
            _row(1, 2, "Seeking wealth and riches", type="material"),
            _row(3, 4, "Protecting family and loved ones", type="personal"),
            _row(5, 6, "Gaining power and influence", type="political"),
            _row(7, 8, "Pursuing knowledge and truth", type="intellectual"),
            _row(9, 10, "Seeking redemption for past sins", type="spiritual"),
            _row(11, 12, "Proving worth and capability", type="personal"),
            _row(13, 14, "Avenging a great wrong", type="emotional"),
            _row(15, 16, "Following religious calling", type="spiritual"),
            _row(17, 18, "Escaping a dark past", type="personal"),
            _row(19, 20, "Fulfilling ancient prophecy", type="mystical"),
        ],
    )


def _create_quirks_table() -> RandomTable:
    return RandomTable(
        table_id="quirks",
        name="NPC Quirks",
        dice_expression="1d100",
        method=ResolutionMethod.PERCENTILE,
        category=TableCategory.NPCS,
        entries=[
            # Physical
            _row(1, 5, "Always adjusts clothing nervously", type="physical"),
            _row(6, 10, "Taps fingers when thinking", type="physical"),
            _row(11, 15, "Squints even in normal light", type="physical"),
            _row(16, 20, "Walks with unusual gait", type="physical"),
            _row(21, 25, "Constantly fidgets with objects", type="physical"),
            _row(26, 30, "Makes odd facial expressions", type="physical"),
            # Speech
            _row(31, 35, "Speaks in rhymes when excited", type="speech"),
            _row(36, 40, "Uses elaborate metaphors", type="speech"),
            _row(41, 45, "Constantly quotes old sayings", type="speech"),
            _row(46, 50, "Repeats important words twice", type="speech"),
            _row(51, 55, "Whispers secrets loudly", type="speech"),
            _row(56, 60, "Changes topic mid-conversation", type="speech"),
            # Behavioral
            _row(61, 65, "Collects unusual objects", type="behavioral"),
            _row(66, 70, "Always sits in same spot", type="behavioral"),
            _row(71, 75, "Suspicious of left-handed people", type="behavioral"),
            _row(76, 80, "Lucky charm never leaves side", type="behavioral"),
            _row(81, 85, "Counts things obsessively", type="behavioral"),
            _row(86, 90, "Refuses certain foods", type="behavioral"),
            # Unusual
            _row(91, 95, "Claims to speak with animals", type="unusual"),
            _row(96, 98, "Believes in conspiracy theories", type="unusual"),
            _row(99, 100, "Thinks everyone is related to them", type="unusual"),
        ],
    )


def _create_npc_attitudes_table() -> RandomTable:
    """Starting attitude toward the party; indifference is most common."""
    return RandomTable(
        table_id="npcAttitudes",
        name="NPC Attitudes",
        dice_expression="1d10",
        method=ResolutionMethod.WEIGHTED,
        category=TableCategory.NPCS,
        entries=[
            TableEntry("Hostile", weight=1, attributes={"diplomacy_dc": 25}),
            TableEntry("Unfriendly", weight=2, attributes={"diplomacy_dc": 20}),
            TableEntry("Indifferent", weight=4, attributes={"diplomacy_dc": 15}),
            TableEntry("Friendly", weight=2, attributes={"diplomacy_dc": 10}),
            TableEntry("Helpful", weight=1, attributes={"diplomacy_dc": 0}),
        ],
    )


def create_dnd_tables() -> list[RandomTable]:
    """All core tables, in registration order."""
    names = _create_character_names_table()
    return [
        names,
        _create_names_by_race_table(names),
        _create_surnames_table(),
        _create_encounters_table(),
        _create_animals_table(),
        _create_humanoids_table(),
        _create_environment_encounters_table(),
        _create_encounter_scale_table(),
        _create_treasures_table(),
        _create_magic_items_table(),
        _create_gems_table(),
        _create_mundane_items_table(),
        _create_settlements_table(),
        _create_buildings_table(),
        _create_weather_table(),
        _create_terrain_table(),
        _create_dungeon_rooms_table(),
        _create_traps_table(),
        _create_adventure_hooks_table(),
        _create_npc_personalities_table(),
        _create_motivations_table(),
        _create_quirks_table(),
        _create_npc_attitudes_table(),
    ]
