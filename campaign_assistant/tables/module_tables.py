"""
Categorised random table library.

Character generation, NPCs, locations, plot development, encounters,
treasure and environment. Every table here is a range-based table whose
rows carry a result and an optional description.
"""

from typing import Sequence

from campaign_assistant.tables.table_types import (
    RandomTable,
    ResolutionMethod,
    TableCategory,
    TableEntry,
)


def _ranged_table(
    table_id: str,
    name: str,
    dice_expression: str,
    category: TableCategory,
    description: str,
    rows: Sequence[tuple],
) -> RandomTable:
    """Build a table from (min, max, result[, description]) rows."""
    method = ResolutionMethod.PERCENTILE if dice_expression == "1d100" else ResolutionMethod.STANDARD
    entries = []
    for row in rows:
        attributes = {"description": row[3]} if len(row) > 3 else {}
        entries.append(TableEntry(text=row[2], roll_min=row[0], roll_max=row[1], attributes=attributes))
    return RandomTable(
        table_id=table_id,
        name=name,
        dice_expression=dice_expression,
        method=method,
        entries=entries,
        category=category,
        description=description,
    )


def _character_generation_tables() -> list[RandomTable]:
    return [
        _ranged_table(
            "ability-score-generation",
            "Ability Score Generation Methods",
            "1d6",
            TableCategory.CHARACTER_GENERATION,
            "Different methods for generating character ability scores",
            [
                (1, 1, "4d6 drop lowest", "Roll 4d6, drop the lowest die"),
                (2, 2, "3d6 straight", "Roll 3d6 for each ability in order"),
                (3, 3, "Point buy (25 points)", "Distribute 25 points among abilities"),
                (4, 4, "Point buy (32 points)", "Distribute 32 points among abilities"),
                (5, 5, "4d6 drop lowest, arrange", "Roll 4d6dl1 six times, arrange as desired"),
                (6, 6, "2d6+6", "Roll 2d6+6 for each ability score"),
            ],
        ),
        _ranged_table(
            "character-quirks",
            "Character Personality Quirks",
            "1d100",
            TableCategory.CHARACTER_GENERATION,
            "Random personality traits and mannerisms for characters",
            [
                (1, 5, "Always speaks in rhyme when nervous"),
                (6, 10, "Constantly fidgets with a lucky charm"),
                (11, 15, "Has an irrational fear of birds"),
                (16, 20, "Collects unusual stones or pebbles"),
                (21, 25, "Never sits with back to a door"),
                (26, 30, "Hums old tavern songs while working"),
                (31, 35, "Always counts things in groups of three"),
                (36, 40, "Speaks to animals as if they understand"),
                (41, 45, "Refuses to eat meat on certain days"),
                (46, 50, "Draws small sketches when thinking"),
                (51, 55, "Always knows which way is north"),
                (56, 60, "Tells elaborate lies about mundane things"),
                (61, 65, "Cannot sleep unless facing east"),
                (66, 70, "Compulsively organizes everything"),
                (71, 75, "Speaks in third person when stressed"),
                (76, 80, "Has an encyclopedic knowledge of local gossip"),
                (81, 85, "Always wears mismatched socks"),
                (86, 90, "Insists on paying for everything with exact change"),
                (91, 95, "Remembers everyone's birthday but forgets names"),
                (96, 100, "Believes their shadow is a separate entity"),
            ],
        ),
        _ranged_table(
            "character-backgrounds",
            "Character Background Elements",
            "1d20",
            TableCategory.CHARACTER_GENERATION,
            "Random background elements to flesh out character history",
            [
                (1, 1, "Grew up in a traveling circus"),
                (2, 2, "Apprenticed to a famous artisan"),
                (3, 3, "Survived a major disaster"),
                (4, 4, "Raised by religious order"),
                (5, 5, "Noble family fallen from grace"),
                (6, 6, "Street orphan turned scholar"),
                (7, 7, "Former soldier seeking redemption"),
                (8, 8, "Merchant family with dark secrets"),
                (9, 9, "Lost memory of early childhood"),
                (10, 10, "Prophesied to fulfill ancient destiny"),
                (11, 11, "Descendant of legendary hero"),
                (12, 12, "Marked by divine intervention"),
                (13, 13, "Survivor of magical experiment"),
                (14, 14, "Former criminal seeking new life"),
                (15, 15, "Wilderness hermit returned to society"),
                (16, 16, "Court entertainer with hidden talents"),
                (17, 17, "Sailor from distant foreign lands"),
                (18, 18, "Academic prodigy seeking field experience"),
                (19, 19, "Haunted by vengeful spirit"),
                (20, 20, "Bearer of cursed family bloodline"),
            ],
        ),
    ]


def _npc_tables() -> list[RandomTable]:
    return [
        _ranged_table(
            "npc-names",
            "Random NPC Names",
            "1d100",
            TableCategory.NPCS,
            "Quick names for NPCs the party encounters",
            [
                (1, 5, "Aldric Stonehammer", "Human male blacksmith"),
                (6, 10, "Lyra Nightwhisper", "Elven female ranger"),
                (11, 15, "Thorin Goldbeard", "Dwarven male merchant"),
                (16, 20, "Aria Swiftarrow", "Human female archer"),
                (21, 25, "Bren Ironfoot", "Dwarven male guard"),
                (26, 30, "Celeste Moonweaver", "Elven female mage"),
                (31, 35, "Gareth Strongarm", "Human male warrior"),
                (36, 40, "Mira Lightfinger", "Halfling female thief"),
                (41, 45, "Thane Stormcrow", "Human male cleric"),
                (46, 50, "Zara Flametouch", "Tiefling female sorcerer"),
                (51, 55, "Pip Goodbarrel", "Halfling male innkeeper"),
                (56, 60, "Raven Blackthorn", "Human female assassin"),
                (61, 65, "Magnus Spellwright", "Human male wizard"),
                (66, 70, "Ivy Greenthumb", "Human female druid"),
                (71, 75, "Drake Shadowbane", "Human male paladin"),
                (76, 80, "Luna Stargazer", "Elven female oracle"),
                (81, 85, "Rex Ironwill", "Human male captain"),
                (86, 90, "Sage Whisperwind", "Elven male sage"),
                (91, 95, "Ruby Brightblade", "Human female knight"),
                (96, 100, "Void the Nameless", "Mysterious hooded figure"),
            ],
        ),
        _ranged_table(
            "npc-motivations",
            "NPC Motivations",
            "1d20",
            TableCategory.NPCS,
            "What drives this NPC and their goals",
            [
                (1, 1, "Seeking revenge against old enemy"),
                (2, 2, "Protecting family or loved ones"),
                (3, 3, "Accumulating wealth and power"),
                (4, 4, "Uncovering ancient secrets"),
                (5, 5, "Proving worth to society"),
                (6, 6, "Redemption for past mistakes"),
                (7, 7, "Finding lost family member"),
                (8, 8, "Serving divine purpose"),
                (9, 9, "Escaping troubled past"),
                (10, 10, "Gaining recognition and fame"),
                (11, 11, "Preserving ancient knowledge"),
                (12, 12, "Building lasting legacy"),
                (13, 13, "Overcoming personal fears"),
                (14, 14, "Mastering specific skill or art"),
                (15, 15, "Fulfilling prophetic destiny"),
                (16, 16, "Restoring family honor"),
                (17, 17, "Defeating specific monster"),
                (18, 18, "Finding rare magical artifact"),
                (19, 19, "Saving homeland from threat"),
                (20, 20, "Ascending to divine status"),
            ],
        ),
        _ranged_table(
            "npc-occupations",
            "NPC Occupations",
            "1d100",
            TableCategory.NPCS,
            "Random professions and jobs for NPCs",
            [
                (1, 5, "Blacksmith"),
                (6, 10, "Innkeeper"),
                (11, 15, "Merchant"),
                (16, 20, "Guard Captain"),
                (21, 25, "Scholar"),
                (26, 30, "Priest/Cleric"),
                (31, 35, "Farmer"),
                (36, 40, "Bard/Entertainer"),
                (41, 45, "Healer/Herbalist"),
                (46, 50, "Ship Captain"),
                (51, 55, "Noble/Aristocrat"),
                (56, 60, "Thieves' Guild Member"),
                (61, 65, "Wizard/Mage"),
                (66, 70, "Craftsperson"),
                (71, 75, "Caravan Master"),
                (76, 80, "Town Official"),
                (81, 85, "Adventurer (Retired)"),
                (86, 90, "Spy/Information Broker"),
                (91, 95, "Cult Leader"),
                (96, 100, "Mysterious Wanderer"),
            ],
        ),
        _ranged_table(
            "npc-secrets",
            "NPC Secrets",
            "1d20",
            TableCategory.NPCS,
            "Hidden secrets that NPCs might be keeping",
            [
                (1, 1, "Is secretly working for the enemy"),
                (2, 2, "Has a hidden magical ability"),
                (3, 3, "Is not who they claim to be"),
                (4, 4, "Owes a dangerous debt"),
                (5, 5, "Is cursed or under a spell"),
                (6, 6, "Has a twin or doppelganger"),
                (7, 7, "Is secretly nobility in hiding"),
                (8, 8, "Has committed a serious crime"),
                (9, 9, "Knows the location of treasure"),
                (10, 10, "Is being blackmailed"),
                (11, 11, "Has a terminal illness"),
                (12, 12, "Is part of a secret organization"),
                (13, 13, "Has prophetic visions"),
                (14, 14, "Is protecting someone important"),
                (15, 15, "Has access to forbidden knowledge"),
                (16, 16, "Is actually much older than they appear"),
                (17, 17, "Has a secret romantic relationship"),
                (18, 18, "Is planning to disappear soon"),
                (19, 19, "Possesses a powerful magical item"),
                (20, 20, "Is not entirely human"),
            ],
        ),
    ]


def _location_tables() -> list[RandomTable]:
    return [
        _ranged_table(
            "tavern-names",
            "Tavern Names",
            "1d100",
            TableCategory.LOCATIONS,
            "Random names for taverns, inns, and drinking establishments",
            [
                (1, 5, "The Prancing Pony"),
                (6, 10, "The Golden Griffin"),
                (11, 15, "The Rusty Anchor"),
                (16, 20, "The Dancing Dragon"),
                (21, 25, "The Silver Stag"),
                (26, 30, "The Broken Wheel"),
                (31, 35, "The Laughing Maiden"),
                (36, 40, "The Weary Traveler"),
                (41, 45, "The Black Boar"),
                (46, 50, "The Crooked Crown"),
                (51, 55, "The Drunken Dwarf"),
                (56, 60, "The Red Rose Inn"),
                (61, 65, "The Howling Wolf"),
                (66, 70, "The Green Goblet"),
                (71, 75, "The Sleeping Giant"),
                (76, 80, "The Mermaid's Rest"),
                (81, 85, "The Copper Cauldron"),
                (86, 90, "The Wanderer's Welcome"),
                (91, 95, "The Moonlit Manor"),
                (96, 100, "The Dragon's Den"),
            ],
        ),
        _ranged_table(
            "dungeon-rooms",
            "Dungeon Room Contents",
            "1d20",
            TableCategory.LOCATIONS,
            "What the party finds when they enter a dungeon room",
            [
                (1, 2, "Empty room with strange echoes"),
                (3, 4, "Monster lair with treasure hoard"),
                (5, 6, "Trapped corridor with pressure plates"),
                (7, 8, "Ancient library with crumbling books"),
                (9, 10, "Flooded chamber with murky water"),
                (11, 12, "Magical laboratory with bubbling potions"),
                (13, 14, "Prison cells with mysterious prisoners"),
                (15, 16, "Shrine to forgotten deity"),
                (17, 17, "Armory filled with ancient weapons"),
                (18, 18, "Puzzle room with riddles and mechanisms"),
                (19, 19, "Teleportation circle to unknown location"),
                (20, 20, "Dragon's sleeping chamber"),
            ],
        ),
        _ranged_table(
            "shop-names",
            "Shop Names",
            "1d100",
            TableCategory.LOCATIONS,
            "Random names for shops and businesses",
            [
                (1, 5, "The Golden Hammer Smithy"),
                (6, 10, "Moonbeam's Magical Emporium"),
                (11, 15, "The Dusty Tome Bookshop"),
                (16, 20, "Silver Thread Tailoring"),
                (21, 25, "The Rusty Blade Weaponry"),
                (26, 30, "Crimson Rose Apothecary"),
                (31, 35, "The Wanderer's Pack Trading Post"),
                (36, 40, "Brightforge Armaments"),
                (41, 45, "The Curious Cat Curiosities"),
                (46, 50, "Starlight Jewelry & Gems"),
                (51, 55, "The Iron Horse Stables"),
                (56, 60, "Greenleaf Herbalism"),
                (61, 65, "The Singing Lute Music Shop"),
                (66, 70, "Cobblestone Shoe Repairs"),
                (71, 75, "The Mage's Tower Supplies"),
                (76, 80, "Dragonscale Exotic Goods"),
                (81, 85, "The Clockwork Workshop"),
                (86, 90, "Shadowmere Imports"),
                (91, 95, "The Phoenix Feather Fine Goods"),
                (96, 100, "Voidwalker's Mysterious Wares"),
            ],
        ),
        _ranged_table(
            "settlement-features",
            "Settlement Features",
            "1d20",
            TableCategory.LOCATIONS,
            "Notable features and landmarks in towns and cities",
            [
                (1, 1, "Ancient statue in the town square"),
                (2, 2, "Covered bridge over a rushing river"),
                (3, 3, "Tall watchtower with warning bells"),
                (4, 4, "Public fountain with fresh spring water"),
                (5, 5, "Market square with colorful stalls"),
                (6, 6, "Temple with distinctive architecture"),
                (7, 7, "Academy or school of learning"),
                (8, 8, "Guildhall for local craftspeople"),
                (9, 9, "Defensive wall with sturdy gates"),
                (10, 10, "Harbor with merchant vessels"),
                (11, 11, "Grand library open to the public"),
                (12, 12, "Theatre for performances and plays"),
                (13, 13, "Arena for contests and competitions"),
                (14, 14, "Maze-like old quarter with narrow streets"),
                (15, 15, "Cemetery with elaborate monuments"),
                (16, 16, "Mill powered by water or wind"),
                (17, 17, "Magical light posts throughout streets"),
                (18, 18, "Underground tunnel system"),
                (19, 19, "Floating district held aloft by magic"),
                (20, 20, "Portal gate to another location"),
            ],
        ),
    ]


def _plot_development_tables() -> list[RandomTable]:
    return [
        _ranged_table(
            "adventure-hooks",
            "Adventure Plot Hooks",
            "1d12",
            TableCategory.PLOT_DEVELOPMENT,
            "Story seeds to start new adventures",
            [
                (1, 1, "Ancient tomb has been unsealed, releasing unknown dangers"),
                (2, 2, "Local children are disappearing near the old forest"),
                (3, 3, "Merchant caravan needs protection through dangerous territory"),
                (4, 4, "Strange plague affects only magic users in the city"),
                (5, 5, "Dragon has claimed local mountain, demanding tribute"),
                (6, 6, "Rival adventuring party seeks same artifact as heroes"),
                (7, 7, "Cult is performing ritual to summon extraplanar entity"),
                (8, 8, "Noble's heir has been replaced by doppelganger"),
                (9, 9, "Magic academy students have unleashed dangerous experiment"),
                (10, 10, "Pirates have established base threatening trade routes"),
                (11, 11, "Ancient prophecy suggests heroes are key to preventing disaster"),
                (12, 12, "Gods themselves seek mortal agents for cosmic conflict"),
            ],
        ),
        _ranged_table(
            "complications",
            "Adventure Complications",
            "1d10",
            TableCategory.PLOT_DEVELOPMENT,
            "Things that make adventures more interesting",
            [
                (1, 1, "Important NPC has hidden agenda"),
                (2, 2, "Weather turns severe at worst possible moment"),
                (3, 3, "Key information was deliberately false"),
                (4, 4, "Local authority opposes heroes' mission"),
                (5, 5, "Required item is owned by former enemy"),
                (6, 6, "Time limit is shorter than originally thought"),
                (7, 7, "Innocent bystanders are in danger"),
                (8, 8, "Heroes' reputation precedes them negatively"),
                (9, 9, "Equipment failure at critical moment"),
                (10, 10, "Moral dilemma requires choosing between two goods"),
            ],
        ),
        _ranged_table(
            "story-twists",
            "Story Twists",
            "1d20",
            TableCategory.PLOT_DEVELOPMENT,
            "Unexpected revelations that change everything",
            [
                (1, 1, "The quest giver is actually the main villain"),
                (2, 2, "The artifact they seek doesn't exist"),
                (3, 3, "One party member is not who they claim to be"),
                (4, 4, "The heroes are actually in an alternate reality"),
                (5, 5, "The 'monster' they're hunting is innocent"),
                (6, 6, "The heroes' actions caused the problem they're solving"),
                (7, 7, "Time travel is involved somehow"),
                (8, 8, "The entire adventure was someone's dream or illusion"),
                (9, 9, "The heroes are descendants of their enemies"),
                (10, 10, "The world they know is ending soon"),
                (11, 11, "Magic is failing or changing fundamentally"),
                (12, 12, "The gods are not what mortals believe them to be"),
                (13, 13, "The heroes must become what they oppose"),
                (14, 14, "Every choice leads to the same inevitable outcome"),
                (15, 15, "The real treasure was friendship all along... or was it?"),
                (16, 16, "Death in this realm isn't permanent"),
                (17, 17, "The heroes are the reincarnation of ancient enemies"),
                (18, 18, "Everything happens in reverse order"),
                (19, 19, "The adventure takes place inside someone's mind"),
                (20, 20, "The heroes are fictional characters who gained sentience"),
            ],
        ),
        _ranged_table(
            "quest-objectives",
            "Quest Objectives",
            "1d20",
            TableCategory.PLOT_DEVELOPMENT,
            "Primary goals and missions for adventures",
            [
                (1, 1, "Retrieve a stolen artifact from bandits"),
                (2, 2, "Rescue kidnapped noble from monster lair"),
                (3, 3, "Escort important person through dangerous territory"),
                (4, 4, "Investigate mysterious disappearances in town"),
                (5, 5, "Stop ritual that will summon great evil"),
                (6, 6, "Find cure for magical plague"),
                (7, 7, "Negotiate peace between warring factions"),
                (8, 8, "Explore newly discovered ancient ruins"),
                (9, 9, "Defend settlement from incoming monster army"),
                (10, 10, "Gather rare components for powerful spell"),
                (11, 11, "Expose corruption in local government"),
                (12, 12, "Hunt down dangerous escaped prisoner"),
                (13, 13, "Deliver message to distant ally"),
                (14, 14, "Clear trade route of monster infestations"),
                (15, 15, "Locate entrance to legendary hidden city"),
                (16, 16, "Prevent assassination of important figure"),
                (17, 17, "Recover lost knowledge from abandoned library"),
                (18, 18, "Seal portal to prevent planar invasion"),
                (19, 19, "Unite scattered clues to solve ancient mystery"),
                (20, 20, "Confront and defeat legendary monster"),
            ],
        ),
        _ranged_table(
            "moral-dilemmas",
            "Moral Dilemmas",
            "1d12",
            TableCategory.PLOT_DEVELOPMENT,
            "Ethical challenges that test character values",
            [
                (1, 1, "Save many strangers or one beloved friend"),
                (2, 2, "Tell truth that will cause harm or lie to protect"),
                (3, 3, "Uphold law that is unjust or break it for justice"),
                (4, 4, "Use enemy's tactics to defeat greater evil"),
                (5, 5, "Sacrifice personal desires for greater good"),
                (6, 6, "Forgive unforgivable acts or seek righteous vengeance"),
                (7, 7, "Share resources equally or reward those who earned them"),
                (8, 8, "Preserve ancient tradition or embrace necessary change"),
                (9, 9, "Respect someone's wishes even if they're harmful"),
                (10, 10, "Take credit for another's work or let them be overlooked"),
                (11, 11, "End suffering through mercy killing or preserve life"),
                (12, 12, "Trust reformed enemy or remain suspicious"),
            ],
        ),
        _ranged_table(
            "quest-complication",
            "Quest Complications",
            "1d20",
            TableCategory.PLOT_DEVELOPMENT,
            "Unexpected obstacles that complicate ongoing adventures",
            [
                (1, 1, "Key ally is revealed as double agent"),
                (2, 2, "Important information was deliberately false"),
                (3, 3, "Rival adventuring party pursues same goal"),
                (4, 4, "Target has already been moved or hidden"),
                (5, 5, "Natural disaster blocks primary route"),
                (6, 6, "Local authorities declare party outlaws"),
                (7, 7, "Quest giver disappears under mysterious circumstances"),
                (8, 8, "Magical barrier prevents access to objective"),
                (9, 9, "Key NPC is captured by enemies"),
                (10, 10, "Resource depletion forces difficult choices"),
                (11, 11, "Time limit becomes more urgent than expected"),
                (12, 12, "Innocent bystanders become involved"),
                (13, 13, "Weather conditions severely hamper progress"),
                (14, 14, "Equipment failure at critical moment"),
                (15, 15, "Ancient curse activates due to party's actions"),
                (16, 16, "Political situation changes dramatically"),
                (17, 17, "Monster migration forces detour"),
                (18, 18, "Key location is under siege by hostile forces"),
                (19, 19, "Party member's past catches up with them"),
                (20, 20, "True objective was different than originally stated"),
            ],
        ),
        _ranged_table(
            "plot-twist",
            "Plot Twists",
            "1d20",
            TableCategory.PLOT_DEVELOPMENT,
            "Unexpected revelations that change adventure direction",
            [
                (1, 1, "Trusted ally has been working for the enemy all along"),
                (2, 2, "The villain is actually the party's patron in disguise"),
                (3, 3, "The artifact they seek is already in their possession"),
                (4, 4, "One party member is revealed to be of noble birth"),
                (5, 5, "The mission was a test set up by a secret organization"),
                (6, 6, "The real treasure was the friends they made along the way"),
                (7, 7, "The location they seek exists in multiple dimensions"),
                (8, 8, "The enemy they fight is their future self"),
                (9, 9, "The curse can only be broken by making things worse"),
                (10, 10, "The prophecy was deliberately mistranslated"),
                (11, 11, "The monster they hunt is protecting something innocent"),
                (12, 12, "Their actions have been fulfilling the villain's plan"),
                (13, 13, "The quest giver is already dead, replaced by illusion"),
                (14, 14, "Time loops have made this the same adventure repeatedly"),
                (15, 15, "The map they follow leads to a trap, not treasure"),
                (16, 16, "The party has been transported to alternate reality"),
                (17, 17, "Their memories of why they started have been altered"),
                (18, 18, "The solution requires sacrificing their greatest strength"),
                (19, 19, "The ancient evil was actually keeping worse evil contained"),
                (20, 20, "Victory will fulfill dark prophecy they tried to prevent"),
            ],
        ),
    ]


def _encounter_tables() -> list[RandomTable]:
    return [
        _ranged_table(
            "forest-encounters",
            "Forest Random Encounters",
            "1d12",
            TableCategory.ENCOUNTERS,
            "Random encounters for forest and woodland areas",
            [
                (1, 1, "Pack of wolves (2d4)", "Hungry wolves hunting for food"),
                (2, 2, "Lost merchant caravan", "Merchants need directions or protection"),
                (3, 3, "Bandit ambush (1d6+2 bandits)", "Bandits demand toll or valuables"),
                (4, 4, "Friendly druid and animal companion", "Druid offers forest knowledge"),
                (5, 5, "Ancient stone circle", "Mysterious druids' gathering place"),
                (6, 6, "Owlbear hunting party", "1d2 owlbears searching for prey"),
                (7, 7, "Elven patrol", "1d4+2 elves protecting the forest"),
                (8, 8, "Talking animals", "Awakened animals with quest or information"),
                (9, 9, "Treant grove", "Ancient treant offers wisdom or warning"),
                (10, 10, "Poacher's camp", "Illegal hunters with trapped animals"),
                (11, 11, "Fairy ring", "Portal to feywild or fey creatures"),
                (12, 12, "Ancient ruins", "Overgrown temple or tower with secrets"),
            ],
        ),
        _ranged_table(
            "urban-encounters",
            "Urban Random Encounters",
            "2d10",
            TableCategory.ENCOUNTERS,
            "Random encounters for cities and towns",
            [
                (2, 2, "Pickpocket attempt", "Skilled thief tries to steal from party"),
                (3, 4, "Street performer", "Bard or entertainer gathering crowd"),
                (5, 6, "City guard patrol", "Guards on routine patrol or investigation"),
                (7, 8, "Merchant with rare goods", "Traveling merchant with unusual items"),
                (9, 10, "Beggar with information", "Street person knows valuable secrets"),
                (11, 12, "Noble's procession", "Important person traveling through streets"),
                (13, 14, "Street fight", "Brawl between locals or gangs"),
                (15, 16, "Lost child", "Child needs help finding family"),
                (17, 18, "Cult recruitment", "Cultists trying to recruit new members"),
                (19, 19, "Assassin stalking party", "Professional killer following the group"),
                (20, 20, "Royal summons", "Official messenger with urgent request"),
            ],
        ),
        _ranged_table(
            "mountain-encounters",
            "Mountain Random Encounters",
            "1d20",
            TableCategory.ENCOUNTERS,
            "Random encounters for mountainous and highland areas",
            [
                (1, 2, "Rockslide blocks the path"),
                (3, 4, "Mountain goats on narrow ledge"),
                (5, 6, "Eagle or griffon nest nearby"),
                (7, 8, "Dwarven mining expedition"),
                (9, 10, "Hermit's cave dwelling"),
                (11, 12, "Ancient dwarven ruins"),
                (13, 14, "Orc or goblin war party"),
                (15, 16, "Avalanche warning signs"),
                (17, 17, "Dragon's lair entrance"),
                (18, 18, "Stone giant territory"),
                (19, 19, "Sacred mountain shrine"),
                (20, 20, "Portal to elemental plane of earth"),
            ],
        ),
        _ranged_table(
            "swamp-encounters",
            "Swamp Random Encounters",
            "1d12",
            TableCategory.ENCOUNTERS,
            "Random encounters for swamps, marshes, and wetlands",
            [
                (1, 1, "Crocodiles sunning on logs"),
                (2, 2, "Will-o'-wisps leading travelers astray"),
                (3, 3, "Lizardfolk hunting party"),
                (4, 4, "Witch's hut on stilts"),
                (5, 5, "Shambling mound guarding territory"),
                (6, 6, "Poisonous gas vents from bog"),
                (7, 7, "Black dragon's lair entrance"),
                (8, 8, "Quicksand trap with treasure"),
                (9, 9, "Plague-bearing insects swarm"),
                (10, 10, "Bullywug village on platforms"),
                (11, 11, "Ancient temple sinking into marsh"),
                (12, 12, "Hydra's multiple-headed silhouette"),
            ],
        ),
    ]


def _treasure_tables() -> list[RandomTable]:
    return [
        _ranged_table(
            "mundane-treasure",
            "Mundane Treasure",
            "1d20",
            TableCategory.TREASURE,
            "Common valuables and coin hoards",
            [
                (1, 3, "2d6 copper pieces"),
                (4, 6, "1d8 silver pieces"),
                (7, 9, "1d4 gold pieces"),
                (10, 11, "Precious gems worth 50gp"),
                (12, 13, "Silk cloth worth 25gp"),
                (14, 15, "Masterwork tools worth 100gp"),
                (16, 16, "Art object worth 250gp"),
                (17, 17, "Rare spices worth 75gp"),
                (18, 18, "Fine wine collection worth 150gp"),
                (19, 19, "Ancient coins worth 500gp"),
                (20, 20, "Royal jewelry worth 1000gp"),
            ],
        ),
        _ranged_table(
            "magic-items-minor",
            "Minor Magic Items",
            "1d100",
            TableCategory.TREASURE,
            "Lesser magical treasures and utility items",
            [
                (1, 10, "Potion of Healing", "Restores 2d4+2 hit points"),
                (11, 20, "Scroll of Magic Missile", "Casts magic missile spell"),
                (21, 30, "Ring of Protection +1", "+1 bonus to AC and saves"),
                (31, 40, "Cloak of Elvenkind", "+5 bonus to Hide checks"),
                (41, 50, "Bag of Holding", "Extradimensional storage space"),
                (51, 60, "Boots of Speed", "Double movement speed for 10 rounds"),
                (61, 70, "Wand of Magic Missile", "50 charges, 1d4+1 force damage"),
                (71, 80, "Amulet of Natural Armor +1", "+1 natural armor bonus"),
                (81, 90, "Gloves of Dexterity +2", "+2 enhancement to Dexterity"),
                (91, 100, "Headband of Intellect +2", "+2 enhancement to Intelligence"),
            ],
        ),
        _ranged_table(
            "gems-and-jewelry",
            "Gems and Jewelry",
            "1d20",
            TableCategory.TREASURE,
            "Precious stones and ornamental items",
            [
                (1, 2, "Rough gemstone (10gp value)"),
                (3, 4, "Polished agate (25gp value)"),
                (5, 6, "Small pearl (50gp value)"),
                (7, 8, "Garnet stone (100gp value)"),
                (9, 10, "Silver ring (75gp value)"),
                (11, 12, "Gold bracelet (150gp value)"),
                (13, 14, "Sapphire gem (250gp value)"),
                (15, 15, "Ruby gem (500gp value)"),
                (16, 16, "Emerald gem (750gp value)"),
                (17, 17, "Diamond gem (1000gp value)"),
                (18, 18, "Ornate crown (2500gp value)"),
                (19, 19, "Royal scepter (5000gp value)"),
                (20, 20, "Ancient royal regalia (10000gp value)"),
            ],
        ),
        _ranged_table(
            "art-objects",
            "Art Objects",
            "1d20",
            TableCategory.TREASURE,
            "Valuable artistic and cultural items",
            [
                (1, 2, "Carved bone figurine (25gp)"),
                (3, 4, "Small bronze statue (75gp)"),
                (5, 6, "Illuminated manuscript (150gp)"),
                (7, 8, "Fine silk tapestry (250gp)"),
                (9, 10, "Ornate silver chalice (400gp)"),
                (11, 12, "Masterwork painting (600gp)"),
                (13, 14, "Golden ceremonial mask (1000gp)"),
                (15, 15, "Jeweled musical instrument (1500gp)"),
                (16, 16, "Ancient ceremonial armor (2500gp)"),
                (17, 17, "Platinum religious icon (4000gp)"),
                (18, 18, "Legendary weapon replica (6000gp)"),
                (19, 19, "Royal family portrait (8000gp)"),
                (20, 20, "Priceless cultural artifact (15000gp)"),
            ],
        ),
        _ranged_table(
            "magic-weapons",
            "Magic Weapons",
            "1d20",
            TableCategory.TREASURE,
            "Enchanted weapons and armaments",
            [
                (1, 3, "+1 Dagger"),
                (4, 6, "+1 Shortsword"),
                (7, 9, "+1 Longsword"),
                (10, 11, "+1 Crossbow"),
                (12, 13, "+1 Warhammer"),
                (14, 15, "Flaming Longsword (+1, 1d6 fire damage)"),
                (16, 16, "Frost Brand (+1, 1d6 cold damage)"),
                (17, 17, "Shocking Weapon (+1, 1d6 electricity damage)"),
                (18, 18, "Keen Rapier (+1, 19-20 critical threat)"),
                (19, 19, "Holy Avenger (+2, extra damage vs evil)"),
                (20, 20, "Vorpal Blade (+3, chance to sever head)"),
            ],
        ),
    ]


def _environment_tables() -> list[RandomTable]:
    return [
        _ranged_table(
            "weather-conditions",
            "Weather Conditions",
            "2d6",
            TableCategory.ENVIRONMENT,
            "Random weather for outdoor adventures",
            [
                (2, 2, "Severe storm", "Heavy rain, strong winds, possible lightning"),
                (3, 4, "Rain", "Steady rainfall, muddy conditions"),
                (5, 6, "Overcast", "Cloudy skies, no precipitation"),
                (7, 8, "Clear", "Pleasant weather, good visibility"),
                (9, 10, "Partly cloudy", "Some clouds, mostly pleasant"),
                (11, 11, "Fog", "Heavy mist reduces visibility"),
                (12, 12, "Extreme weather", "Blizzard, hurricane, or supernatural weather"),
            ],
        ),
        _ranged_table(
            "random-events",
            "Random Events",
            "1d20",
            TableCategory.ENVIRONMENT,
            "Unexpected events during travel or downtime",
            [
                (1, 2, "Festival or celebration in nearby settlement"),
                (3, 4, "Messenger arrives with urgent news"),
                (5, 6, "Strange lights appear in the sky"),
                (7, 8, "Local wildlife acts unusually"),
                (9, 10, "Old friend or ally appears unexpectedly"),
                (11, 12, "Merchant offers rare trade opportunity"),
                (13, 14, "Natural disaster threatens area"),
                (15, 16, "Mysterious stranger asks for help"),
                (17, 18, "Evidence of recent magical activity"),
                (19, 19, "Portal to another plane opens nearby"),
                (20, 20, "Time loop or temporal anomaly occurs"),
            ],
        ),
        _ranged_table(
            "seasonal-events",
            "Seasonal Events",
            "1d12",
            TableCategory.ENVIRONMENT,
            "Events tied to specific seasons and times of year",
            [
                (1, 1, "Spring: Flowers bloom with magical properties"),
                (2, 2, "Spring: Migratory creatures return en masse"),
                (3, 3, "Spring: Rivers flood from melting snow"),
                (4, 4, "Summer: Drought affects water sources"),
                (5, 5, "Summer: Forest fires threaten settlements"),
                (6, 6, "Summer: Excessive heat causes strange phenomena"),
                (7, 7, "Autumn: Harvest festivals celebrate abundance"),
                (8, 8, "Autumn: Leaves fall in unnatural patterns"),
                (9, 9, "Autumn: Animals prepare for harsh winter"),
                (10, 10, "Winter: Blizzards isolate communities"),
                (11, 11, "Winter: Ice creates treacherous conditions"),
                (12, 12, "Winter: Aurora displays hint at magical activity"),
            ],
        ),
        _ranged_table(
            "natural-disasters",
            "Natural Disasters",
            "1d10",
            TableCategory.ENVIRONMENT,
            "Major environmental catastrophes and their effects",
            [
                (1, 1, "Earthquake splits the ground, revealing hidden caves"),
                (2, 2, "Volcanic eruption threatens entire region"),
                (3, 3, "Massive flood changes landscape permanently"),
                (4, 4, "Tornado destroys everything in its path"),
                (5, 5, "Wildfire spreads rapidly through dry terrain"),
                (6, 6, "Avalanche buries mountain paths"),
                (7, 7, "Sinkhole opens, swallowing nearby structures"),
                (8, 8, "Meteor impact creates new crater lake"),
                (9, 9, "Magical storm with unpredictable effects"),
                (10, 10, "Planar rift causes reality distortions"),
            ],
        ),
        _ranged_table(
            "atmospheric-phenomena",
            "Atmospheric Phenomena",
            "1d20",
            TableCategory.ENVIRONMENT,
            "Unusual weather and sky events",
            [
                (1, 2, "Double rainbow after sudden storm"),
                (3, 4, "Blood red sunset that lasts for hours"),
                (5, 6, "Green lightning with no thunder"),
                (7, 8, "Hail shaped like geometric patterns"),
                (9, 10, "Snow that falls upward into the sky"),
                (11, 12, "Clouds that form recognizable shapes"),
                (13, 14, "Rain that changes color as it falls"),
                (15, 16, "Wind that whispers in ancient languages"),
                (17, 17, "Aurora visible during daylight hours"),
                (18, 18, "Two suns appear in the sky simultaneously"),
                (19, 19, "Stars visible despite bright daylight"),
                (20, 20, "Sky appears as if made of crystalline glass"),
            ],
        ),
    ]


def create_module_tables() -> list[RandomTable]:
    """Every table in the categorised library."""
    return [
        *_character_generation_tables(),
        *_npc_tables(),
        *_location_tables(),
        *_plot_development_tables(),
        *_encounter_tables(),
        *_treasure_tables(),
        *_environment_tables(),
    ]
