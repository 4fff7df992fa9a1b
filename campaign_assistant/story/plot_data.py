"""
Catalog data for plot generation: hooks, arcs, encounters, twists and
resolutions, with the phrase lists used to flesh them out.
"""

from dataclasses import dataclass

from campaign_assistant.story.catalog import CatalogItem


@dataclass(frozen=True)
class PlotHook(CatalogItem):
    hook_type: str = "personal"
    difficulty: str = "medium"
    common_settings: tuple[str, ...] = ()


@dataclass(frozen=True)
class PlotArc(CatalogItem):
    stages: tuple[str, ...] = ()
    themes: tuple[str, ...] = ()


@dataclass(frozen=True)
class EncounterTemplate(CatalogItem):
    encounter_type: str = "combat"
    difficulty: str = "medium"
    outcomes: tuple[str, ...] = ()


@dataclass(frozen=True)
class PlotTwist(CatalogItem):
    impact: str = "medium"
    timing: str = "any"


@dataclass(frozen=True)
class Resolution(CatalogItem):
    themes: tuple[str, ...] = ()


PLOT_HOOKS = [
    PlotHook("mysterious_letter", "Mysterious Letter",
             "A sealed letter arrives with no return address, containing cryptic information",
             hook_type="personal", difficulty="low", common_settings=("urban", "rural", "dungeon")),
    PlotHook("disappearing_villagers", "Disappearing Villagers",
             "Local villagers have been vanishing without a trace",
             hook_type="mystery", difficulty="medium", common_settings=("rural", "forest", "mountain")),
    PlotHook("ancient_ruins", "Ancient Ruins Discovery",
             "Explorers uncover ruins containing strange artifacts",
             hook_type="exploration", difficulty="medium", common_settings=("desert", "jungle", "mountain")),
    PlotHook("cursed_artifact", "Cursed Artifact",
             "A powerful item brings doom to its possessor",
             hook_type="supernatural", difficulty="high", common_settings=("dungeon", "tomb", "ruins")),
    PlotHook("political_intrigue", "Political Intrigue",
             "Court politics and assassination plots threaten the realm",
             hook_type="political", difficulty="high", common_settings=("urban", "castle", "court")),
    PlotHook("monster_attack", "Monster Attack",
             "A terrifying creature rampages through civilized lands",
             hook_type="combat", difficulty="medium", common_settings=("rural", "forest", "mountain")),
    PlotHook("lost_heir", "Lost Heir",
             "A noble family searches for their missing child",
             hook_type="personal", difficulty="medium", common_settings=("urban", "rural", "forest")),
    PlotHook("prophecy", "Ancient Prophecy",
             "An old prophecy foretells doom unless heroes intervene",
             hook_type="supernatural", difficulty="high", common_settings=("temple", "ruins", "library")),
    PlotHook("bandit_problem", "Bandit Problem",
             "Local bandits terrorize trade routes and villages",
             hook_type="combat", difficulty="low", common_settings=("rural", "forest", "road")),
    PlotHook("magical_mishap", "Magical Mishap",
             "A spell gone wrong causes chaos in the local area",
             hook_type="supernatural", difficulty="medium", common_settings=("urban", "tower", "laboratory")),
    PlotHook("treasure_map", "Treasure Map",
             "An old map leads to hidden riches",
             hook_type="exploration", difficulty="medium", common_settings=("coast", "island", "mountain")),
    PlotHook("haunted_location", "Haunted Location",
             "A place is plagued by supernatural occurrences",
             hook_type="supernatural", difficulty="high", common_settings=("ruins", "graveyard", "manor")),
]


PLOT_ARCS = [
    PlotArc("hero_journey", "Hero's Journey",
            "The classic monomyth: call to adventure, trials, transformation, return",
            stages=("ordinary_world", "call_to_adventure", "refusal", "mentor", "crossing_threshold", "tests",
                    "approach", "ordeal", "reward", "road_back", "resurrection", "return"),
            themes=("growth", "transformation", "destiny")),
    PlotArc("revenge_tragedy", "Revenge Tragedy", "A quest for vengeance that consumes the seeker",
            stages=("inciting_incident", "quest_begins", "first_success", "escalation", "moral_dilemma",
                    "downfall", "tragic_end"),
            themes=("revenge", "corruption", "tragedy")),
    PlotArc("redemption_arc", "Redemption Arc", "A character seeks to atone for past wrongs",
            stages=("past_revealed", "guilt", "first_step", "setback", "growth", "sacrifice", "redemption"),
            themes=("forgiveness", "change", "atonement")),
    PlotArc("power_corruption", "Power and Corruption", "The corrupting influence of power and authority",
            stages=("rise_to_power", "first_taste", "moral_compromise", "corruption", "confrontation", "fall",
                    "aftermath"),
            themes=("power", "corruption", "hubris")),
    PlotArc("lost_and_found", "Lost and Found", "Searching for something precious that was lost",
            stages=("loss", "search_begins", "clues", "obstacles", "discovery", "reunion", "resolution"),
            themes=("loss", "hope", "recovery")),
    PlotArc("forbidden_knowledge", "Forbidden Knowledge", "The pursuit of dangerous or forbidden information",
            stages=("curiosity", "first_discovery", "warning", "deeper_search", "danger", "consequences",
                    "choice"),
            themes=("knowledge", "danger", "consequences")),
    PlotArc("alliance_betrayal", "Alliance and Betrayal", "Forming alliances that lead to betrayal and conflict",
            stages=("meeting", "alliance", "cooperation", "doubt", "betrayal", "conflict", "resolution"),
            themes=("trust", "betrayal", "loyalty")),
    PlotArc("coming_age", "Coming of Age", "A young character matures through trials and experiences",
            stages=("innocence", "first_challenge", "failure", "growth", "mastery", "responsibility", "maturity"),
            themes=("growth", "maturity", "responsibility")),
]


ENCOUNTERS = [
    EncounterTemplate("bandit_ambush", "Bandit Ambush", "Highway robbers attack the party",
                      encounter_type="combat", difficulty="medium",
                      outcomes=("victory", "defeat", "negotiation", "escape")),
    EncounterTemplate("mysterious_stranger", "Mysterious Stranger", "An enigmatic figure offers help or hindrance",
                      encounter_type="social", difficulty="low",
                      outcomes=("alliance", "betrayal", "information", "conflict")),
    EncounterTemplate("natural_disaster", "Natural Disaster", "Storm, earthquake, or other natural calamity",
                      encounter_type="environmental", difficulty="high",
                      outcomes=("survival", "rescue", "loss", "opportunity")),
    EncounterTemplate("magical_anomaly", "Magical Anomaly", "Strange magical effects in the area",
                      encounter_type="supernatural", difficulty="medium",
                      outcomes=("exploitation", "avoidance", "study", "danger")),
    EncounterTemplate("lost_caravan", "Lost Caravan", "Travelers who have lost their way",
                      encounter_type="social", difficulty="low",
                      outcomes=("rescue", "trade", "information", "threat")),
    EncounterTemplate("ancient_guardian", "Ancient Guardian", "A construct or being protecting something",
                      encounter_type="combat", difficulty="high",
                      outcomes=("defeat", "bypass", "alliance", "destruction")),
    EncounterTemplate("moral_dilemma", "Moral Dilemma", "A choice between right and wrong actions",
                      encounter_type="social", difficulty="medium",
                      outcomes=("good_choice", "evil_choice", "compromise", "avoidance")),
    EncounterTemplate("valuable_discovery", "Valuable Discovery", "Finding treasure, artifacts, or useful items",
                      encounter_type="exploration", difficulty="low",
                      outcomes=("claim", "share", "hide", "trade")),
    EncounterTemplate("rival_party", "Rival Adventurers", "Competing group with similar goals",
                      encounter_type="social", difficulty="medium",
                      outcomes=("alliance", "competition", "conflict", "cooperation")),
    EncounterTemplate("supernatural_event", "Supernatural Event", "Ghosts, visions, or otherworldly occurrences",
                      encounter_type="supernatural", difficulty="high",
                      outcomes=("investigation", "exorcism", "embrace", "flight")),
]


TWISTS = [
    PlotTwist("betrayal", "Betrayal", "An ally turns against the party", impact="high", timing="mid_story"),
    PlotTwist("hidden_identity", "Hidden Identity", "A character is not who they seem", impact="high", timing="any"),
    PlotTwist("false_goal", "False Goal", "The objective was a deception", impact="medium", timing="climax"),
    PlotTwist("unexpected_ally", "Unexpected Ally", "An enemy becomes an ally", impact="medium", timing="mid_story"),
    PlotTwist("personal_connection", "Personal Connection", "The plot connects to a character's backstory",
              impact="high", timing="any"),
    PlotTwist("greater_threat", "Greater Threat", "The real danger is much worse than expected",
              impact="high", timing="mid_story"),
    PlotTwist("moral_ambiguity", "Moral Ambiguity", "The villains have understandable motives",
              impact="medium", timing="any"),
    PlotTwist("time_pressure", "Time Pressure", "A deadline makes the situation urgent",
              impact="medium", timing="mid_story"),
    PlotTwist("illusion_reality", "Illusion vs Reality", "Much of what seemed real was illusion",
              impact="high", timing="climax"),
    PlotTwist("sacrifice_required", "Required Sacrifice", "Success demands a great personal cost",
              impact="high", timing="climax"),
]


RESOLUTIONS = [
    Resolution("victory", "Heroic Victory", "The heroes triumph through skill and courage",
               themes=("triumph", "justice", "heroism")),
    Resolution("bittersweet", "Bittersweet Resolution", "Success comes at a great personal cost",
               themes=("sacrifice", "loss", "growth")),
    Resolution("tragic", "Tragic Ending", "The heroes fail despite their best efforts",
               themes=("failure", "tragedy", "consequences")),
    Resolution("compromise", "Compromise", "A middle ground is reached between extremes",
               themes=("balance", "understanding", "peace")),
    Resolution("transformation", "Transformation", "The characters are forever changed by their experiences",
               themes=("change", "growth", "evolution")),
    Resolution("cycle_continues", "Cycle Continues", "The threat is defeated but similar problems remain",
               themes=("ongoing_struggle", "hope", "resilience")),
    Resolution("new_beginning", "New Beginning", "The adventure opens doors to new possibilities",
               themes=("renewal", "opportunity", "future")),
    Resolution("moral_victory", "Moral Victory", "The heroes lose the battle but win ethically",
               themes=("integrity", "principles", "character")),
]


COMPLICATIONS = [
    "Time-sensitive deadline",
    "Limited resources available",
    "Hostile local authorities",
    "Rival groups competing for the same goal",
    "Unreliable information sources",
    "Personal stakes for party members",
    "Moral dilemmas to resolve",
    "Environmental hazards",
    "Magical interference",
    "Political complications",
]

NPC_TYPES = [
    "mysterious informant",
    "local guide",
    "skeptical official",
    "fellow adventurer",
    "mystical sage",
    "shady merchant",
    "loyal retainer",
    "child with information",
    "rival explorer",
    "supernatural being",
]

REVEAL_MOMENTS = [
    "During a quiet conversation",
    "In the heat of battle",
    "Through a magical vision",
    "When examining evidence",
    "During a moment of crisis",
    "Through an overheard conversation",
    "In a dream or nightmare",
    "When consulting ancient texts",
    "During a ritual or ceremony",
    "At the climax of the adventure",
]

CAMPAIGN_TITLE_ADJECTIVES = ["Ancient", "Lost", "Forgotten", "Dark", "Hidden", "Eternal", "Cursed", "Sacred",
                             "Forbidden", "Legendary"]
CAMPAIGN_TITLE_NOUNS = ["Secrets", "Empire", "Prophecy", "Crown", "Sword", "Tomb", "Temple", "Kingdom",
                        "Legacy", "Doom"]
