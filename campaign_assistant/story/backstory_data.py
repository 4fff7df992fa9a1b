"""
Catalog data for character backstories.

Backgrounds, origins, motivations, flaws, ideals, bonds and personality
traits for D&D 3.5 characters, plus the class to background compatibility
map used when a character class is known.
"""

from dataclasses import dataclass

from campaign_assistant.story.catalog import CatalogItem


@dataclass(frozen=True)
class Background(CatalogItem):
    skill_proficiencies: tuple[str, ...] = ()
    equipment: tuple[str, ...] = ()
    features: tuple[str, ...] = ()


@dataclass(frozen=True)
class Origin(CatalogItem):
    influences: tuple[str, ...] = ()
    common_motivations: tuple[str, ...] = ()


@dataclass(frozen=True)
class Motivation(CatalogItem):
    alignment_tendency: str = "any"
    common_backgrounds: tuple[str, ...] = ()


@dataclass(frozen=True)
class Flaw(CatalogItem):
    impact: str = ""


@dataclass(frozen=True)
class Ideal(CatalogItem):
    alignment: str = "neutral"


@dataclass(frozen=True)
class Bond(CatalogItem):
    strength: str = "strong"


@dataclass(frozen=True)
class PersonalityTrait(CatalogItem):
    positive: bool = True


# Backgrounds a class is likely to come from
CLASS_BACKGROUNDS: dict[str, tuple[str, ...]] = {
    "fighter": ("soldier", "noble", "criminal"),
    "wizard": ("scholar", "noble", "merchant"),
    "cleric": ("priest", "noble", "soldier"),
    "rogue": ("criminal", "merchant", "artisan"),
    "ranger": ("adventurer", "soldier", "criminal"),
    "paladin": ("soldier", "noble", "priest"),
    "barbarian": ("adventurer", "soldier", "criminal"),
    "bard": ("noble", "merchant", "criminal"),
    "druid": ("adventurer", "priest", "scholar"),
    "monk": ("priest", "criminal", "adventurer"),
}


BACKGROUNDS = [
    Background(
        "noble", "Noble",
        "Born into aristocracy, trained in courtly arts and politics",
        skill_proficiencies=("Diplomacy", "Sense Motive", "Knowledge (nobility)"),
        equipment=("Fine clothes", "Signet ring", "Letter of marque"),
        features=("Position of Privilege", "Noble Education"),
    ),
    Background(
        "merchant", "Merchant",
        "Trained in the arts of trade and commerce",
        skill_proficiencies=("Appraise", "Diplomacy", "Sense Motive"),
        equipment=("Fine clothes", "Scale", "Merchant's license"),
        features=("Guild Membership", "Barter Master"),
    ),
    Background(
        "scholar", "Scholar",
        "Dedicated to the pursuit of knowledge and learning",
        skill_proficiencies=("Knowledge (any)", "Decipher Script", "Research"),
        equipment=("Bottle of ink", "Quill", "Book of lore"),
        features=("Researcher", "Librarian Access"),
    ),
    Background(
        "criminal", "Criminal",
        "Skilled in the arts of stealth and deception",
        skill_proficiencies=("Bluff", "Hide", "Sleight of Hand"),
        equipment=("Crowbar", "Dark clothes", "Thieves' tools"),
        features=("Criminal Contact", "Street Knowledge"),
    ),
    Background(
        "soldier", "Soldier",
        "Trained in the discipline of military service",
        skill_proficiencies=("Athletics", "Intimidate", "Survival"),
        equipment=("Uniform", "Insignia of rank", "Common weapon"),
        features=("Military Rank", "Tactics Training"),
    ),
    Background(
        "priest", "Priest",
        "Devoted to service of a deity or religious order",
        skill_proficiencies=("Knowledge (religion)", "Diplomacy", "Heal"),
        equipment=("Holy symbol", "Prayer book", "Incense"),
        features=("Divine Blessing", "Temple Access"),
    ),
    Background(
        "artisan", "Artisan",
        "Master of a particular craft or trade skill",
        skill_proficiencies=("Craft (any)", "Appraise", "Profession"),
        equipment=("Artisan's tools", "Guild letter", "Fine clothes"),
        features=("Guild Membership", "Masterwork Item"),
    ),
    Background(
        "adventurer", "Adventurer",
        "Veteran of many dangerous expeditions",
        skill_proficiencies=("Survival", "Knowledge (dungeoneering)", "Spot"),
        equipment=("Backpack", "Map case", "Lucky charm"),
        features=("Adventurer's Luck", "Explorer's Knowledge"),
    ),
]


ORIGINS = [
    Origin("city_raised", "City-Raised", "Grew up in a bustling urban environment",
           influences=("Street-smart", "Cultured", "Ambitious"),
           common_motivations=("wealth", "power", "fame")),
    Origin("rural_raised", "Rural-Raised", "Raised in a quiet countryside setting",
           influences=("Hard-working", "Traditional", "Nature-loving"),
           common_motivations=("family", "community", "tradition")),
    Origin("noble_birth", "Noble Birth", "Born into wealth and privilege",
           influences=("Refined", "Ambitious", "Entitled"),
           common_motivations=("legacy", "honor", "power")),
    Origin("street_urchin", "Street Urchin", "Survived on the streets from a young age",
           influences=("Resourceful", "Cynical", "Independent"),
           common_motivations=("survival", "revenge", "redemption")),
    Origin("military_family", "Military Family", "Raised in a family with strong military traditions",
           influences=("Disciplined", "Loyal", "Strategic"),
           common_motivations=("duty", "honor", "service")),
    Origin("religious_upbringing", "Religious Upbringing", "Raised in a devout religious household",
           influences=("Spiritual", "Moral", "Devout"),
           common_motivations=("faith", "redemption", "divine_purpose")),
    Origin("tragic_loss", "Marked by Tragedy", "Life shaped by significant loss or trauma",
           influences=("Resilient", "Guarded", "Driven"),
           common_motivations=("revenge", "justice", "healing")),
    Origin("mysterious_past", "Mysterious Past", "Background shrouded in mystery and secrets",
           influences=("Enigmatic", "Cautious", "Curious"),
           common_motivations=("discovery", "identity", "freedom")),
]


MOTIVATIONS = [
    Motivation("wealth", "Pursuit of Wealth", "Driven by the desire for riches and material success",
               alignment_tendency="any", common_backgrounds=("merchant", "noble", "criminal")),
    Motivation("power", "Quest for Power", "Seeks influence and control over others",
               alignment_tendency="lawful or evil", common_backgrounds=("noble", "soldier", "criminal")),
    Motivation("knowledge", "Thirst for Knowledge", "Driven to understand the mysteries of the world",
               alignment_tendency="any", common_backgrounds=("scholar", "priest", "adventurer")),
    Motivation("justice", "Fight for Justice", "Committed to righting wrongs and protecting the innocent",
               alignment_tendency="good", common_backgrounds=("soldier", "priest", "adventurer")),
    Motivation("revenge", "Path of Revenge", "Motivated by the need to avenge past wrongs",
               alignment_tendency="any", common_backgrounds=("criminal", "adventurer")),
    Motivation("redemption", "Search for Redemption", "Seeking to atone for past mistakes",
               alignment_tendency="good", common_backgrounds=("criminal", "priest")),
    Motivation("freedom", "Love of Freedom", "Values personal liberty above all else",
               alignment_tendency="chaotic", common_backgrounds=("criminal", "adventurer")),
    Motivation("duty", "Sense of Duty", "Driven by obligations and responsibilities",
               alignment_tendency="lawful", common_backgrounds=("soldier", "noble", "priest")),
    Motivation("honor", "Code of Honor", "Guided by a strict personal code of ethics",
               alignment_tendency="lawful good", common_backgrounds=("soldier", "noble")),
    Motivation("curiosity", "Insatiable Curiosity", "Driven by the need to explore and discover",
               alignment_tendency="any", common_backgrounds=("scholar", "adventurer")),
]


FLAWS = [
    Flaw("greedy", "Greed", "Obsessed with acquiring wealth and possessions",
         impact="May take unnecessary risks for treasure"),
    Flaw("arrogant", "Arrogance", "Believes oneself superior to others",
         impact="May underestimate opponents or allies"),
    Flaw("impulsive", "Impulsiveness", "Acts without thinking through consequences",
         impact="May make rash decisions in critical moments"),
    Flaw("cowardly", "Cowardice", "Flees from danger rather than facing it",
         impact="May abandon allies in combat"),
    Flaw("deceptive", "Deception", "Habitually lies and misleads others",
         impact="Allies may not trust the character"),
    Flaw("reckless", "Recklessness", "Takes unnecessary risks without regard for safety",
         impact="May endanger self and others"),
    Flaw("vengeful", "Vengefulness", "Obsessed with getting even with those who wronged them",
         impact="May prioritize revenge over more important goals"),
    Flaw("addictive", "Addiction", "Dependent on a substance or behavior",
         impact="May suffer withdrawal or make poor decisions"),
    Flaw("paranoid", "Paranoia", "Believes others are plotting against them",
         impact="May alienate allies and miss opportunities"),
    Flaw("selfish", "Selfishness", "Puts own needs above others' welfare",
         impact="May sacrifice allies for personal gain"),
]


IDEALS = [
    Ideal("tradition", "Tradition", "The ancient ways of our ancestors must be preserved", alignment="lawful"),
    Ideal("charity", "Charity", "I help the less fortunate and protect the weak", alignment="good"),
    Ideal("change", "Change", "We must change the world for the better", alignment="chaotic"),
    Ideal("power", "Power", "The strong should rule over the weak", alignment="evil"),
    Ideal("knowledge", "Knowledge", "The pursuit of knowledge is the highest calling", alignment="neutral"),
    Ideal("freedom", "Freedom", "Everyone should be free to pursue their own destiny", alignment="chaotic"),
    Ideal("justice", "Justice", "Justice must be served, no matter the cost", alignment="lawful"),
    Ideal("community", "Community", "The needs of the community come before individual desires", alignment="good"),
    Ideal("ambition", "Ambition", "I strive for greatness and will not be held back", alignment="neutral"),
    Ideal("honor", "Honor", "My word is my bond, and I will die before breaking it", alignment="lawful good"),
]


BONDS = [
    Bond("family", "Family", "I would do anything for my family"),
    Bond("mentor", "Mentor", "My mentor gave me purpose and direction"),
    Bond("romantic_partner", "Romantic Partner", "My love gives me strength and hope"),
    Bond("close_friend", "Close Friend", "My closest friend has always been there for me"),
    Bond("guild", "Guild Membership", "My guild is my extended family", strength="medium"),
    Bond("homeland", "Homeland", "I will defend my homeland to the death"),
    Bond("deity", "Devotion to Deity", "My deity guides my every action"),
    Bond("oath", "Sacred Oath", "I have sworn an oath that I will uphold"),
    Bond("artifact", "Sacred Artifact", "I must protect this artifact at all costs", strength="medium"),
    Bond("cause", "Greater Cause", "I fight for a cause greater than myself"),
]


PERSONALITY_TRAITS = [
    PersonalityTrait("brave", "Brave", "I face danger without fear"),
    PersonalityTrait("curious", "Curious", "I am always eager to learn new things"),
    PersonalityTrait("loyal", "Loyal", "I stand by my friends and allies"),
    PersonalityTrait("wise", "Wise", "I have learned much from my experiences"),
    PersonalityTrait("charismatic", "Charismatic", "I can charm and persuade others easily"),
    PersonalityTrait("stubborn", "Stubborn", "I refuse to change my mind once it's made up", positive=False),
    PersonalityTrait("suspicious", "Suspicious", "I trust no one until they prove themselves", positive=False),
    PersonalityTrait("reckless", "Reckless", "I act without considering the consequences", positive=False),
    PersonalityTrait("moody", "Moody", "My emotions change quickly and unpredictably", positive=False),
    PersonalityTrait("obsessive", "Obsessive", "I become fixated on certain ideas or objects", positive=False),
    PersonalityTrait("optimistic", "Optimistic", "I always look on the bright side of things"),
    PersonalityTrait("pessimistic", "Pessimistic", "I expect the worst in every situation", positive=False),
    PersonalityTrait("generous", "Generous", "I give freely of my time and resources"),
    PersonalityTrait("selfish", "Selfish", "I put my own needs above others'", positive=False),
    PersonalityTrait("patient", "Patient", "I can wait calmly for the right moment"),
    PersonalityTrait("impatient", "Impatient", "I want everything done immediately", positive=False),
    PersonalityTrait("honest", "Honest", "I always tell the truth, even when it hurts"),
    PersonalityTrait("deceptive", "Deceptive", "I use lies and tricks to get what I want", positive=False),
    PersonalityTrait("confident", "Confident", "I believe in my own abilities"),
    PersonalityTrait("insecure", "Insecure", "I doubt my own worth and abilities", positive=False),
]
