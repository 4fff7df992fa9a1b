"""
Catalog data for campaign narratives.

Story patterns, character arcs, themes, tropes and narrative techniques,
plus the phrase lists the narrative engine draws descriptions from.
"""

from dataclasses import dataclass

from campaign_assistant.story.catalog import CatalogItem


@dataclass(frozen=True)
class StoryPattern(CatalogItem):
    acts: tuple[str, ...] = ()
    key_elements: tuple[str, ...] = ()


@dataclass(frozen=True)
class CharacterArc(CatalogItem):
    stages: tuple[str, ...] = ()
    traits: tuple[str, ...] = ()


@dataclass(frozen=True)
class Theme(CatalogItem):
    motifs: tuple[str, ...] = ()
    examples: tuple[str, ...] = ()


@dataclass(frozen=True)
class Trope(CatalogItem):
    usage: str = ""
    variations: tuple[str, ...] = ()


@dataclass(frozen=True)
class NarrativeTechnique(CatalogItem):
    purpose: str = ""
    examples: tuple[str, ...] = ()


STORY_PATTERNS = [
    StoryPattern("three_act_structure", "Three-Act Structure", "Setup, confrontation, resolution",
                 acts=("setup", "confrontation", "resolution"),
                 key_elements=("inciting_incident", "plot_point_one", "midpoint",
                               "plot_point_two", "climax", "denouement")),
    StoryPattern("hero_journey", "Hero's Journey", "Monomyth pattern of transformation",
                 acts=("ordinary_world", "call_to_adventure", "transformation", "return"),
                 key_elements=("mentor", "allies", "enemies", "tests", "abyss", "transformation", "atonement")),
    StoryPattern("tragedy", "Tragedy", "Fall from grace due to fatal flaw",
                 acts=("rise", "fall", "catastrophe"),
                 key_elements=("hubris", "nemesis", "peripeteia", "anagnorisis", "catastrophe")),
    StoryPattern("comedy", "Comedy", "Humorous resolution of conflicts",
                 acts=("confusion", "complication", "clarification"),
                 key_elements=("mistaken_identity", "misunderstanding", "reconciliation", "celebration")),
    StoryPattern("quest", "Quest", "Journey to achieve a goal",
                 acts=("preparation", "journey", "achievement"),
                 key_elements=("call", "companions", "challenges", "triumph", "return")),
    StoryPattern("revenge", "Revenge Story", "Pursuit of vengeance and justice",
                 acts=("wrong", "quest", "confrontation"),
                 key_elements=("injustice", "obsession", "pursuit", "climax", "resolution")),
    StoryPattern("redemption", "Redemption Arc", "Path to atonement and forgiveness",
                 acts=("sin", "realization", "atonement"),
                 key_elements=("past_mistakes", "guilt", "change", "sacrifice", "forgiveness")),
    StoryPattern("coming_of_age", "Coming of Age", "Transition from youth to adulthood",
                 acts=("innocence", "awakening", "maturity"),
                 key_elements=("naivety", "challenge", "growth", "responsibility", "wisdom")),
]


CHARACTER_ARCS = [
    CharacterArc("positive_arc", "Positive Arc", "Character grows and improves",
                 stages=("flawed", "challenged", "transformed", "victorious"),
                 traits=("growth", "learning", "overcoming_weakness")),
    CharacterArc("negative_arc", "Negative Arc", "Character deteriorates morally",
                 stages=("moral", "tempted", "corrupted", "doomed"),
                 traits=("corruption", "downfall", "tragedy")),
    CharacterArc("flat_arc", "Flat Arc", "Character teaches others to change",
                 stages=("wise", "teaching", "inspiring", "catalytic"),
                 traits=("wisdom", "teaching", "inspiration")),
    CharacterArc("corruption_arc", "Corruption Arc", "Gradual moral decline",
                 stages=("pure", "compromised", "tainted", "evil"),
                 traits=("temptation", "rationalization", "embrace_of_darkness")),
    CharacterArc("redemption_arc", "Redemption Arc", "Return from darkness to light",
                 stages=("fallen", "remorseful", "atoning", "redeemed"),
                 traits=("regret", "change", "atonement")),
    CharacterArc("tragic_hero", "Tragic Hero", "Noble character brought low by flaw",
                 stages=("noble", "flawed_decision", "downfall", "recognition"),
                 traits=("nobility", "hubris", "catharsis")),
    CharacterArc("anti_hero", "Anti-Hero", "Unconventional hero with questionable methods",
                 stages=("outsider", "effective", "conflicted", "redeemed"),
                 traits=("amorality", "effectiveness", "internal_conflict")),
    CharacterArc("mentor_figure", "Mentor Figure", "Wise guide who helps others grow",
                 stages=("experienced", "teaching", "sacrificing", "legacy"),
                 traits=("wisdom", "sacrifice", "lasting_impact")),
]


THEMES = [
    Theme("power_corruption", "Power and Corruption", "How power changes people",
          motifs=("temptation", "ambition", "downfall"),
          examples=("ruler_becoming_tyrant", "hero_corrupted", "power_struggle")),
    Theme("love_sacrifice", "Love and Sacrifice", "Giving up for those you love",
          motifs=("romantic_love", "familial_love", "self_sacrifice"),
          examples=("parent_child_bond", "forbidden_love", "heroic_sacrifice")),
    Theme("identity_discovery", "Identity and Self-Discovery", "Finding who you really are",
          motifs=("lost_heritage", "hidden_potential", "personal_growth"),
          examples=("royal_blood_discovery", "latent_talents", "philosophical_journey")),
    Theme("justice_vengeance", "Justice vs Vengeance", "Righting wrongs and moral choices",
          motifs=("revenge_cycle", "moral_dilemmas", "redemption"),
          examples=("avenging_family", "corrupt_system", "forgiveness_choice")),
    Theme("good_evil_blur", "Blurring Good and Evil", "Moral ambiguity and gray areas",
          motifs=("anti_hero", "necessary_evil", "sympathetic_villain"),
          examples=("villain_with_reasons", "heroic_crimes", "complex_motivations")),
    Theme("fate_free_will", "Fate vs Free Will", "Destiny versus personal choice",
          motifs=("prophecies", "chosen_ones", "breaking_fate"),
          examples=("prophecy_fulfillment", "destiny_rejection", "fateful_decisions")),
    Theme("loss_grief", "Loss and Grief", "Dealing with death and change",
          motifs=("mourning", "acceptance", "moving_forward"),
          examples=("lost_loved_ones", "changing_world", "personal_loss")),
    Theme("friendship_loyalty", "Friendship and Loyalty", "Bonds between companions",
          motifs=("brotherhood", "betrayal", "reconciliation"),
          examples=("loyal_companions", "friendship_tests", "forged_bonds")),
    Theme("knowledge_danger", "Knowledge and Its Dangers", "Forbidden knowledge and consequences",
          motifs=("ancient_secrets", "madness", "enlightenment"),
          examples=("cursed_tomes", "dangerous_discoveries", "wisdom_price")),
    Theme("change_tradition", "Change vs Tradition", "Progress versus established ways",
          motifs=("cultural_clash", "innovation", "preservation"),
          examples=("new_vs_old_ways", "revolutionary_ideas", "cultural_conflict")),
]


TROPES = [
    Trope("chosen_one", "The Chosen One", "Prophesied hero destined for greatness",
          usage="classic_fantasy_setup", variations=("reluctant_hero", "false_chosen_one", "multiple_chosen")),
    Trope("mentor_death", "Mentor's Death", "Wise teacher dies to motivate hero",
          usage="character_motivation", variations=("sacrifice", "betrayal", "natural_causes")),
    Trope("evil_overlord", "Evil Overlord", "Cartoonishly evil villain with grandiose plans",
          usage="clear_antagonist", variations=("competent_evil", "sympathetic_evil", "parody")),
    Trope("quest_companions", "Colorful Companions", "Diverse party with complementary skills",
          usage="party_dynamics", variations=("fighter_mage_thief", "racial_diversity", "personality_clash")),
    Trope("magical_artifact", "Powerful Artifact", "Ancient item with great power and curse",
          usage="plot_device", variations=("sword_of_power", "cursed_jewelry", "lost_relic")),
    Trope("hidden_royalty", "Secret Royal Heritage", "Commoner discovers noble blood",
          usage="character_reveal", variations=("lost_prince", "magical_heritage", "adopted_royal")),
    Trope("betrayed_ally", "Betrayed by Ally", "Trusted companion turns traitor",
          usage="plot_twist", variations=("mind_control", "greed_motivated", "secret_agenda")),
    Trope("final_boss", "Final Confrontation", "Epic battle with main antagonist",
          usage="climax_structure", variations=("one_on_one", "team_battle", "cosmic_scale")),
    Trope("training_montage", "Intensive Training", "Hero undergoes rigorous preparation",
          usage="character_growth", variations=("mentor_training", "self_training", "magical_enhancement")),
    Trope("love_triangle", "Romantic Triangle", "Three-way romantic tension",
          usage="relationship_drama", variations=("rival_suitors", "forbidden_love", "jealousy_driven")),
]


NARRATIVE_TECHNIQUES = [
    NarrativeTechnique("foreshadowing", "Foreshadowing", "Hinting at future events",
                       purpose="build_tension", examples=("ominous_prophecy", "subtle_clues", "recurring_symbols")),
    NarrativeTechnique("irony", "Dramatic Irony", "Audience knows what characters don't",
                       purpose="create_tension", examples=("doomed_hero", "hidden_identity", "impending_danger")),
    NarrativeTechnique("flashback", "Flashback", "Interrupting present with past events",
                       purpose="character_development",
                       examples=("tragic_backstory", "important_memory", "context_reveal")),
    NarrativeTechnique("cliffhanger", "Cliffhanger", "Ending on moment of high tension",
                       purpose="maintain_interest",
                       examples=("life_threatening_situation", "major_reveal", "unresolved_conflict")),
    NarrativeTechnique("parallel_storytelling", "Parallel Narratives",
                       "Multiple storylines running simultaneously", purpose="complex_world_building",
                       examples=("different_perspectives", "connected_events", "thematic_contrast")),
    NarrativeTechnique("unreliable_narrator", "Unreliable Narrator", "Narrator whose credibility is questionable",
                       purpose="create_uncertainty", examples=("lying_character", "biased_viewpoint", "unstable_mind")),
    NarrativeTechnique("symbolism", "Symbolism", "Using objects/events to represent ideas",
                       purpose="thematic_depth",
                       examples=("magical_artifacts", "recurring_motifs", "metaphorical_elements")),
    NarrativeTechnique("pacing_variation", "Pacing Variation", "Alternating fast and slow narrative speed",
                       purpose="maintain_engagement",
                       examples=("action_sequences", "quiet_reflection", "information_dumps")),
]


# Phrase lists

TITLE_PATTERNS = [
    "The {adjective} {noun} of {character}",
    "{character} and the {noun}",
    "Quest for the {adjective} {noun}",
    "The {character} {verb}",
    "Rise of the {adjective} {character}",
]
TITLE_ADJECTIVES = ["Ancient", "Lost", "Dark", "Hidden", "Eternal", "Cursed", "Sacred", "Legendary",
                    "Forgotten", "Mighty"]
TITLE_NOUNS = ["Crown", "Sword", "Empire", "Prophecy", "Kingdom", "Legacy", "Doom", "Destiny", "Power", "Truth"]
TITLE_VERBS = ["Chronicles", "Saga", "Tale", "Legend", "Epic"]

ELEMENT_DESCRIPTIONS = {
    "inciting_incident": "An event that disrupts the normal world",
    "plot_point_one": "Major turning point that ends the setup",
    "midpoint": "Central reversal that changes everything",
    "plot_point_two": "Final turning point leading to climax",
    "climax": "Moment of greatest confrontation",
    "denouement": "Final resolution and aftermath",
}
DEFAULT_ELEMENT_DESCRIPTION = "A significant story moment"

CONFLICT_TYPES = ["personal", "social", "supernatural", "environmental"]
CONFLICT_DESCRIPTIONS = [
    "A direct confrontation with antagonistic forces",
    "Internal struggle with personal doubts and fears",
    "Social conflict with allies or authority figures",
    "Environmental challenges testing survival skills",
    "Moral dilemma requiring difficult choices",
    "Supernatural threat beyond mortal comprehension",
]

EVENT_DESCRIPTIONS = [
    "A mysterious stranger offers cryptic advice",
    "An ancient artifact reveals hidden knowledge",
    "Betrayal by a trusted ally shakes the group",
    "Discovery of a long-lost secret changes everything",
    "Epic battle tests the limits of courage and skill",
    "Moment of personal growth transforms a character",
    "Alliance with unexpected forces shifts the balance",
    "Sacrificial act demonstrates true heroism",
]

RESOLUTION_TYPES = ["triumphant", "bittersweet", "tragic", "transformative", "ambiguous"]

GROWTH_STAGES = ["novice", "experienced", "master", "legendary"]

CHARACTER_CHALLENGES = [
    "Overcoming a personal fear",
    "Making a difficult moral choice",
    "Learning to trust others",
    "Confronting a past trauma",
    "Developing new skills or abilities",
    "Breaking harmful habits or patterns",
]

CHARACTER_INSIGHTS = [
    "True strength comes from within",
    "Trust must be earned, not given freely",
    "The past shapes us but does not define us",
    "Power without wisdom leads to ruin",
    "True friendship transcends differences",
    "Sometimes the hardest person to forgive is yourself",
]

RELATIONSHIP_CHANGES = [
    "Forming a new alliance",
    "Resolving an old conflict",
    "Deepening an existing friendship",
    "Straining a previously strong bond",
    "Developing romantic feelings",
    "Gaining a new mentor or student",
]
