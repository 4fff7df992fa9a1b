"""
Catalog data for character relationships: relationship types, social
dynamics, conflict types and alliance types, plus the trust ladder and the
social encounter phrase tables.
"""

from dataclasses import dataclass

from campaign_assistant.story.catalog import CatalogItem


@dataclass(frozen=True)
class RelationshipType(CatalogItem):
    positive: bool = True
    dynamics: tuple[str, ...] = ()
    common_conflicts: tuple[str, ...] = ()


@dataclass(frozen=True)
class SocialDynamic(CatalogItem):
    stages: tuple[str, ...] = ()
    triggers: tuple[str, ...] = ()


@dataclass(frozen=True)
class ConflictType(CatalogItem):
    resolution_methods: tuple[str, ...] = ()
    escalation_risk: str = "medium"


@dataclass(frozen=True)
class AllianceType(CatalogItem):
    benefits: tuple[str, ...] = ()
    risks: tuple[str, ...] = ()


RELATIONSHIP_TYPES = [
    RelationshipType("mentor_student", "Mentor-Student", "A wise teacher guiding a younger learner",
                     dynamics=("teaching", "growth", "respect"),
                     common_conflicts=("disagreement", "betrayal", "separation")),
    RelationshipType("rival_competitor", "Rival-Competitor", "Competitors vying for the same goals",
                     positive=False, dynamics=("competition", "jealousy", "respect"),
                     common_conflicts=("sabotage", "confrontation", "alliance")),
    RelationshipType("loyal_companion", "Loyal Companion", "Trustworthy friend and ally",
                     dynamics=("loyalty", "support", "trust"),
                     common_conflicts=("misunderstanding", "sacrifice", "loss")),
    RelationshipType("romantic_partner", "Romantic Partner", "Lovers with deep emotional connection",
                     dynamics=("love", "passion", "commitment"),
                     common_conflicts=("jealousy", "betrayal", "separation")),
    RelationshipType("family_bond", "Family Bond", "Blood relatives with shared history",
                     dynamics=("loyalty", "obligation", "heritage"),
                     common_conflicts=("inheritance", "disagreement", "estrangement")),
    RelationshipType("patron_client", "Patron-Client", "Benefactor providing support for service",
                     dynamics=("obligation", "service", "protection"),
                     common_conflicts=("debt", "betrayal", "independence")),
    RelationshipType("adversary_enemy", "Adversary-Enemy", "Hostile opponents with personal vendetta",
                     positive=False, dynamics=("hatred", "revenge", "conflict"),
                     common_conflicts=("escalation", "alliance", "truce")),
    RelationshipType("professional_colleague", "Professional Colleague", "Work associates with shared profession",
                     dynamics=("cooperation", "respect", "competition"),
                     common_conflicts=("politics", "resources", "advancement")),
    RelationshipType("spiritual_guide", "Spiritual Guide", "Religious or philosophical mentor",
                     dynamics=("faith", "guidance", "enlightenment"),
                     common_conflicts=("doubt", "heresy", "crisis_of_faith")),
    RelationshipType("child_parent", "Child-Parent", "Parental figure and offspring relationship",
                     dynamics=("nurture", "authority", "growth"),
                     common_conflicts=("rebellion", "disappointment", "independence")),
    RelationshipType("savior_grateful", "Savior-Grateful", "Someone saved who owes a life debt",
                     dynamics=("gratitude", "loyalty", "service"),
                     common_conflicts=("debt_repayment", "independence", "betrayal")),
    RelationshipType("former_lover", "Former Lover", "Past romantic partners with lingering feelings",
                     positive=False, dynamics=("nostalgia", "regret", "awkwardness"),
                     common_conflicts=("reconciliation", "revenge", "moving_on")),
]


SOCIAL_DYNAMICS = [
    SocialDynamic("trust_building", "Trust Building", "Gradually establishing confidence and reliability",
                  stages=("acquaintance", "casual_friend", "trusted_ally", "confidant"),
                  triggers=("shared_experience", "proven_loyalty", "mutual_benefit")),
    SocialDynamic("power_struggle", "Power Struggle", "Competition for dominance and control",
                  stages=("tension", "confrontation", "escalation", "resolution"),
                  triggers=("authority_challenge", "resource_competition", "leadership_vacuum")),
    SocialDynamic("romantic_tension", "Romantic Tension", "Building attraction and emotional connection",
                  stages=("attraction", "flirting", "courtship", "commitment"),
                  triggers=("physical_attraction", "shared_values", "emotional_vulnerability")),
    SocialDynamic("loyalty_test", "Loyalty Test", "Challenging the strength of commitment",
                  stages=("doubt", "test", "proof", "reinforcement"),
                  triggers=("crisis_situation", "temptation", "conflicting_interests")),
    SocialDynamic("betrayal_recovery", "Betrayal Recovery", "Healing from broken trust and rebuilding",
                  stages=("shock", "confrontation", "forgiveness", "rebuilding"),
                  triggers=("discovered_deception", "broken_promise", "abandonment")),
    SocialDynamic("alliance_formation", "Alliance Formation", "Creating cooperative partnerships",
                  stages=("negotiation", "agreement", "cooperation", "strengthening"),
                  triggers=("common_goal", "mutual_threat", "shared_benefits")),
    SocialDynamic("rivalry_escalation", "Rivalry Escalation", "Growing competitive tension",
                  stages=("competition", "sabotage", "confrontation", "feud"),
                  triggers=("resource_scarcity", "personal_ambition", "past_grudge")),
    SocialDynamic("mentor_guidance", "Mentor Guidance", "Teaching and personal development",
                  stages=("assessment", "teaching", "testing", "graduation"),
                  triggers=("recognized_potential", "willing_student", "knowledge_gap")),
]


CONFLICT_TYPES = [
    ConflictType("ideological_difference", "Ideological Difference",
                 "Fundamental disagreement on beliefs or principles",
                 resolution_methods=("debate", "compromise", "conversion", "tolerance"), escalation_risk="medium"),
    ConflictType("resource_competition", "Resource Competition",
                 "Fighting over limited resources or opportunities",
                 resolution_methods=("negotiation", "sharing", "competition", "stealing"), escalation_risk="high"),
    ConflictType("personal_betrayal", "Personal Betrayal", "Violation of trust or loyalty",
                 resolution_methods=("confrontation", "forgiveness", "revenge", "separation"),
                 escalation_risk="high"),
    ConflictType("authority_challenge", "Authority Challenge", "Questioning or resisting leadership",
                 resolution_methods=("negotiation", "force", "compromise", "replacement"), escalation_risk="medium"),
    ConflictType("romantic_rivalry", "Romantic Rivalry", "Competition for romantic affection",
                 resolution_methods=("confrontation", "courtship", "sabotage", "acceptance"),
                 escalation_risk="medium"),
    ConflictType("family_dishonor", "Family Dishonor", "Bringing shame to family or heritage",
                 resolution_methods=("atonement", "exile", "redemption", "forgiveness"), escalation_risk="high"),
    ConflictType("professional_jealousy", "Professional Jealousy", "Envy of another's success or position",
                 resolution_methods=("self_improvement", "sabotage", "alliance", "acceptance"),
                 escalation_risk="low"),
    ConflictType("cultural_clash", "Cultural Clash", "Conflict between different cultural backgrounds",
                 resolution_methods=("education", "tolerance", "integration", "separation"),
                 escalation_risk="medium"),
    ConflictType("moral_dilemma", "Moral Dilemma", "Ethical choices that strain relationships",
                 resolution_methods=("discussion", "compromise", "sacrifice", "division"), escalation_risk="medium"),
    ConflictType("debt_obligation", "Debt Obligation", "Unpaid debts creating tension",
                 resolution_methods=("payment", "forgiveness", "service", "default"), escalation_risk="medium"),
]


ALLIANCE_TYPES = [
    AllianceType("military_alliance", "Military Alliance", "Cooperative defense and warfare agreement",
                 benefits=("shared_defense", "combined_forces", "strategic_advantage"),
                 risks=("betrayal", "unequal_commitment", "leadership_conflicts")),
    AllianceType("trade_agreement", "Trade Agreement", "Economic cooperation and commerce partnership",
                 benefits=("economic_growth", "resource_access", "market_expansion"),
                 risks=("cheating", "market_disruption", "dependency")),
    AllianceType("political_marriage", "Political Marriage", "Alliance sealed through marriage",
                 benefits=("family_ties", "political_stability", "heir_production"),
                 risks=("personal_incompatibility", "scandal", "inheritance_conflicts")),
    AllianceType("guild_membership", "Guild Membership", "Professional organization affiliation",
                 benefits=("training", "networking", "protection"),
                 risks=("dues_obligations", "guild_politics", "expulsion")),
    AllianceType("blood_oath", "Blood Oath", "Sacred binding agreement with severe consequences",
                 benefits=("unbreakable_loyalty", "magical_binding", "honor_enforcement"),
                 risks=("severe_penalties", "magical_interference", "honor_conflicts")),
    AllianceType("mutual_defense_pact", "Mutual Defense Pact", "Agreement to defend each other against threats",
                 benefits=("security", "deterrence", "coordinated_response"),
                 risks=("false_flags", "alliance_stretching", "resource_drain")),
    AllianceType("research_collaboration", "Research Collaboration",
                 "Joint intellectual or magical research efforts",
                 benefits=("knowledge_sharing", "resource_pooling", "accelerated_progress"),
                 risks=("intellectual_property", "research_sabotage", "discovery_conflicts")),
    AllianceType("criminal_syndicate", "Criminal Syndicate", "Organized crime cooperative network",
                 benefits=("resource_sharing", "protection", "market_control"),
                 risks=("law_enforcement", "internal_betrayal", "competition")),
]


# Lower bound of each trust band, highest first
TRUST_LADDER = [
    (80, "Unwavering Trust"),
    (60, "Strong Trust"),
    (40, "Moderate Trust"),
    (20, "Limited Trust"),
    (0, "Neutral"),
    (-20, "Distrust"),
    (-40, "Strong Distrust"),
    (-60, "Deep Distrust"),
    (-80, "Hatred"),
]
LOWEST_TRUST_DESCRIPTION = "Utter Loathing"

POSITIVE_DYNAMICS = frozenset(
    ["teaching", "growth", "respect", "loyalty", "support", "trust", "love", "passion", "commitment"]
)

SOCIAL_ENCOUNTER_TYPES = ["conversation", "conflict", "alliance_offer", "betrayal", "support", "romance"]

SOCIAL_ENCOUNTER_DESCRIPTIONS = {
    "conversation": [
        "A casual conversation reveals shared interests",
        "Deep discussion uncovers personal philosophies",
        "Light banter builds rapport and understanding",
    ],
    "conflict": [
        "Disagreement sparks heated argument",
        "Competing goals create immediate tension",
        "Past grievances resurface in confrontation",
    ],
    "alliance_offer": [
        "Proposal of mutual cooperation and benefit",
        "Suggestion of joint venture or partnership",
        "Offer of assistance in time of need",
    ],
    "betrayal": [
        "Discovery of hidden agenda or deception",
        "Broken promise damages trust irreparably",
        "Secret alliance with enemies revealed",
    ],
    "support": [
        "Offer of help during difficult circumstances",
        "Emotional support and encouragement provided",
        "Practical assistance offered freely",
    ],
    "romance": [
        "Sparks of attraction begin to develop",
        "Romantic tension builds between characters",
        "Expressions of affection and interest",
    ],
}

SOCIAL_ENCOUNTER_OUTCOMES = {
    "conversation": ["trust_increase", "understanding", "friendship"],
    "conflict": ["escalation", "resolution", "avoidance"],
    "alliance_offer": ["acceptance", "rejection", "negotiation"],
    "betrayal": ["confrontation", "forgiveness", "revenge"],
    "support": ["gratitude", "reciprocation", "dependence"],
    "romance": ["reciprocation", "rejection", "complication"],
}
